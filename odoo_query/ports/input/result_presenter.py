"""Input port for formatting query outputs."""
from __future__ import annotations

from typing import Any, Protocol

from odoo_query.application.queries.query_output import QueryOutput


class ResultPresenter(Protocol):
  def present(self, output: QueryOutput) -> Any:
    ...

  def present_error(self, error: Exception) -> Any:
    ...
