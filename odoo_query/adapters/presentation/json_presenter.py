"""JSON presenter implementation."""
from __future__ import annotations

import json

from odoo_query.application.queries.query_output import QueryOutput
from odoo_query.ports.input.result_presenter import ResultPresenter


class JsonPresenter(ResultPresenter):
  def present(self, output: QueryOutput) -> str:
    return json.dumps(output.to_dict(), ensure_ascii=False, indent=2, default=str)

  def present_error(self, error: Exception) -> str:
    return json.dumps(
      {'status': 'error', 'type': type(error).__name__, 'error': str(error)},
      ensure_ascii=False,
      indent=2,
    )
