"""Input port defining the query service contract."""
from __future__ import annotations

from typing import Any, Dict, Protocol

from odoo_query.application.commands.query_command import QueryCommand
from odoo_query.application.queries.query_output import QueryOutput
from odoo_query.domain.value_objects.connection_config import ConnectionConfig


class QueryService(Protocol):
  def execute(self, command: QueryCommand) -> QueryOutput:
    ...

  def server_version(self, connection: ConnectionConfig) -> Dict[str, Any]:
    ...
