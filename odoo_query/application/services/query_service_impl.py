"""Implementation of the query service port."""
from __future__ import annotations

from typing import Any, Dict

from odoo_query.application.commands.query_command import QueryCommand
from odoo_query.application.handlers.query_handler import QueryHandler
from odoo_query.application.queries.query_output import QueryOutput
from odoo_query.domain.value_objects.connection_config import ConnectionConfig
from odoo_query.ports.input.query_service import QueryService


class QueryServiceImpl(QueryService):
  """Concrete implementation that delegates to the query handler."""

  def __init__(self, query_handler: QueryHandler) -> None:
    self._query_handler = query_handler

  def execute(self, command: QueryCommand) -> QueryOutput:
    return self._query_handler.handle(command)

  def server_version(self, connection: ConnectionConfig) -> Dict[str, Any]:
    return self._query_handler.server_version(connection)
