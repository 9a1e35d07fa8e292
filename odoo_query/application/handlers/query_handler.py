"""Application handler that runs one query invocation end to end."""
from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Optional

from odoo_query.application.commands.query_command import QueryCommand
from odoo_query.application.handlers.operation_dispatcher import OperationDispatcher
from odoo_query.application.queries.query_output import QueryOutput
from odoo_query.application.services.output_normalizer import build_output
from odoo_query.application.services.remote_call_executor import RemoteCallExecutor
from odoo_query.application.services.session_authenticator import SessionAuthenticator
from odoo_query.domain.value_objects.connection_config import ConnectionConfig
from odoo_query.ports.output.row_storage import RowStorage
from odoo_query.ports.output.rpc_transport import RpcTransport

logger = logging.getLogger(__name__)

TransportFactory = Callable[[str], RpcTransport]


class QueryHandler:
  """Coordinates authenticate, dispatch and normalisation for a command.

  Every invocation gets its own transport, closed once the invocation ends;
  errors propagate to the caller untouched.
  """

  def __init__(self, transport_factory: TransportFactory, storage: Optional[RowStorage] = None):
    self._transport_factory = transport_factory
    self._storage = storage

  def handle(self, command: QueryCommand) -> QueryOutput:
    transport = self._transport_factory(command.connection.url)
    try:
      return self._run(transport, command)
    finally:
      transport.close()

  def _run(self, transport: RpcTransport, command: QueryCommand) -> QueryOutput:
    connection = command.connection
    parameters = command.parameters
    operation = command.operation
    fetch_type = command.fetch_type

    dispatcher = OperationDispatcher(RemoteCallExecutor(transport), storage=self._storage)
    dispatcher.validate(command.model, operation, parameters, fetch_type)

    logger.info('Connecting to Odoo server: %s with database: %s', connection.url, connection.db)
    uid = SessionAuthenticator(transport, connection).authenticate()
    logger.info('Authentication successful. Executing %s operation on model %s', operation.value, command.model)

    result = dispatcher.dispatch(uid, connection, command.model, operation, parameters, fetch_type)
    output = build_output(operation, fetch_type, result, parameters.ids)

    logger.info('Operation %s completed successfully. Records affected/returned: %s', operation.value, output.size)
    return output

  def server_version(self, connection: ConnectionConfig) -> Dict[str, Any]:
    transport = self._transport_factory(connection.url)
    try:
      return SessionAuthenticator(transport, connection).get_server_version()
    finally:
      transport.close()
