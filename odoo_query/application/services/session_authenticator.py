"""Exchanges Odoo credentials for a session uid."""
from __future__ import annotations

import logging
from typing import Any, Dict

from odoo_query.domain.exceptions import AuthenticationError, RemoteOperationError
from odoo_query.domain.value_objects.connection_config import ConnectionConfig
from odoo_query.ports.output.rpc_transport import COMMON_PATH, RpcError, RpcTransport

logger = logging.getLogger(__name__)


class SessionAuthenticator:
  """Opens a single-use session on the common endpoint.

  Nothing is cached: every call to :meth:`authenticate` is a new round trip.
  """

  def __init__(self, transport: RpcTransport, connection: ConnectionConfig):
    self._transport = transport
    self._connection = connection

  def authenticate(self) -> int:
    """Return the uid of the authenticated user.

    Raises:
      AuthenticationError: The credentials were rejected or the call failed.
    """
    connection = self._connection
    logger.debug('Authenticating with Odoo server: %s', connection.url)

    try:
      result = self._transport.call(
        COMMON_PATH,
        'authenticate',
        [connection.db, connection.username, connection.password, {}],
      )
    except RpcError as e:
      logger.error(
        "Authentication failed for user '%s' on database '%s': %s",
        connection.username, connection.db, e,
      )
      raise AuthenticationError(f'Failed to authenticate with Odoo: {e}') from e

    # Odoo answers ``False`` rather than a fault when the credentials are wrong.
    if isinstance(result, bool) or not isinstance(result, int) or result < 0:
      logger.error(
        "Authentication rejected for user '%s' on database '%s'",
        connection.username, connection.db,
      )
      raise AuthenticationError(
        f"Failed to authenticate with Odoo: invalid credentials for user '{connection.username}' "
        f"on database '{connection.db}' (server answered {result!r})"
      )

    logger.debug('Authentication successful, user ID: %s', result)
    return result

  def get_server_version(self) -> Dict[str, Any]:
    """Return the server version information; requires no session."""
    try:
      result = self._transport.call(COMMON_PATH, 'version', [])
    except RpcError as e:
      logger.error('Failed to get version info: %s', e)
      raise RemoteOperationError(f'Failed to get Odoo version: {e}', method='version') from e

    if not isinstance(result, dict):
      raise RemoteOperationError(f'Unexpected version response from Odoo: {result!r}', method='version')
    return result
