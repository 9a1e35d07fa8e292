import pytest

from odoo_query.application.services.session_authenticator import SessionAuthenticator
from odoo_query.domain.exceptions import AuthenticationError, RemoteOperationError
from odoo_query.domain.value_objects.connection_config import ConnectionConfig
from odoo_query.ports.output.rpc_transport import COMMON_PATH, RpcTransportError


class TestSessionAuthenticator:

  def test_authenticate(self, transport, connection: ConnectionConfig):
    uid = SessionAuthenticator(transport, connection).authenticate()

    assert uid == 2
    assert transport.calls == [(COMMON_PATH, 'authenticate', ['demo', 'admin', 'admin', {}])]

  def test_wrong_password(self, transport):
    connection = ConnectionConfig(url='http://host', db='demo', username='admin', password='wrong')

    with pytest.raises(AuthenticationError) as exc_info:
      SessionAuthenticator(transport, connection).authenticate()
    assert 'authenticate' in str(exc_info.value)
    assert 'wrong' not in str(exc_info.value)

  def test_unknown_database(self, transport):
    connection = ConnectionConfig(url='http://host', db='missing', username='admin', password='admin')

    with pytest.raises(AuthenticationError) as exc_info:
      SessionAuthenticator(transport, connection).authenticate()
    assert 'authenticate' in str(exc_info.value)
    assert 'missing' in str(exc_info.value)

  def test_transport_failure(self, transport, connection: ConnectionConfig):
    transport.fail_with = RpcTransportError('Connection refused')

    with pytest.raises(AuthenticationError, match='Failed to authenticate with Odoo: Connection refused'):
      SessionAuthenticator(transport, connection).authenticate()
    assert len(transport.calls) == 1

  def test_server_version(self, transport, connection: ConnectionConfig):
    version = SessionAuthenticator(transport, connection).get_server_version()

    assert version['server_version'] == '17.0'
    assert transport.calls == [(COMMON_PATH, 'version', [])]

  def test_server_version_failure(self, transport, connection: ConnectionConfig):
    transport.fail_with = RpcTransportError('timed out')

    with pytest.raises(RemoteOperationError) as exc_info:
      SessionAuthenticator(transport, connection).get_server_version()
    assert exc_info.value.method == 'version'
