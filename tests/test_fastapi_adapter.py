import pytest
from fastapi.testclient import TestClient

from odoo_query.adapters.input.api.fastapi_adapter import FastAPIAdapter
from odoo_query.application.services.query_service_impl import QueryServiceImpl

CONNECTION = {'url': 'http://odoo.test:8069', 'db': 'demo', 'username': 'admin', 'password': 'admin'}


class TestFastAPIAdapter:

  @pytest.fixture
  def client(self, query_handler) -> TestClient:
    return TestClient(FastAPIAdapter(QueryServiceImpl(query_handler)).app)

  def test_health(self, client: TestClient):
    assert client.get('/health').json() == {'status': 'healthy'}

  def test_query_fetch_one(self, client: TestClient):
    response = client.post('/api/v1/query', json={
      **CONNECTION,
      'model': 'res.partner',
      'operation': 'search_read',
      'filters': [['is_company', '=', False]],
      'fields': ['name'],
      'fetch_type': 'fetch_one',
    })

    assert response.status_code == 200
    assert response.json() == {'size': 1, 'row': {'id': 3, 'name': 'Brandon Freeman'}}

  def test_create(self, client: TestClient):
    response = client.post('/api/v1/query', json={
      **CONNECTION, 'model': 'res.partner', 'operation': 'create', 'values': {'name': 'Acme'},
    })

    assert response.status_code == 200
    assert response.json() == {'size': 1, 'affected_ids': [101]}

  def test_validation_error(self, client: TestClient, transport):
    response = client.post('/api/v1/query', json={**CONNECTION, 'model': 'res.partner', 'operation': 'read'})

    assert response.status_code == 422
    assert "'ids'" in response.json()['detail']
    assert transport.calls == []

  def test_authentication_error(self, client: TestClient):
    response = client.post('/api/v1/query', json={**CONNECTION, 'password': 'wrong', 'model': 'res.partner'})

    assert response.status_code == 401
    assert 'authenticate' in response.json()['detail']

  def test_remote_error(self, client: TestClient):
    response = client.post('/api/v1/query', json={**CONNECTION, 'model': 'x.unknown'})

    assert response.status_code == 502
    assert 'x.unknown' in response.json()['detail']

  def test_version(self, client: TestClient):
    response = client.post('/api/v1/version', json=CONNECTION)

    assert response.status_code == 200
    assert response.json()['server_serie'] == '17.0'
