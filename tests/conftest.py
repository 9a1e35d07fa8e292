from __future__ import annotations

from copy import deepcopy
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple

import pytest

from odoo_query.application.handlers.query_handler import QueryHandler
from odoo_query.domain.value_objects.connection_config import ConnectionConfig
from odoo_query.ports.output.rpc_transport import COMMON_PATH, OBJECT_PATH, RpcFault

URL = 'http://odoo.test:8069'
DB = 'demo'
USERNAME = 'admin'
PASSWORD = 'admin'
UID = 2

_OPERATORS = {
  '=': lambda actual, expected: actual == expected,
  '!=': lambda actual, expected: actual != expected,
  '>': lambda actual, expected: actual is not None and actual > expected,
  '<': lambda actual, expected: actual is not None and actual < expected,
  'in': lambda actual, expected: actual in expected,
}


class FakeOdooTransport:
  """In-memory stand-in for an Odoo server speaking the XML-RPC call shapes."""

  def __init__(self, records: Optional[Dict[str, Dict[int, Dict[str, Any]]]] = None):
    self.calls: List[Tuple[str, str, List[Any]]] = []
    self.credentials = {(USERNAME, PASSWORD): UID}
    self.records = records if records is not None else {
      'res.partner': {
        1: {'name': 'Azure Interior', 'email': 'azure@example.com', 'is_company': True},
        2: {'name': 'Deco Addict', 'email': 'deco@example.com', 'is_company': True},
        3: {'name': 'Brandon Freeman', 'email': 'brandon@example.com', 'is_company': False},
      },
      'res.users': {
        2: {'name': 'Administrator', 'login': 'admin', 'active': True},
        6: {'name': 'Marc Demo', 'login': 'demo', 'active': True},
      },
    }
    self.next_id = 100
    self.fail_with: Optional[Exception] = None
    self.closed = False

  @property
  def object_calls(self) -> List[List[Any]]:
    return [params for path, method, params in self.calls if path == OBJECT_PATH]

  def close(self) -> None:
    self.closed = True

  def call(self, endpoint_path: str, method: str, params: Sequence[Any]) -> Any:
    self.calls.append((endpoint_path, method, deepcopy(list(params))))
    if self.fail_with is not None:
      raise self.fail_with

    if endpoint_path == COMMON_PATH and method == 'version':
      return {'server_version': '17.0', 'server_serie': '17.0', 'protocol_version': 1}
    if endpoint_path == COMMON_PATH and method == 'authenticate':
      db, login, password, _ = params
      if db != DB:
        raise RpcFault(f'database "{db}" does not exist')
      return self.credentials.get((login, password), False)
    if endpoint_path == OBJECT_PATH and method == 'execute_kw':
      model, model_method, args = params[3], params[4], params[5]
      kwargs = params[6] if len(params) > 6 else {}
      if model not in self.records:
        raise RpcFault(f"Object {model} doesn't exist")
      return getattr(self, f'_{model_method}')(self.records[model], *args, **kwargs)
    raise RpcFault(f'Method not found: {method}')

  @staticmethod
  def _matches(record_id: int, record: Mapping[str, Any], domain: Sequence[Sequence[Any]]) -> bool:
    for field_name, operator, expected in domain:
      actual = record_id if field_name == 'id' else record.get(field_name)
      if not _OPERATORS[operator](actual, expected):
        return False
    return True

  @staticmethod
  def _project(record_id: int, record: Mapping[str, Any], fields: Optional[Sequence[str]]) -> Dict[str, Any]:
    row = {'id': record_id}
    for name, value in record.items():
      if not fields or name in fields:
        row[name] = value
    return row

  def _search(self, table, domain, limit=None, offset=None):
    ids = [record_id for record_id, record in sorted(table.items()) if self._matches(record_id, record, domain)]
    ids = ids[offset or 0:]
    return ids[:limit] if limit is not None else ids

  def _search_read(self, table, domain, fields=None, limit=None, offset=None):
    return [self._project(record_id, table[record_id], fields) for record_id in self._search(table, domain, limit, offset)]

  def _read(self, table, ids, fields=None):
    return [self._project(record_id, table[record_id], fields) for record_id in ids if record_id in table]

  def _search_count(self, table, domain):
    return len(self._search(table, domain))

  def _create(self, table, values):
    self.next_id += 1
    table[self.next_id] = dict(values)
    return self.next_id

  def _write(self, table, ids, values):
    for record_id in ids:
      if record_id not in table:
        raise RpcFault(f'Record does not exist or has been deleted: {record_id}')
      table[record_id].update(values)
    return True

  def _unlink(self, table, ids):
    for record_id in ids:
      table.pop(record_id, None)
    return True


class InMemoryRowStorage:
  def __init__(self) -> None:
    self.stored: List[List[Dict[str, Any]]] = []

  def store(self, rows):
    self.stored.append([dict(row) for row in rows])
    return f'memory://rows/{len(self.stored)}', len(rows)


@pytest.fixture
def connection() -> ConnectionConfig:
  return ConnectionConfig(url=URL, db=DB, username=USERNAME, password=PASSWORD)


@pytest.fixture
def transport() -> FakeOdooTransport:
  return FakeOdooTransport()


@pytest.fixture
def storage() -> InMemoryRowStorage:
  return InMemoryRowStorage()


@pytest.fixture
def query_handler(transport: FakeOdooTransport, storage: InMemoryRowStorage) -> QueryHandler:
  return QueryHandler(lambda url: transport, storage=storage)
