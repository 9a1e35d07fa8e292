"""Maps an operation to its validation, remote call shape and result handling."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Tuple

from odoo_query.application.services.remote_call_executor import RemoteCallExecutor
from odoo_query.domain.entities.remote_result import (
  Acknowledgement,
  CreatedRecord,
  FetchedRow,
  FetchedRows,
  NoRows,
  OperationResult,
  RawResult,
  RecordCount,
  RecordIds,
  RecordRows,
  Row,
  StoredRows,
)
from odoo_query.domain.exceptions import RemoteOperationError, ValidationError
from odoo_query.domain.value_objects.connection_config import ConnectionConfig
from odoo_query.domain.value_objects.operation import FetchType, Operation
from odoo_query.domain.value_objects.query_parameters import QueryParameters
from odoo_query.ports.output.row_storage import RowStorage

logger = logging.getLogger(__name__)

REQUIRED_PARAMETERS: Dict[Operation, Tuple[str, ...]] = {
  Operation.SEARCH_READ: (),
  Operation.READ: ('ids',),
  Operation.CREATE: ('values',),
  Operation.WRITE: ('ids', 'values'),
  Operation.UNLINK: ('ids',),
  Operation.SEARCH: (),
  Operation.SEARCH_COUNT: (),
}


@dataclass(frozen=True)
class RemoteCall:
  """Method name with the positional and keyword arguments to send."""
  method: str
  args: List[Any]
  kwargs: Dict[str, Any] = field(default_factory=dict)


def _optional_kwargs(**candidates: Any) -> Dict[str, Any]:
  # Unset parameters must be absent from the payload, never sent as null.
  return {key: value for key, value in candidates.items() if value is not None}


def build_call(operation: Operation, parameters: QueryParameters) -> RemoteCall:
  """Return the remote call for ``operation``; parameters must already be validated."""
  fields = list(parameters.fields) if parameters.fields else None
  ids = list(parameters.ids or ())

  if operation is Operation.SEARCH_READ:
    return RemoteCall(
      operation.method,
      [parameters.domain],
      _optional_kwargs(fields=fields, limit=parameters.limit, offset=parameters.offset),
    )
  if operation is Operation.READ:
    return RemoteCall(operation.method, [ids], _optional_kwargs(fields=fields))
  if operation is Operation.CREATE:
    return RemoteCall(operation.method, [dict(parameters.values or {})])
  if operation is Operation.WRITE:
    return RemoteCall(operation.method, [ids, dict(parameters.values or {})])
  if operation is Operation.UNLINK:
    return RemoteCall(operation.method, [ids])
  if operation is Operation.SEARCH:
    return RemoteCall(
      operation.method,
      [parameters.domain],
      _optional_kwargs(limit=parameters.limit, offset=parameters.offset),
    )
  if operation is Operation.SEARCH_COUNT:
    return RemoteCall(operation.method, [parameters.domain])
  raise ValueError(f'Unsupported operation: {operation!r}')


def _unexpected(model: str, operation: Operation, response: Any) -> RemoteOperationError:
  return RemoteOperationError(
    f'Failed to execute {model}.{operation.method}: unexpected response {response!r}',
    model=model,
    method=operation.method,
  )


def _is_integer(value: Any) -> bool:
  return isinstance(value, int) and not isinstance(value, bool)


def wrap_response(model: str, operation: Operation, response: Any) -> RawResult:
  """Check the response shape for ``operation`` and tag it."""
  if operation in (Operation.SEARCH_READ, Operation.READ):
    if not isinstance(response, list) or not all(isinstance(row, Mapping) for row in response):
      raise _unexpected(model, operation, response)
    return RecordRows([dict(row) for row in response])
  if operation is Operation.SEARCH:
    if not isinstance(response, list) or not all(_is_integer(record_id) for record_id in response):
      raise _unexpected(model, operation, response)
    return RecordIds(list(response))
  if operation is Operation.CREATE:
    if not _is_integer(response):
      raise _unexpected(model, operation, response)
    return CreatedRecord(response)
  if operation in (Operation.WRITE, Operation.UNLINK):
    if not isinstance(response, bool):
      raise _unexpected(model, operation, response)
    return Acknowledgement(response)
  if operation is Operation.SEARCH_COUNT:
    if not _is_integer(response):
      raise _unexpected(model, operation, response)
    return RecordCount(response)
  raise ValueError(f'Unsupported operation: {operation!r}')


class OperationDispatcher:
  """Validates, executes and post-processes one operation.

  Only ``search_read``, ``read`` and ``search`` are subject to the fetch type;
  the other operations accept it and ignore it.
  """

  def __init__(self, executor: RemoteCallExecutor, storage: Optional[RowStorage] = None):
    self._executor = executor
    self._storage = storage

  def validate(
    self,
    model: Optional[str],
    operation: Operation,
    parameters: QueryParameters,
    fetch_type: FetchType = FetchType.FETCH,
  ) -> None:
    if not isinstance(model, str) or not model.strip():
      raise ValidationError.missing('model', operation.value)

    for name in REQUIRED_PARAMETERS[operation]:
      if not getattr(parameters, name):
        raise ValidationError.missing(name, operation.value)

    if fetch_type is FetchType.STORE and operation.returns_records and self._storage is None:
      raise ValidationError(
        f"Fetch type 'store' requires a row storage for operation '{operation.value}'",
        parameter='fetch_type',
        operation=operation.value,
      )

  def dispatch(
    self,
    uid: Optional[int],
    connection: ConnectionConfig,
    model: str,
    operation: Operation,
    parameters: QueryParameters,
    fetch_type: FetchType = FetchType.FETCH,
  ) -> OperationResult:
    self.validate(model, operation, parameters, fetch_type)

    call = build_call(operation, parameters)
    response = self._executor.invoke(
      uid,
      connection.db,
      connection.password,
      model,
      call.method,
      call.args,
      call.kwargs,
    )
    raw = wrap_response(model, operation, response)

    if isinstance(raw, (RecordRows, RecordIds)):
      return self._apply_fetch_type(raw, fetch_type)
    return raw

  def _apply_fetch_type(self, raw: RawResult, fetch_type: FetchType) -> OperationResult:
    if fetch_type is FetchType.NONE:
      return NoRows()

    rows: List[Row] = raw.as_rows() if isinstance(raw, RecordIds) else raw.rows

    if fetch_type is FetchType.FETCH_ONE:
      return FetchedRow(rows[0] if rows else None)
    if fetch_type is FetchType.FETCH:
      return FetchedRows(rows)
    if fetch_type is FetchType.STORE:
      if self._storage is None:
        raise ValidationError("Fetch type 'store' requires a row storage", parameter='fetch_type')
      reference, count = self._storage.store(rows)
      logger.debug('Stored %s rows at %s', count, reference)
      return StoredRows(reference, count)
    raise ValueError(f'Unsupported fetch type: {fetch_type!r}')
