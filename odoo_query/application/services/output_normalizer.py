"""Builds the output envelope from an operation result."""
from __future__ import annotations

from typing import Optional, Sequence

from odoo_query.application.queries.query_output import QueryOutput
from odoo_query.domain.entities.remote_result import (
  Acknowledgement,
  CreatedRecord,
  FetchedRow,
  FetchedRows,
  NoRows,
  OperationResult,
  RecordCount,
  StoredRows,
)
from odoo_query.domain.value_objects.operation import FetchType, Operation


def build_output(
  operation: Operation,
  fetch_type: FetchType,
  result: OperationResult,
  original_ids: Optional[Sequence[int]] = None,
) -> QueryOutput:
  """Populate exactly the slots that apply to ``result``.

  ``operation`` and ``fetch_type`` are only used in error messages: the result
  type already encodes which projection happened. For ``write`` and ``unlink``
  the affected ids are the ids the caller sent, not a list confirmed by the
  server.
  """
  if isinstance(result, NoRows):
    return QueryOutput(size=0)
  if isinstance(result, FetchedRow):
    return QueryOutput(size=1 if result.row is not None else 0, row=result.row)
  if isinstance(result, FetchedRows):
    rows = list(result.rows)
    return QueryOutput(size=len(rows), rows=rows)
  if isinstance(result, StoredRows):
    return QueryOutput(size=result.count, storage_reference=result.reference)
  if isinstance(result, RecordCount):
    return QueryOutput(size=result.count)
  if isinstance(result, CreatedRecord):
    return QueryOutput(size=1, affected_ids=[result.id])
  if isinstance(result, Acknowledgement):
    ids = list(original_ids or ())
    return QueryOutput(size=len(ids), affected_ids=ids)
  raise TypeError(
    f'Cannot build output for {operation.value} ({fetch_type.value}) from {type(result).__name__}'
  )
