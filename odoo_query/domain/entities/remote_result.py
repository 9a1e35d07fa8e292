"""Closed set of result shapes produced by a model method call.

The raw shapes mirror what each remote method returns. The fetched shapes are
what remains of a record collection once the fetch type has been applied.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union

Row = Dict[str, Any]


@dataclass(frozen=True)
class RecordRows:
  """Rows returned by ``search_read`` and ``read``."""
  rows: List[Row]


@dataclass(frozen=True)
class RecordIds:
  """Bare ids returned by ``search``."""
  ids: List[int]

  def as_rows(self) -> List[Row]:
    return [{'id': record_id} for record_id in self.ids]


@dataclass(frozen=True)
class CreatedRecord:
  id: int


@dataclass(frozen=True)
class Acknowledgement:
  success: bool


@dataclass(frozen=True)
class RecordCount:
  count: int


@dataclass(frozen=True)
class NoRows:
  """The collection was discarded (fetch type ``none``)."""


@dataclass(frozen=True)
class FetchedRow:
  row: Optional[Row] = None


@dataclass(frozen=True)
class FetchedRows:
  rows: List[Row] = field(default_factory=list)


@dataclass(frozen=True)
class StoredRows:
  reference: str
  count: int


RawResult = Union[RecordRows, RecordIds, CreatedRecord, Acknowledgement, RecordCount]
FetchedResult = Union[NoRows, FetchedRow, FetchedRows, StoredRows]
OperationResult = Union[FetchedResult, CreatedRecord, Acknowledgement, RecordCount]
