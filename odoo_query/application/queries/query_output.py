"""Uniform output envelope of a query invocation."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional


@dataclass
class QueryOutput:
  """Only the slots relevant to the operation and fetch type are set.

  Callers key off presence, so unset slots stay ``None`` here and are left out
  of :meth:`to_dict`.
  """

  size: int = 0
  row: Optional[Dict[str, Any]] = None
  rows: Optional[List[Dict[str, Any]]] = None
  storage_reference: Optional[str] = None
  affected_ids: Optional[List[int]] = None

  def to_dict(self) -> Dict[str, Any]:
    payload: Dict[str, Any] = {'size': self.size}
    if self.row is not None:
      payload['row'] = self.row
    if self.rows is not None:
      payload['rows'] = self.rows
    if self.storage_reference is not None:
      payload['storage_reference'] = self.storage_reference
    if self.affected_ids is not None:
      payload['affected_ids'] = self.affected_ids
    return payload
