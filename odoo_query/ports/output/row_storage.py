"""Output port for persisting result rows outside of the output envelope."""
from __future__ import annotations

from typing import Any, Mapping, Protocol, Sequence, Tuple


class RowStorage(Protocol):
  def store(self, rows: Sequence[Mapping[str, Any]]) -> Tuple[str, int]:
    """Persist ``rows`` and return a reference to them with the stored row count."""
    ...
