"""Row storage writing one JSON document per line to local files."""
from __future__ import annotations

import json
import tempfile
import uuid
from pathlib import Path
from typing import Any, Mapping, Optional, Sequence, Tuple

from odoo_query.ports.output.row_storage import RowStorage


class JsonLinesRowStorage(RowStorage):
  def __init__(self, directory: Optional[Path] = None) -> None:
    self._directory = Path(directory) if directory else Path(tempfile.gettempdir()) / 'odoo-query'

  def store(self, rows: Sequence[Mapping[str, Any]]) -> Tuple[str, int]:
    self._directory.mkdir(parents=True, exist_ok=True)
    path = self._directory / f'{uuid.uuid4().hex}.jsonl'

    count = 0
    with path.open('w', encoding='utf-8') as handle:
      for row in rows:
        handle.write(json.dumps(dict(row), ensure_ascii=False, default=str))
        handle.write('\n')
        count += 1

    return path.resolve().as_uri(), count
