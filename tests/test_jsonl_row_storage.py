import json
from datetime import datetime
from pathlib import Path
from urllib.parse import urlparse
from urllib.request import url2pathname

from odoo_query.adapters.output.storage.jsonl_row_storage import JsonLinesRowStorage


def test_store_writes_one_line_per_row(tmp_path: Path):
  storage = JsonLinesRowStorage(tmp_path / 'rows')
  rows = [
    {'id': 1, 'name': 'Azure Interior', 'write_date': datetime(2024, 5, 1, 12, 30)},
    {'id': 2, 'name': 'Deco Addict', 'write_date': None},
  ]

  reference, count = storage.store(rows)

  assert count == 2
  assert reference.startswith('file://')
  path = Path(url2pathname(urlparse(reference).path))
  assert path.parent == (tmp_path / 'rows').resolve()
  lines = [json.loads(line) for line in path.read_text(encoding='utf-8').splitlines()]
  assert lines == [
    {'id': 1, 'name': 'Azure Interior', 'write_date': '2024-05-01 12:30:00'},
    {'id': 2, 'name': 'Deco Addict', 'write_date': None},
  ]


def test_store_empty(tmp_path: Path):
  reference, count = JsonLinesRowStorage(tmp_path).store([])

  assert count == 0
  assert Path(url2pathname(urlparse(reference).path)).read_text(encoding='utf-8') == ''


def test_each_call_gets_its_own_file(tmp_path: Path):
  storage = JsonLinesRowStorage(tmp_path)
  first, _ = storage.store([{'id': 1}])
  second, _ = storage.store([{'id': 1}])
  assert first != second
