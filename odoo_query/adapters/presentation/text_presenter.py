"""Plain text presenter for terminal output."""
from __future__ import annotations

from odoo_query.application.queries.query_output import QueryOutput
from odoo_query.ports.input.result_presenter import ResultPresenter


class TextPresenter(ResultPresenter):
  def present(self, output: QueryOutput) -> str:
    lines = [
      '=' * 60,
      'RESULT',
      '=' * 60,
      f'Records affected/returned: {output.size}',
      '',
    ]

    if output.row is not None:
      lines.extend(['=' * 60, 'ROW', '=' * 60])
      for key, value in output.row.items():
        lines.append(f'- {key}: {value}')
      lines.append('')

    if output.rows is not None:
      lines.extend(['=' * 60, 'ROWS', '=' * 60])
      for row in output.rows:
        lines.append(', '.join(f'{key}={value}' for key, value in row.items()))
      lines.append('')

    if output.storage_reference is not None:
      lines.append(f'Stored at: {output.storage_reference}')
    if output.affected_ids is not None:
      lines.append(f"Affected ids: {', '.join(str(record_id) for record_id in output.affected_ids)}")
    return '\n'.join(lines)

  def present_error(self, error: Exception) -> str:
    return f'ERROR: {error}'
