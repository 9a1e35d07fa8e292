"""Value object for the Odoo server connection parameters."""
from __future__ import annotations

from dataclasses import dataclass, field
from urllib.parse import urlparse

from odoo_query.domain.exceptions import ValidationError


@dataclass(frozen=True)
class ConnectionConfig:
  """Immutable connection parameters for a single invocation."""

  url: str
  db: str
  username: str
  password: str = field(repr=False)

  def __post_init__(self) -> None:
    for name in ('url', 'db', 'username', 'password'):
      value = getattr(self, name)
      if not isinstance(value, str) or not value.strip():
        raise ValidationError(f'{name} is required', parameter=name)

    parsed = urlparse(self.url)
    if parsed.scheme not in ('http', 'https') or not parsed.netloc:
      raise ValidationError(
        f'url must be an http(s) base URL, got: {self.url}',
        parameter='url',
      )

    object.__setattr__(self, 'url', self.url.rstrip('/'))
