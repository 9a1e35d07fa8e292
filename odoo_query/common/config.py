"""Application-level configuration utilities."""
from __future__ import annotations

from dataclasses import dataclass, field
from functools import lru_cache
from os import getenv
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv


@dataclass(frozen=True)
class Settings:
  """Immutable application settings loaded from environment variables."""

  odoo_url: Optional[str] = None
  odoo_db: Optional[str] = None
  odoo_username: Optional[str] = None
  odoo_password: Optional[str] = field(default=None, repr=False)
  timeout: float = 30.0
  storage_dir: Optional[Path] = None
  log_level: str = 'INFO'


@lru_cache(maxsize=1)
def get_settings() -> Settings:
  """Load settings from environment variables once per process."""
  env_path = Path(__file__).resolve().parents[2] / '.env'
  if env_path.exists():
    load_dotenv(env_path)
  else:
    load_dotenv()

  raw_timeout = getenv('ODOO_TIMEOUT', '30')
  try:
    timeout = float(raw_timeout)
  except ValueError:
    raise ValueError(f'ODOO_TIMEOUT must be a number of seconds, got: {raw_timeout}') from None
  if timeout <= 0:
    raise ValueError('ODOO_TIMEOUT must be positive')

  storage_dir = getenv('ODOO_STORAGE_DIR')

  return Settings(
    odoo_url=getenv('ODOO_URL'),
    odoo_db=getenv('ODOO_DB'),
    odoo_username=getenv('ODOO_USERNAME'),
    odoo_password=getenv('ODOO_PASSWORD'),
    timeout=timeout,
    storage_dir=Path(storage_dir) if storage_dir else None,
    log_level=getenv('LOG_LEVEL', 'INFO').upper(),
  )
