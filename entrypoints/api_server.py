"""API server entrypoint."""
from __future__ import annotations

import sys
from pathlib import Path

# Add project root to Python path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

import uvicorn

from odoo_query.adapters.input.api.fastapi_adapter import FastAPIAdapter
from odoo_query.common.config import get_settings
from odoo_query.common.container import create_query_service
from odoo_query.common.logging_config import configure_logging


def get_app():
  settings = get_settings()
  configure_logging(settings.log_level)
  adapter = FastAPIAdapter(create_query_service(settings))
  return adapter.app


def main() -> None:
  uvicorn.run(get_app(), host='0.0.0.0', port=8000)


if __name__ == '__main__':
  main()
