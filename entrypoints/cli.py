"""CLI entrypoint for odoo-query."""
from __future__ import annotations

import sys
from pathlib import Path

# Add project root to Python path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from odoo_query.adapters.input.cli.cli_adapter import CLIAdapter
from odoo_query.adapters.presentation.json_presenter import JsonPresenter
from odoo_query.adapters.presentation.text_presenter import TextPresenter
from odoo_query.common.config import get_settings
from odoo_query.common.container import create_query_service
from odoo_query.common.logging_config import configure_logging


def main() -> None:
  settings = get_settings()
  configure_logging(settings.log_level)
  query_service = create_query_service(settings)
  presenters = {'text': TextPresenter(), 'json': JsonPresenter()}
  CLIAdapter(query_service, presenters, settings).run()


if __name__ == '__main__':
  main()
