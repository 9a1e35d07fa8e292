"""Simple dependency wiring helpers."""
from __future__ import annotations

from functools import lru_cache, partial
from typing import Optional

from odoo_query.adapters.output.rpc.requests_xmlrpc_transport import RequestsXmlRpcTransport
from odoo_query.adapters.output.storage.jsonl_row_storage import JsonLinesRowStorage
from odoo_query.application.handlers.query_handler import QueryHandler
from odoo_query.application.services.query_service_impl import QueryServiceImpl
from odoo_query.common.config import Settings, get_settings


def build_query_service(settings: Settings) -> QueryServiceImpl:
  transport_factory = partial(RequestsXmlRpcTransport, timeout=settings.timeout)
  storage = JsonLinesRowStorage(settings.storage_dir)
  return QueryServiceImpl(QueryHandler(transport_factory, storage=storage))


@lru_cache(maxsize=1)
def create_query_service(settings: Optional[Settings] = None) -> QueryServiceImpl:
  return build_query_service(settings or get_settings())
