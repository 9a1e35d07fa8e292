"""FastAPI adapter exposing HTTP endpoints."""
from __future__ import annotations

from typing import Any, Dict, List, Optional

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field

from odoo_query.application.commands.query_command import QueryCommand
from odoo_query.domain.exceptions import (
  AuthenticationError,
  OdooQueryError,
  RemoteOperationError,
  ValidationError,
)
from odoo_query.domain.value_objects.connection_config import ConnectionConfig
from odoo_query.domain.value_objects.operation import FetchType, Operation
from odoo_query.ports.input.query_service import QueryService


class ConnectionPayload(BaseModel):
  url: str = Field(..., description='Base URL of the Odoo server')
  db: str = Field(..., description='Odoo database name')
  username: str = Field(..., description='Odoo login')
  password: str = Field(..., description='Odoo password or API key')


class QueryPayload(ConnectionPayload):
  """Invocation parameters of one operation on an Odoo model."""
  model: str = Field(..., description="Odoo model, e.g. 'res.partner'")
  operation: Operation = Field(default=Operation.SEARCH_READ, description='Operation to perform')
  filters: Optional[List[List[Any]]] = Field(default=None, description='Domain as [field, operator, value] triples')
  fields: Optional[List[str]] = Field(default=None, description='Fields to return')
  values: Optional[Dict[str, Any]] = Field(default=None, description='Field values for create/write')
  ids: Optional[List[int]] = Field(default=None, description='Record ids for read/write/unlink')
  limit: Optional[int] = Field(default=None, ge=0, description='Maximum number of records')
  offset: Optional[int] = Field(default=None, ge=0, description='Number of records to skip')
  fetch_type: FetchType = Field(default=FetchType.FETCH, description='How results are returned')

  model_config = {
    'json_schema_extra': {
      'examples': [
        {
          'url': 'https://my-odoo-instance.com',
          'db': 'my-database',
          'username': 'user@example.com',
          'password': 'supersecret',
          'model': 'res.partner',
          'operation': 'search_read',
          'filters': [['is_company', '=', True]],
          'fields': ['name', 'email'],
          'limit': 10,
          'fetch_type': 'fetch',
        }
      ]
    }
  }


def _status_code(error: OdooQueryError) -> int:
  if isinstance(error, ValidationError):
    return 422
  if isinstance(error, AuthenticationError):
    return 401
  if isinstance(error, RemoteOperationError):
    return 502
  return 500


class FastAPIAdapter:
  def __init__(self, query_service: QueryService):
    self._query_service = query_service
    self.app = FastAPI(
      title='Odoo Query API',
      version='0.1.0',
      description='Runs search, read, create, write and delete operations on Odoo models over XML-RPC.',
    )
    self._configure_routes()

  def _configure_routes(self) -> None:
    @self.app.post('/api/v1/query', tags=['Query'])
    def query(payload: QueryPayload):
      """Execute one operation and return the output envelope."""
      try:
        command = QueryCommand(**payload.model_dump())
        output = self._query_service.execute(command)
      except OdooQueryError as exc:
        raise HTTPException(status_code=_status_code(exc), detail=str(exc))
      return output.to_dict()

    @self.app.post('/api/v1/version', tags=['Query'])
    def version(payload: ConnectionPayload):
      """Return the Odoo server version information."""
      try:
        connection = ConnectionConfig(**payload.model_dump())
        return self._query_service.server_version(connection)
      except OdooQueryError as exc:
        raise HTTPException(status_code=_status_code(exc), detail=str(exc))

    @self.app.get('/health', tags=['Health'])
    def health():
      """Health check endpoint."""
      return {'status': 'healthy'}
