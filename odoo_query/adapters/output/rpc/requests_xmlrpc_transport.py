"""XML-RPC transport implemented on top of requests."""
from __future__ import annotations

import logging
import xmlrpc.client
from typing import Any, Optional, Sequence
from xml.parsers.expat import ExpatError

import requests

from odoo_query.ports.output.rpc_transport import RpcFault, RpcTransport, RpcTransportError

logger = logging.getLogger(__name__)


class RequestsXmlRpcTransport(RpcTransport):
  """Sends XML-RPC method calls as HTTP POST requests.

  The request body is encoded and the response decoded with ``xmlrpc.client``;
  the HTTP exchange itself goes through a ``requests`` session so timeouts,
  proxies and TLS settings behave like every other HTTP call.
  """

  def __init__(
    self,
    base_url: str,
    timeout: float = 30,
    session: Optional[requests.Session] = None,
  ) -> None:
    self._base_url = base_url.rstrip('/')
    self._timeout = timeout
    self._owns_session = session is None
    self._session = session or requests.Session()

  def call(self, endpoint_path: str, method: str, params: Sequence[Any]) -> Any:
    url = f'{self._base_url}{endpoint_path}'
    try:
      body = xmlrpc.client.dumps(tuple(params), methodname=method, allow_none=True)
    except (TypeError, OverflowError) as e:
      raise RpcTransportError(f'Cannot encode {method} arguments as XML-RPC: {e}') from e

    try:
      response = self._session.post(
        url,
        data=body.encode('utf-8'),
        headers={'Content-Type': 'text/xml'},
        timeout=self._timeout,
      )
      response.raise_for_status()
    except requests.HTTPError as e:
      status_code = e.response.status_code if e.response is not None else None
      raise RpcTransportError(str(e), status_code=status_code) from e
    except requests.RequestException as e:
      raise RpcTransportError(str(e)) from e

    try:
      result, _ = xmlrpc.client.loads(response.content, use_builtin_types=True)
    except xmlrpc.client.Fault as fault:
      logger.debug('Fault %s returned by %s on %s', fault.faultCode, method, url)
      raise RpcFault(fault.faultString, fault_code=fault.faultCode) from fault
    except (ExpatError, xmlrpc.client.ResponseError) as e:
      raise RpcTransportError(f'Invalid XML-RPC response from {url}: {e}') from e

    return result[0] if result else None

  def close(self) -> None:
    if self._owns_session:
      self._session.close()
