"""Output port for the RPC transport used to reach an Odoo server."""
from __future__ import annotations

from typing import Any, Optional, Protocol, Sequence

COMMON_PATH = '/xmlrpc/2/common'
OBJECT_PATH = '/xmlrpc/2/object'


class RpcTransport(Protocol):
  """Blocking remote procedure call against one server.

  Two endpoint paths are used: ``COMMON_PATH`` for ``authenticate`` and
  ``version``, ``OBJECT_PATH`` for ``execute_kw``.
  """

  def call(self, endpoint_path: str, method: str, params: Sequence[Any]) -> Any:
    """Invoke ``method`` with positional ``params`` on ``endpoint_path``.

    Raises:
      RpcFault: The server answered with a fault.
      RpcTransportError: The call could not be completed or decoded.
    """
    ...

  def close(self) -> None:
    """Release connections held by the transport."""
    ...


class RpcError(Exception):
  """Base exception for transport-level failures."""


class RpcFault(RpcError):
  """Fault returned by the remote server."""

  def __init__(self, fault_string: str, fault_code: Optional[Any] = None):
    super().__init__(fault_string)
    self.fault_string = fault_string
    self.fault_code = fault_code


class RpcTransportError(RpcError):
  """HTTP, connection or decoding failure."""

  def __init__(self, message: str, status_code: Optional[int] = None):
    super().__init__(message)
    self.status_code = status_code
