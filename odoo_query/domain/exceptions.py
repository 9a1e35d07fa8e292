"""Error taxonomy shared by every layer of the connector."""
from __future__ import annotations

from typing import Optional


class OdooQueryError(Exception):
  """Base exception for all connector errors."""


class ValidationError(OdooQueryError, ValueError):
  """A required parameter is missing or malformed.

  Always raised locally, before any network traffic.
  """

  def __init__(
    self,
    message: str,
    parameter: Optional[str] = None,
    operation: Optional[str] = None,
  ):
    super().__init__(message)
    self.parameter = parameter
    self.operation = operation

  @classmethod
  def missing(cls, parameter: str, operation: str) -> 'ValidationError':
    return cls(
      f"Parameter '{parameter}' is required for operation '{operation}'",
      parameter=parameter,
      operation=operation,
    )


class AuthenticationError(OdooQueryError):
  """The server rejected the credentials or the authentication call failed."""


class RemoteOperationError(OdooQueryError):
  """A model method call failed on the transport or on the server."""

  def __init__(
    self,
    message: str,
    model: Optional[str] = None,
    method: Optional[str] = None,
  ):
    super().__init__(message)
    self.model = model
    self.method = method


class IllegalStateError(OdooQueryError, RuntimeError):
  """A model method was invoked without a session."""
