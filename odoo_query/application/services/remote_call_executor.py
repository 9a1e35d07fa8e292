"""Issues authenticated ``execute_kw`` calls on the object endpoint."""
from __future__ import annotations

import logging
from typing import Any, List, Mapping, Optional, Sequence

from odoo_query.domain.exceptions import IllegalStateError, RemoteOperationError
from odoo_query.ports.output.rpc_transport import OBJECT_PATH, RpcError, RpcTransport

logger = logging.getLogger(__name__)


class RemoteCallExecutor:
  def __init__(self, transport: RpcTransport):
    self._transport = transport

  def invoke(
    self,
    uid: Optional[int],
    db: str,
    password: str,
    model: str,
    method: str,
    args: Sequence[Any],
    kwargs: Optional[Mapping[str, Any]] = None,
  ) -> Any:
    """Call ``model.method(*args, **kwargs)`` once, without retry.

    The keyword arguments slot is only sent when ``kwargs`` is non-empty.
    """
    if uid is None:
      raise IllegalStateError('Not authenticated. Call authenticate() first.')

    params: List[Any] = [db, uid, password, model, method, list(args)]
    if kwargs:
      params.append(dict(kwargs))

    logger.debug('Executing %s.%s with args: %s', model, method, args)
    try:
      result = self._transport.call(OBJECT_PATH, 'execute_kw', params)
    except RpcError as e:
      logger.error('Failed to execute %s.%s: %s', model, method, e)
      raise RemoteOperationError(
        f'Failed to execute {model}.{method}: {e}',
        model=model,
        method=method,
      ) from e

    logger.debug('Operation %s.%s completed successfully', model, method)
    return result
