"""Command object representing one query invocation."""
from __future__ import annotations

from dataclasses import dataclass, field, fields as dataclass_fields
from typing import Any, Dict, List, Mapping, Optional, Sequence, Union

from odoo_query.domain.exceptions import ValidationError
from odoo_query.domain.value_objects.connection_config import ConnectionConfig
from odoo_query.domain.value_objects.operation import FetchType, Operation
from odoo_query.domain.value_objects.query_parameters import QueryParameters

_ALIASES = {
  'fetchType': 'fetch_type',
  'database': 'db',
}


@dataclass(frozen=True)
class QueryCommand:
  """Flat parameter set of an invocation: connection, operation and its arguments."""
  url: str
  db: str
  username: str
  password: str = field(repr=False)
  model: str
  operation: Union[Operation, str] = Operation.SEARCH_READ
  filters: Optional[Sequence[Sequence[Any]]] = None
  fields: Optional[Sequence[str]] = None
  values: Optional[Mapping[str, Any]] = None
  ids: Optional[Sequence[int]] = None
  limit: Optional[int] = None
  offset: Optional[int] = None
  fetch_type: Union[FetchType, str] = FetchType.FETCH

  def __post_init__(self) -> None:
    object.__setattr__(self, 'operation', Operation.parse(self.operation))
    object.__setattr__(self, 'fetch_type', FetchType.parse(self.fetch_type))

  @property
  def connection(self) -> ConnectionConfig:
    return ConnectionConfig(url=self.url, db=self.db, username=self.username, password=self.password)

  @property
  def parameters(self) -> QueryParameters:
    return QueryParameters(
      filters=self.filters,
      fields=self.fields,
      values=self.values,
      ids=self.ids,
      limit=self.limit,
      offset=self.offset,
    )

  @classmethod
  def from_mapping(cls, data: Mapping[str, Any]) -> 'QueryCommand':
    """Build a command from a loosely-typed mapping such as a rendered task definition."""
    known = {item.name for item in dataclass_fields(cls)}
    kwargs: Dict[str, Any] = {}
    unknown: List[str] = []

    for key, value in data.items():
      name = _ALIASES.get(key, key)
      if name not in known:
        unknown.append(key)
        continue
      if value is not None:
        kwargs[name] = value

    if unknown:
      raise ValidationError(f"Unknown parameters: {', '.join(sorted(unknown))}")

    for name in ('url', 'db', 'username', 'password', 'model'):
      if not kwargs.get(name):
        raise ValidationError(f'{name} is required', parameter=name)

    return cls(**kwargs)
