"""Enumerations for the supported operations and fetch types."""
from __future__ import annotations

from enum import Enum
from typing import Type, TypeVar, Union

from odoo_query.domain.exceptions import ValidationError

_E = TypeVar('_E', bound=Enum)


def _parse_member(enum_type: Type[_E], value: Union[str, _E], label: str) -> _E:
  if isinstance(value, enum_type):
    return value

  text = str(value).strip().lower()
  for member in enum_type:
    if text in (member.value, member.name.lower()):
      return member

  supported = ', '.join(member.value for member in enum_type)
  raise ValidationError(
    f"Unsupported {label}: {value}. Supported values are: {supported}",
    parameter=label,
  )


class Operation(str, Enum):
  """Operations on an Odoo model; the value is the remote method name."""
  SEARCH_READ = 'search_read'
  READ = 'read'
  CREATE = 'create'
  WRITE = 'write'
  UNLINK = 'unlink'
  SEARCH = 'search'
  SEARCH_COUNT = 'search_count'

  @property
  def method(self) -> str:
    return self.value

  @property
  def returns_records(self) -> bool:
    """True for the operations whose result is a collection subject to fetch type."""
    return self in (Operation.SEARCH_READ, Operation.READ, Operation.SEARCH)

  @classmethod
  def parse(cls, value: Union[str, 'Operation']) -> 'Operation':
    return _parse_member(cls, value, 'operation')


class FetchType(str, Enum):
  """How a result collection is projected into the output envelope."""
  NONE = 'none'
  FETCH = 'fetch'
  FETCH_ONE = 'fetch_one'
  STORE = 'store'

  @classmethod
  def parse(cls, value: Union[str, 'FetchType']) -> 'FetchType':
    return _parse_member(cls, value, 'fetch_type')
