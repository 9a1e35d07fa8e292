"""Value object for the operation-specific query parameters."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

from odoo_query.domain.exceptions import ValidationError

FilterTriple = Tuple[str, str, Any]


def _normalize_filters(filters: Optional[Iterable[Sequence[Any]]]) -> Optional[Tuple[FilterTriple, ...]]:
  if filters is None:
    return None

  triples: List[FilterTriple] = []
  for position, condition in enumerate(filters):
    if isinstance(condition, (str, bytes)) or not isinstance(condition, Sequence) or len(condition) != 3:
      raise ValidationError(
        f'Filter #{position} must be a [field, operator, value] triple, got: {condition!r}',
        parameter='filters',
      )
    field_name, operator, value = condition
    if not isinstance(field_name, str) or not isinstance(operator, str):
      raise ValidationError(
        f'Filter #{position} must start with a field name and an operator, got: {condition!r}',
        parameter='filters',
      )
    triples.append((field_name, operator, value))
  return tuple(triples)


def _normalize_ids(ids: Optional[Iterable[Any]]) -> Optional[Tuple[int, ...]]:
  if ids is None:
    return None

  normalized = tuple(ids)
  for record_id in normalized:
    if isinstance(record_id, bool) or not isinstance(record_id, int):
      raise ValidationError(f'Record ids must be integers, got: {record_id!r}', parameter='ids')
  return normalized


def _normalize_fields(fields: Optional[Iterable[Any]]) -> Optional[Tuple[str, ...]]:
  if fields is None:
    return None
  if isinstance(fields, (str, bytes)):
    raise ValidationError(f'fields must be a list of field names, got: {fields!r}', parameter='fields')

  normalized = tuple(fields)
  for field_name in normalized:
    if not isinstance(field_name, str) or not field_name:
      raise ValidationError(f'Field names must be non-empty strings, got: {field_name!r}', parameter='fields')
  return normalized


def _normalize_values(values: Optional[Mapping[Any, Any]]) -> Optional[Dict[str, Any]]:
  if values is None:
    return None
  if not isinstance(values, Mapping):
    raise ValidationError('values must be a mapping of field names to values', parameter='values')

  for field_name in values:
    if not isinstance(field_name, str) or not field_name:
      raise ValidationError(f'Field names in values must be non-empty strings, got: {field_name!r}', parameter='values')
  return dict(values)


def _check_bound(name: str, value: Optional[int]) -> None:
  if value is None:
    return
  if isinstance(value, bool) or not isinstance(value, int) or value < 0:
    raise ValidationError(f'{name} must be a non-negative integer, got: {value!r}', parameter=name)


@dataclass(frozen=True)
class QueryParameters:
  """Filters, projection, values and record ids for one operation.

  ``None`` means the parameter was not supplied; which parameters are required
  depends on the operation and is checked by the dispatcher.
  """

  filters: Optional[Tuple[FilterTriple, ...]] = None
  fields: Optional[Tuple[str, ...]] = None
  values: Optional[Dict[str, Any]] = None
  ids: Optional[Tuple[int, ...]] = None
  limit: Optional[int] = None
  offset: Optional[int] = None

  def __post_init__(self) -> None:
    object.__setattr__(self, 'filters', _normalize_filters(self.filters))
    object.__setattr__(self, 'ids', _normalize_ids(self.ids))
    object.__setattr__(self, 'fields', _normalize_fields(self.fields))
    object.__setattr__(self, 'values', _normalize_values(self.values))
    _check_bound('limit', self.limit)
    _check_bound('offset', self.offset)

  @property
  def domain(self) -> List[List[Any]]:
    """Filters as an XML-RPC domain; no filters means match all."""
    return [list(condition) for condition in self.filters or ()]
