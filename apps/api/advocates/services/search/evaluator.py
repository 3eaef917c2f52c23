"""In-memory evaluation of search predicates over already-fetched advocate records."""

from collections.abc import Iterable, Mapping
from typing import Any, TypeVar

from pydantic.alias_generators import to_camel

from advocates.schemas.search import SearchCriteria
from advocates.services.search.predicates import (
    AllOf,
    AnyContains,
    AnyOf,
    Between,
    Contains,
    Equals,
    Predicate,
    compile_predicate,
)

R = TypeVar("R")


def field_value(record: Any, name: str) -> Any:
    """Read a field from a wire dict (camelCase or snake_case keys) or an object with snake_case attributes."""
    if isinstance(record, Mapping):
        camel = to_camel(name)
        if camel in record:
            return record[camel]
        return record.get(name)
    return getattr(record, name, None)


def _fold(value: Any) -> str:
    # str.lower mirrors SQL lower(); both sides are folded the same way
    return "" if value is None else str(value).lower()


def matches(record: Any, predicate: Predicate) -> bool:
    if isinstance(predicate, AllOf):
        return all(matches(record, p) for p in predicate.children)
    if isinstance(predicate, AnyOf):
        return any(matches(record, p) for p in predicate.children)
    if isinstance(predicate, Contains):
        return _fold(predicate.needle) in _fold(field_value(record, predicate.field))
    if isinstance(predicate, AnyContains):
        needle = _fold(predicate.needle)
        return any(needle in _fold(item) for item in (field_value(record, predicate.field) or []))
    if isinstance(predicate, Equals):
        return field_value(record, predicate.field) == predicate.value
    if isinstance(predicate, Between):
        value = field_value(record, predicate.field)
        if value is None:
            return False
        if value < predicate.lo:
            return False
        return predicate.hi is None or value <= predicate.hi
    raise TypeError(f"Unsupported predicate: {predicate!r}")


def filter_advocates(records: Iterable[R], criteria: SearchCriteria) -> list[R]:
    """Records matching criteria, in their original order. Pagination fields are ignored."""
    predicate = compile_predicate(criteria)
    return [r for r in records if matches(r, predicate)]
