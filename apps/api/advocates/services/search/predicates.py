"""
Criteria -> predicate tree shared by the SQL compiler and the in-memory evaluator.

compile_predicate() is the single place where search criteria are mapped to
match rules. Renderers (query.compile_where, evaluator.matches) only
interpret the nodes below, so both search paths apply the same semantics:

    query      -> AnyOf(Contains first_name, last_name, city; AnyContains specialties)
    city       -> Contains city              (case-insensitive substring)
    specialty  -> AnyContains specialties    (case-insensitive substring on any element)
    degree     -> Equals degree              (exact, case-sensitive)
    experience -> Between years_of_experience (closed bounds; hi=None is open-ended)

An empty AllOf matches every record.
"""

from dataclasses import dataclass
from typing import Literal, Optional, Union

from advocates.core import EXPERIENCE_BUCKETS
from advocates.schemas.search import SearchCriteria

TextField = Literal["first_name", "last_name", "city", "degree"]
ListField = Literal["specialties"]
IntField = Literal["years_of_experience"]


@dataclass(frozen=True)
class Contains:
    """Case-insensitive substring match on a text field."""

    field: TextField
    needle: str


@dataclass(frozen=True)
class AnyContains:
    """Case-insensitive substring match against any element of a list field."""

    field: ListField
    needle: str


@dataclass(frozen=True)
class Equals:
    field: TextField
    value: str


@dataclass(frozen=True)
class Between:
    field: IntField
    lo: int
    hi: Optional[int] = None


@dataclass(frozen=True)
class AnyOf:
    children: tuple["Predicate", ...]


@dataclass(frozen=True)
class AllOf:
    children: tuple["Predicate", ...] = ()


Predicate = Union[Contains, AnyContains, Equals, Between, AnyOf, AllOf]

MATCH_ALL = AllOf()


def experience_predicate(code: str) -> Optional[Between]:
    bounds = EXPERIENCE_BUCKETS.get(code)
    if bounds is None:
        return None
    lo, hi = bounds
    return Between("years_of_experience", lo, hi)


def query_predicate(text: str) -> AnyOf:
    return AnyOf(
        (
            Contains("first_name", text),
            Contains("last_name", text),
            Contains("city", text),
            AnyContains("specialties", text),
        )
    )


def compile_predicate(criteria: SearchCriteria) -> AllOf:
    """Conjunction with one node per non-empty criterion. Pagination fields are ignored."""
    parts: list[Predicate] = []
    if criteria.query:
        parts.append(query_predicate(criteria.query))
    if criteria.city:
        parts.append(Contains("city", criteria.city))
    if criteria.specialty:
        parts.append(AnyContains("specialties", criteria.specialty))
    if criteria.degree:
        parts.append(Equals("degree", criteria.degree))
    if criteria.experience:
        bucket = experience_predicate(criteria.experience)
        if bucket is not None:
            parts.append(bucket)
    return AllOf(tuple(parts)) if parts else MATCH_ALL
