"""
Query compiler: render the shared predicate tree as a SQLAlchemy WHERE clause and run
the paginated advocate search.

Each search issues exactly two reads built from the same WHERE clause:
the requested page (ordered by id) and an unpaginated count. They are not
wrapped in a transaction; a concurrent write between them is tolerated.
"""

import logging

from sqlalchemy import ColumnElement, and_, func, or_, select, true
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from advocates.core import FETCH_FAILED_MESSAGE
from advocates.db.models import Advocate, AdvocateSpecialty
from advocates.schemas.search import SearchCriteria
from advocates.services.search.pagination import SearchPage, build_pagination
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

logger = logging.getLogger(__name__)

_COLUMNS = {
    "first_name": Advocate.first_name,
    "last_name": Advocate.last_name,
    "city": Advocate.city,
    "degree": Advocate.degree,
    "years_of_experience": Advocate.years_of_experience,
}


class AdvocateSearchError(Exception):
    """Raised when the store fails during a search. The message is safe to show to callers."""


def compile_where(predicate: Predicate) -> ColumnElement[bool]:
    if isinstance(predicate, AllOf):
        if not predicate.children:
            return true()
        return and_(*(compile_where(p) for p in predicate.children))
    if isinstance(predicate, AnyOf):
        return or_(*(compile_where(p) for p in predicate.children))
    if isinstance(predicate, Contains):
        return _COLUMNS[predicate.field].icontains(predicate.needle, autoescape=True)
    if isinstance(predicate, AnyContains):
        # EXISTS over advocate_specialties: true when any one label contains the needle
        return Advocate.specialty_rows.any(
            AdvocateSpecialty.name.icontains(predicate.needle, autoescape=True)
        )
    if isinstance(predicate, Equals):
        return _COLUMNS[predicate.field] == predicate.value
    if isinstance(predicate, Between):
        column = _COLUMNS[predicate.field]
        if predicate.hi is None:
            return column >= predicate.lo
        return column.between(predicate.lo, predicate.hi)
    raise TypeError(f"Unsupported predicate: {predicate!r}")


def build_search_statements(criteria: SearchCriteria):
    """(page_stmt, count_stmt) sharing one WHERE clause."""
    where = compile_where(compile_predicate(criteria))
    page_stmt = (
        select(Advocate)
        .where(where)
        .order_by(Advocate.id)
        .offset(criteria.offset)
        .limit(criteria.limit)
    )
    count_stmt = select(func.count()).select_from(Advocate).where(where)
    return page_stmt, count_stmt


async def search_advocates(db: AsyncSession, criteria: SearchCriteria) -> SearchPage[Advocate]:
    """Run the page and count reads for criteria. Store failures raise AdvocateSearchError."""
    page_stmt, count_stmt = build_search_statements(criteria)
    try:
        rows = (await db.execute(page_stmt)).scalars().all()
        total = (await db.execute(count_stmt)).scalar_one()
    except SQLAlchemyError as e:
        logger.exception("Advocate search failed (criteria=%s): %s", criteria.model_dump(), e)
        raise AdvocateSearchError(FETCH_FAILED_MESSAGE) from e
    return SearchPage(
        data=list(rows),
        pagination=build_pagination(criteria.page, criteria.limit, total),
    )


async def list_filter_values(db: AsyncSession) -> tuple[list[str], list[str]]:
    """Distinct cities and specialty labels currently in the catalog."""
    try:
        cities = (await db.execute(select(Advocate.city).distinct())).scalars().all()
        specialties = (await db.execute(select(AdvocateSpecialty.name).distinct())).scalars().all()
    except SQLAlchemyError as e:
        logger.exception("Loading advocate filter options failed: %s", e)
        raise AdvocateSearchError(FETCH_FAILED_MESSAGE) from e
    return list(cities), list(specialties)
