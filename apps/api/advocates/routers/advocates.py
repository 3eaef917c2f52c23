from fastapi import APIRouter, Depends, Query, Request
from sqlalchemy.ext.asyncio import AsyncSession

from advocates.core import limiter, search_rate_limit
from advocates.dependencies import get_db
from advocates.schemas import AdvocateListResponse, ErrorResponse, FilterOptionsResponse
from advocates.services.search import criteria_from_query_params, search_advocates, shape_response
from advocates.services.search.facets import build_filter_options
from advocates.services.search.query import list_filter_values

router = APIRouter(prefix="/api/advocates", tags=["advocates"])

_FAILURE_RESPONSES = {500: {"model": ErrorResponse, "description": "Store failure"}}


@router.get("", response_model=AdvocateListResponse, responses=_FAILURE_RESPONSES)
@limiter.limit(search_rate_limit)
async def list_advocates(
    request: Request,
    search: str | None = Query(None, description="Free text over name, city and specialties"),
    city: str | None = Query(None, description="Case-insensitive substring of city"),
    specialty: str | None = Query(None, description="Case-insensitive substring of any specialty"),
    degree: str | None = Query(None, description="Exact, case-sensitive degree code"),
    experience: str | None = Query(None, description="One of 0-2, 3-5, 6-10, 11-15, 16-20, 20+"),
    # page/limit stay strings so malformed values are clamped instead of rejected with 422
    page: str | None = Query(None, description="1-based page number"),
    limit: str | None = Query(None, description="Page size"),
    db: AsyncSession = Depends(get_db),
):
    criteria = criteria_from_query_params(
        {
            "search": search,
            "city": city,
            "specialty": specialty,
            "degree": degree,
            "experience": experience,
            "page": page,
            "limit": limit,
        }
    )
    result = await search_advocates(db, criteria)
    return shape_response(result)


@router.get("/filter-options", response_model=FilterOptionsResponse, responses=_FAILURE_RESPONSES)
async def get_filter_options(db: AsyncSession = Depends(get_db)):
    cities, specialties = await list_filter_values(db)
    return build_filter_options(cities, specialties)
