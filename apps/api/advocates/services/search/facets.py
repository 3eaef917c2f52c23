"""Dropdown options and summary statistics derived from an advocate list."""

from collections.abc import Iterable, Sequence
from typing import Any

from advocates.core import EXPERIENCE_BUCKETS, EXPERIENCE_OPTIONS
from advocates.schemas.advocate import FilterOption, FilterOptionsResponse
from advocates.services.search.evaluator import field_value


def experience_bucket_of(years: int) -> str:
    """First bucket containing years. 20 falls in "16-20"; only 21+ is reported as "20+"."""
    for code, (lo, hi) in EXPERIENCE_BUCKETS.items():
        if years >= lo and (hi is None or years <= hi):
            return code
    return "0-2"


def _options(values: Iterable[str]) -> list[FilterOption]:
    distinct = sorted({v.strip() for v in values if v and v.strip()}, key=str.lower)
    return [FilterOption(value=v, label=v) for v in distinct]


def build_filter_options(cities: Iterable[str], specialties: Iterable[str]) -> FilterOptionsResponse:
    """Option values are the labels themselves so they feed straight back into substring filters."""
    return FilterOptionsResponse(
        city_options=_options(cities),
        specialty_options=_options(specialties),
        experience_options=[FilterOption(**o) for o in EXPERIENCE_OPTIONS],
    )


def filter_options_for(records: Sequence[Any]) -> FilterOptionsResponse:
    return build_filter_options(
        (field_value(r, "city") for r in records),
        (s for r in records for s in (field_value(r, "specialties") or [])),
    )


def advocate_stats(records: Sequence[Any]) -> dict[str, Any]:
    years = [int(field_value(r, "years_of_experience") or 0) for r in records]
    distribution: dict[str, int] = {}
    for y in years:
        code = experience_bucket_of(y)
        distribution[code] = distribution.get(code, 0) + 1
    return {
        "total_advocates": len(records),
        "cities_count": len({field_value(r, "city") for r in records}),
        "specialties_count": len({s for r in records for s in (field_value(r, "specialties") or [])}),
        "average_experience": round(sum(years) / len(years)) if years else 0,
        "experience_distribution": distribution,
    }
