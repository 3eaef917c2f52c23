from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    """Wire models use camelCase keys; Python code uses snake_case attributes."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


class AdvocateResponse(_CamelModel):
    id: int
    first_name: str
    last_name: str
    city: str
    degree: str
    specialties: list[str] = []
    years_of_experience: int
    phone_number: int


class Pagination(_CamelModel):
    page: int
    limit: int
    total: int
    total_pages: int
    has_more: bool


class AdvocateListResponse(_CamelModel):
    data: list[AdvocateResponse]
    pagination: Pagination


class ErrorResponse(BaseModel):
    error: str


class FilterOption(BaseModel):
    value: str
    label: str


class FilterOptionsResponse(_CamelModel):
    """Dropdown choices: distinct cities and specialties present in the catalog plus the fixed experience buckets."""

    city_options: list[FilterOption] = []
    specialty_options: list[FilterOption] = []
    experience_options: list[FilterOption] = []
