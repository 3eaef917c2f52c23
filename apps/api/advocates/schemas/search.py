from pydantic import BaseModel, ConfigDict

from advocates.core.constants import DEFAULT_PAGE


class SearchCriteria(BaseModel):
    """Normalized search/filter parameters, applied identically by the SQL and in-memory paths.

    Empty strings mean "no constraint". Build instances through
    services.search.criteria so every field is defaulted and clamped.
    """

    model_config = ConfigDict(frozen=True)

    query: str = ""
    city: str = ""
    specialty: str = ""
    degree: str = ""
    experience: str = ""
    page: int = DEFAULT_PAGE
    limit: int = 10

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit

    def is_empty(self) -> bool:
        """True when no filter field constrains the result (page/limit ignored)."""
        return not (self.query or self.city or self.specialty or self.degree or self.experience)


class SearchFilters(BaseModel):
    """Client-side filter state: the criteria fields other than the free-text query."""

    city: str = ""
    specialty: str = ""
    degree: str = ""
    experience: str = ""
