from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class SearchFilters(BaseModel):
    """Structured filters extracted from a free-text job search."""

    query: str
    location: tuple[str, ...] | None = None
    employment_type: tuple[str, ...] | None = None

    model_config = ConfigDict(extra="forbid", frozen=True)

    def is_empty(self) -> bool:
        return not self.location and not self.employment_type
