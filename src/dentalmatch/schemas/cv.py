from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .common import coerce_label, coerce_number, coerce_text, coerce_text_list


class ExperienceEntry(BaseModel):
    """Employment history entry."""

    title: str = ""
    company: str = ""
    location: str = ""
    start: str | None = None
    end: str | None = None
    current: bool = False
    description: str = ""

    model_config = ConfigDict(extra="ignore")

    @field_validator("title", "company", "location", "description", mode="before")
    @classmethod
    def _coerce_text(cls, value: Any) -> str:
        return coerce_text(value)

    @field_validator("start", "end", mode="before")
    @classmethod
    def _coerce_marker(cls, value: Any) -> str | None:
        return coerce_label(value)

    @field_validator("current", mode="before")
    @classmethod
    def _coerce_current(cls, value: Any) -> bool:
        return value is True


class CandidateCV(BaseModel):
    """Canonical candidate profile consumed by the scorer."""

    cv_id: str | None = None
    full_name: str | None = None
    bio: str = ""
    city: str = ""
    location_preferred: list[str] = Field(default_factory=list)
    availability_type: str | None = None
    skills: list[str] = Field(default_factory=list)
    salary_expected: float = 0.0
    experience: list[ExperienceEntry] = Field(default_factory=list)

    model_config = ConfigDict(extra="ignore")

    @field_validator("cv_id", "full_name", "availability_type", mode="before")
    @classmethod
    def _coerce_label(cls, value: Any) -> str | None:
        return coerce_label(value)

    @field_validator("bio", "city", mode="before")
    @classmethod
    def _coerce_text(cls, value: Any) -> str:
        return coerce_text(value)

    @field_validator("location_preferred", "skills", mode="before")
    @classmethod
    def _coerce_lists(cls, value: Any) -> list[str]:
        return coerce_text_list(value)

    @field_validator("salary_expected", mode="before")
    @classmethod
    def _coerce_salary(cls, value: Any) -> float:
        return coerce_number(value)

    @field_validator("experience", mode="before")
    @classmethod
    def _coerce_experience(cls, value: Any) -> list[Any]:
        if not isinstance(value, (list, tuple)):
            return []
        entries: list[Any] = []
        for item in value:
            if isinstance(item, (dict, ExperienceEntry)):
                entries.append(item)
            else:
                entries.append({"title": coerce_text(item)})
        return entries
