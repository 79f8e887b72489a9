from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .common import coerce_label, coerce_number, coerce_text, coerce_text_list


class SalaryRange(BaseModel):
    """Salary range offered for a job posting."""

    min: float = 0.0
    max: float = 0.0
    currency: str | None = None

    model_config = ConfigDict(extra="ignore")

    @field_validator("min", "max", mode="before")
    @classmethod
    def _coerce_amount(cls, value: Any) -> float:
        return coerce_number(value)

    @field_validator("currency", mode="before")
    @classmethod
    def _coerce_currency(cls, value: Any) -> str | None:
        return coerce_label(value)

    @model_validator(mode="after")
    def _order_bounds(self) -> "SalaryRange":
        if self.min and self.max and self.min > self.max:
            self.min, self.max = self.max, self.min
        return self


class JobPosting(BaseModel):
    """Canonical job posting consumed by the scorer."""

    job_id: str | None = None
    title: str = ""
    location: str = ""
    employment_type: str | None = None
    salary: SalaryRange = Field(default_factory=SalaryRange)
    skills: list[str] = Field(default_factory=list)
    min_experience: float = 0.0

    model_config = ConfigDict(extra="ignore")

    @field_validator("job_id", "employment_type", mode="before")
    @classmethod
    def _coerce_label(cls, value: Any) -> str | None:
        return coerce_label(value)

    @field_validator("title", "location", mode="before")
    @classmethod
    def _coerce_text(cls, value: Any) -> str:
        return coerce_text(value)

    @field_validator("salary", mode="before")
    @classmethod
    def _coerce_salary(cls, value: Any) -> Any:
        if value is None or not isinstance(value, (dict, SalaryRange)):
            return SalaryRange()
        return value

    @field_validator("skills", mode="before")
    @classmethod
    def _coerce_skills(cls, value: Any) -> list[str]:
        return coerce_text_list(value)

    @field_validator("min_experience", mode="before")
    @classmethod
    def _coerce_min_experience(cls, value: Any) -> float:
        return max(coerce_number(value), 0.0)
