"""Pydantic configuration schema for CLI YAML input."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError


class EvaluatorConfig(BaseModel):
    title: dict[str, float] | None = None
    location: dict[str, float] | None = None
    employment_type: dict[str, float] | None = None
    skills: dict[str, float] | None = None
    salary: dict[str, float] | None = None
    experience: dict[str, float] | None = None

    model_config = ConfigDict(extra="forbid")


class SearchConfig(BaseModel):
    known_cities: list[str] | None = None
    known_types: dict[str, str] | None = None

    model_config = ConfigDict(extra="forbid")


class RankingConfig(BaseModel):
    limit: int | None = Field(default=None, ge=0)
    min_score: float | None = Field(default=None, ge=0)

    model_config = ConfigDict(extra="forbid")


class AppConfig(BaseModel):
    evaluators: EvaluatorConfig = Field(default_factory=EvaluatorConfig)
    search: SearchConfig = Field(default_factory=SearchConfig)
    ranking: RankingConfig = Field(default_factory=RankingConfig)

    model_config = ConfigDict(extra="forbid")

    def to_settings(self) -> dict[str, Any]:
        settings: dict[str, Any] = {}
        evaluator_settings = self.evaluators.model_dump(exclude_none=True)
        if evaluator_settings:
            settings["evaluators"] = evaluator_settings
        search_settings = self.search.model_dump(exclude_none=True)
        if search_settings:
            settings["search"] = search_settings
        ranking_settings = self.ranking.model_dump(exclude_none=True)
        if ranking_settings:
            settings["ranking"] = ranking_settings
        return settings


def load_config(raw: Any) -> AppConfig:
    if not isinstance(raw, dict):
        raise ValidationError.from_exception_data(
            "AppConfig",
            [{"type": "dict_type", "loc": ("config",), "input": raw}],
        )
    return AppConfig.model_validate(raw)
