from __future__ import annotations

import pytest
from pydantic import ValidationError

from dentalmatch.container import create_container
from dentalmatch.schemas import CandidateCV, JobPosting
from dentalmatch.schemas.config import AppConfig, load_config


def test_create_container_with_overrides():
    container = create_container(
        settings={
            "evaluators": {
                "title": {"full_points": 50, "partial_points": 25},
                "skills": {"max_points": 30},
                "salary": {"partial_ratio": 0.9},
                "experience": {"years_per_entry": 2},
            },
            "ranking": {"limit": 5},
        }
    )

    title = container.title_evaluator()
    skills = container.skills_evaluator()
    salary = container.salary_evaluator()
    experience = container.experience_evaluator()
    scorer = container.scorer()
    pipeline = container.pipeline()

    assert title._config.full_points == 50
    assert skills._config.max_points == 30
    assert salary._config.partial_ratio == 0.9
    assert experience._config.years_per_entry == 2
    assert scorer.max_score == pytest.approx(50 + 45 + 15 + 30 + 20 + 15)
    assert pipeline._default_limit == 5


def test_default_container_uses_default_weights():
    container = create_container()
    scorer = container.scorer()

    result = scorer.score(
        JobPosting(title="Dentist", location="Najaf"),
        CandidateCV(bio="dentist", city="najaf"),
    )

    assert scorer.max_score == 185.0
    assert result.breakdown.title == 40.0
    assert result.breakdown.location == 45.0


def test_create_container_search_overrides():
    container = create_container(
        settings={"search": {"known_cities": ["Sulaymaniyah"], "known_types": {"Temporary": "temporary"}}}
    )

    filters = container.search_parser().parse("temporary job in sulaymaniyah")

    assert filters.location == ("sulaymaniyah",)
    assert filters.employment_type == ("temporary",)


def test_load_config_validation():
    data = {
        "evaluators": {"location": {"partial_points": 25}},
        "ranking": {"min_score": 40},
    }
    app_config = load_config(data)
    assert isinstance(app_config, AppConfig)
    settings = app_config.to_settings()
    assert settings["evaluators"]["location"]["partial_points"] == 25
    assert settings["ranking"] == {"min_score": 40}
    assert "search" not in settings


def test_load_config_rejects_unknown_sections():
    with pytest.raises(ValidationError):
        load_config({"scoring": {}})


def test_load_config_rejects_non_mapping():
    with pytest.raises(ValidationError):
        load_config(["not", "a", "mapping"])
