"""Dependency injection container for the matching system."""

from __future__ import annotations

from dependency_injector import containers, providers

from .adapters import CVRecordAdapter, JobRecordAdapter
from .core import (
    EmploymentTypeEvaluator,
    ExperienceEvaluator,
    LocationEvaluator,
    MatchScorer,
    SalaryEvaluator,
    SkillsEvaluator,
    SmartSearchParser,
    TitleEvaluator,
)
from .core.evaluators.employment_type import EmploymentTypeConfig
from .core.evaluators.experience import ExperienceConfig
from .core.evaluators.location import LocationConfig
from .core.evaluators.salary import SalaryConfig
from .core.evaluators.skills import SkillsConfig
from .core.evaluators.title import TitleConfig
from .core.search import SmartSearchConfig
from .pipeline import CVLoader, JobLoader, MatchPipeline


class MatchingContainer(containers.DeclarativeContainer):
    """Dependency-injector container definition."""

    config = providers.Configuration()

    job_adapter = providers.Singleton(JobRecordAdapter)
    cv_adapter = providers.Singleton(CVRecordAdapter)

    title_evaluator = providers.Singleton(TitleEvaluator)
    location_evaluator = providers.Singleton(LocationEvaluator)
    employment_type_evaluator = providers.Singleton(EmploymentTypeEvaluator)
    skills_evaluator = providers.Singleton(SkillsEvaluator)
    salary_evaluator = providers.Singleton(SalaryEvaluator)
    experience_evaluator = providers.Singleton(ExperienceEvaluator)

    evaluators = providers.List(
        title_evaluator,
        location_evaluator,
        employment_type_evaluator,
        skills_evaluator,
        salary_evaluator,
        experience_evaluator,
    )

    scorer = providers.Singleton(MatchScorer, evaluators=evaluators)
    search_parser = providers.Singleton(SmartSearchParser)

    pipeline = providers.Factory(
        MatchPipeline,
        scorer=scorer,
        parser=search_parser,
        job_loader=providers.Factory(JobLoader, adapter=job_adapter),
        cv_loader=providers.Factory(CVLoader, adapter=cv_adapter),
        default_limit=config.ranking.limit,
        default_min_score=config.ranking.min_score,
    )


_EVALUATOR_OVERRIDES = {
    "title": ("title_evaluator", TitleEvaluator, TitleConfig),
    "location": ("location_evaluator", LocationEvaluator, LocationConfig),
    "employment_type": (
        "employment_type_evaluator",
        EmploymentTypeEvaluator,
        EmploymentTypeConfig,
    ),
    "skills": ("skills_evaluator", SkillsEvaluator, SkillsConfig),
    "salary": ("salary_evaluator", SalaryEvaluator, SalaryConfig),
    "experience": ("experience_evaluator", ExperienceEvaluator, ExperienceConfig),
}


def create_container(*, settings: dict | None = None) -> MatchingContainer:
    """Instantiate container with optional overrides."""

    container = MatchingContainer()

    if not settings:
        return container

    ranking_settings = settings.get("ranking", {}) if isinstance(settings, dict) else {}
    if ranking_settings:
        container.config.override({"ranking": ranking_settings})

    evaluator_settings = settings.get("evaluators", {}) if isinstance(settings, dict) else {}
    for key, (provider_name, evaluator_cls, config_cls) in _EVALUATOR_OVERRIDES.items():
        if key not in evaluator_settings:
            continue
        evaluator_config = config_cls(**evaluator_settings[key])
        getattr(container, provider_name).override(
            providers.Singleton(evaluator_cls, config=evaluator_config)
        )

    search_settings = settings.get("search", {}) if isinstance(settings, dict) else {}
    if search_settings:
        search_config = SmartSearchConfig()
        if search_settings.get("known_cities") is not None:
            search_config.known_cities = tuple(
                city.lower() for city in search_settings["known_cities"]
            )
        if search_settings.get("known_types") is not None:
            search_config.known_types = {
                phrase.lower(): canonical
                for phrase, canonical in search_settings["known_types"].items()
            }
        container.search_parser.override(
            providers.Singleton(SmartSearchParser, config=search_config)
        )

    return container
