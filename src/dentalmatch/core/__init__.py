"""Core matching engine components."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from ..schemas import CandidateCV, JobPosting
from .ranking import RankedJob, apply_search_filters, match_label, rank_jobs
from .scoring import (
    EvaluationResult,
    MatchBreakdown,
    MatchResult,
    MatchScorer,
    calculate_match_score,
)
from .search import SmartSearchParser, parse_smart_search
from .evaluators import (
    EmploymentTypeEvaluator,
    ExperienceEvaluator,
    LocationEvaluator,
    SalaryEvaluator,
    SkillsEvaluator,
    TitleEvaluator,
)


@runtime_checkable
class Evaluator(Protocol):
    """Evaluator contract for computing one factor of a match score."""

    method: str

    @property
    def max_points(self) -> float:
        """Highest number of points the evaluator can award."""

    def evaluate(self, job: JobPosting, cv: CandidateCV) -> dict:
        """Return the factor score for ``job`` against ``cv``."""


__all__ = [
    "Evaluator",
    "EvaluationResult",
    "MatchBreakdown",
    "MatchResult",
    "MatchScorer",
    "RankedJob",
    "SmartSearchParser",
    "apply_search_filters",
    "calculate_match_score",
    "match_label",
    "parse_smart_search",
    "rank_jobs",
    "TitleEvaluator",
    "LocationEvaluator",
    "EmploymentTypeEvaluator",
    "SkillsEvaluator",
    "SalaryEvaluator",
    "ExperienceEvaluator",
]
