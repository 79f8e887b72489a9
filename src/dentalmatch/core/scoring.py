"""Match scorer orchestration."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from types import MappingProxyType
from typing import Any, Iterable, Mapping

from ..schemas import CandidateCV, JobPosting
from .evaluators import (
    EmploymentTypeEvaluator,
    ExperienceEvaluator,
    LocationEvaluator,
    SalaryEvaluator,
    SkillsEvaluator,
    TitleEvaluator,
)

BREAKDOWN_FACTORS: tuple[str, ...] = (
    "title",
    "location",
    "salary",
    "type",
    "experience",
    "skills",
)


def _freeze(value: Any) -> Any:
    if isinstance(value, Mapping):
        return MappingProxyType({key: _freeze(item) for key, item in value.items()})
    if isinstance(value, (list, tuple, set, frozenset)):
        return tuple(_freeze(item) for item in value)
    return value


def _thaw(value: Any) -> Any:
    if isinstance(value, Mapping):
        return {key: _thaw(item) for key, item in value.items()}
    if isinstance(value, tuple):
        return [_thaw(item) for item in value]
    return value


@dataclass(frozen=True, slots=True)
class EvaluationResult:
    """Normalized evaluator output, read-only once built."""

    method: str
    scores: Mapping[str, float]
    metadata: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))

    def as_dict(self) -> dict[str, Any]:
        return {
            "method": self.method,
            "scores": dict(self.scores),
            "metadata": _thaw(self.metadata),
        }


@dataclass(frozen=True, slots=True)
class MatchBreakdown:
    """Per-factor decomposition of a match score."""

    title: float = 0.0
    location: float = 0.0
    salary: float = 0.0
    type: float = 0.0
    experience: float = 0.0
    skills: float = 0.0

    def total(self) -> float:
        return sum(getattr(self, factor) for factor in BREAKDOWN_FACTORS)

    def as_dict(self) -> dict[str, float]:
        return asdict(self)


@dataclass(frozen=True, slots=True)
class MatchResult:
    """Score for one job and candidate pair."""

    score: float
    breakdown: MatchBreakdown
    evaluations: tuple[EvaluationResult, ...] = ()


def default_evaluators() -> list[Any]:
    return [
        TitleEvaluator(),
        LocationEvaluator(),
        EmploymentTypeEvaluator(),
        SkillsEvaluator(),
        SalaryEvaluator(),
        ExperienceEvaluator(),
    ]


class MatchScorer:
    """Runs the factor evaluators and sums their points into a MatchResult."""

    def __init__(self, evaluators: Iterable[Any] | None = None) -> None:
        self._evaluators = list(evaluators) if evaluators is not None else default_evaluators()

    @property
    def max_score(self) -> float:
        return sum(float(getattr(evaluator, "max_points", 0.0)) for evaluator in self._evaluators)

    def score(self, job: JobPosting, cv: CandidateCV) -> MatchResult:
        evaluations: list[EvaluationResult] = []
        points: dict[str, float] = {factor: 0.0 for factor in BREAKDOWN_FACTORS}

        for evaluator in self._evaluators:
            normalized = self._normalize_evaluation_result(evaluator.evaluate(job, cv))
            evaluations.append(normalized)
            for key, value in normalized.scores.items():
                if key in points:
                    points[key] += value

        breakdown = MatchBreakdown(**points)
        return MatchResult(
            score=breakdown.total(),
            breakdown=breakdown,
            evaluations=tuple(evaluations),
        )

    @staticmethod
    def _normalize_evaluation_result(payload: dict[str, Any]) -> EvaluationResult:
        method = payload.get("method")
        scores = payload.get("scores") or {}
        metadata = payload.get("metadata") or {}
        if method is None:
            raise ValueError("Evaluator result must include 'method'.")
        if not isinstance(scores, dict):
            raise ValueError("Evaluator result 'scores' must be a mapping.")
        return EvaluationResult(
            method=str(method),
            scores=MappingProxyType({k: max(float(v), 0.0) for k, v in scores.items()}),
            metadata=_freeze(metadata),
        )


_DEFAULT_SCORER = MatchScorer()


def calculate_match_score(job: JobPosting, cv: CandidateCV) -> MatchResult:
    """Score ``job`` against ``cv`` with the default weights."""
    return _DEFAULT_SCORER.score(job, cv)
