"""Filtering and ranking of job listings for one candidate."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from ..schemas import CandidateCV, JobPosting, SearchFilters
from .scoring import MatchResult, MatchScorer

MATCH_LABELS: tuple[tuple[float, str], ...] = (
    (90.0, "Excellent Match"),
    (75.0, "Great Match"),
    (60.0, "Good Match"),
    (40.0, "Fair Match"),
)


@dataclass(frozen=True, slots=True)
class RankedJob:
    """A job listing annotated with its match against the candidate."""

    job: JobPosting
    result: MatchResult | None
    score: float
    percent: float
    label: str


def match_label(percent: float) -> str:
    for threshold, label in MATCH_LABELS:
        if percent >= threshold:
            return label
    return "Low Match"


def apply_search_filters(
    jobs: Iterable[JobPosting],
    filters: SearchFilters | None,
) -> list[JobPosting]:
    """Keep jobs whose location and employment type satisfy ``filters``.

    A job passes the location filter when its location contains any of the
    extracted city tokens, and the type filter when its employment type is one
    of the extracted values. Unset filters do not restrict.
    """
    selected = list(jobs)
    if filters is None:
        return selected
    if filters.location:
        cities = [city.lower() for city in filters.location]
        selected = [
            job for job in selected if any(city in job.location.lower() for city in cities)
        ]
    if filters.employment_type:
        selected = [
            job for job in selected if job.employment_type in filters.employment_type
        ]
    return selected


def rank_jobs(
    jobs: Iterable[JobPosting],
    cv: CandidateCV | None,
    *,
    filters: SearchFilters | None = None,
    scorer: MatchScorer | None = None,
    limit: int | None = None,
    min_score: float | None = None,
) -> list[RankedJob]:
    """Filter, score and sort ``jobs`` by match score, best first.

    Without a CV every job scores 0 and keeps its listing order.
    """
    scorer = scorer or MatchScorer()
    max_score = scorer.max_score

    ranked: list[RankedJob] = []
    for job in apply_search_filters(jobs, filters):
        result = scorer.score(job, cv) if cv is not None else None
        score = result.score if result is not None else 0.0
        percent = (score / max_score * 100.0) if max_score > 0 else 0.0
        ranked.append(
            RankedJob(
                job=job,
                result=result,
                score=score,
                percent=round(percent, 1),
                label=match_label(percent),
            )
        )

    if min_score is not None:
        ranked = [item for item in ranked if item.score >= min_score]

    ranked.sort(key=lambda item: item.score, reverse=True)

    if limit is not None:
        ranked = ranked[: max(limit, 0)]
    return ranked
