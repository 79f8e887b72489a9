"""Experience requirement evaluation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Sequence

from ...schemas import CandidateCV, ExperienceEntry, JobPosting


@dataclass
class ExperienceConfig:
    """Configuration for the experience gate.

    Each history entry is credited as ``years_per_entry`` years regardless of
    its dates; ranking outcomes depend on this approximation.
    """

    points: float = 15.0
    years_per_entry: float = 1.0


class ExperienceEvaluator:
    """Gate on the job's minimum years of experience."""

    method = "experience"

    def __init__(self, *, config: ExperienceConfig | None = None) -> None:
        self._config = config or ExperienceConfig()

    @property
    def max_points(self) -> float:
        return self._config.points

    def evaluate(self, job: JobPosting, cv: CandidateCV) -> dict[str, Any]:
        total_years = self.total_years(cv.experience)
        required = job.min_experience
        passes = total_years >= required

        return {
            "method": self.method,
            "scores": {"experience": self._config.points if passes else 0.0},
            "metadata": {
                "status": "meets_minimum" if passes else "below_minimum",
                "total_years": total_years,
                "required_years": required,
                "entry_count": len(cv.experience),
            },
        }

    def total_years(self, entries: Sequence[ExperienceEntry]) -> float:
        return len(entries) * self._config.years_per_entry
