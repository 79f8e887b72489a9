"""Employment type compatibility evaluation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ...schemas import CandidateCV, JobPosting


@dataclass
class EmploymentTypeConfig:
    points: float = 15.0


class EmploymentTypeEvaluator:
    """Award points when the job type equals the candidate availability type."""

    method = "type"

    def __init__(self, *, config: EmploymentTypeConfig | None = None) -> None:
        self._config = config or EmploymentTypeConfig()

    @property
    def max_points(self) -> float:
        return self._config.points

    def evaluate(self, job: JobPosting, cv: CandidateCV) -> dict[str, Any]:
        job_type = job.employment_type
        candidate_type = cv.availability_type

        status = "match" if job_type == candidate_type else "mismatch"

        return {
            "method": self.method,
            "scores": {"type": self._config.points if status == "match" else 0.0},
            "metadata": {
                "status": status,
                "job_type": job_type,
                "candidate_type": candidate_type,
            },
        }
