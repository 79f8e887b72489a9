"""Salary expectation evaluation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ...schemas import CandidateCV, JobPosting


@dataclass
class SalaryConfig:
    """Configuration for salary gating."""

    full_points: float = 20.0
    partial_points: float = 10.0
    partial_ratio: float = 0.80


class SalaryEvaluator:
    """Compare the job's maximum salary with the candidate's expectation."""

    method = "salary"

    def __init__(self, *, config: SalaryConfig | None = None) -> None:
        self._config = config or SalaryConfig()

    @property
    def max_points(self) -> float:
        return max(self._config.full_points, self._config.partial_points)

    def evaluate(self, job: JobPosting, cv: CandidateCV) -> dict[str, Any]:
        job_max = job.salary.max
        expected = cv.salary_expected
        threshold = expected * self._config.partial_ratio

        if job_max >= expected:
            points, status = self._config.full_points, "meets_expectation"
        elif job_max >= threshold:
            points, status = self._config.partial_points, "within_tolerance"
        else:
            points, status = 0.0, "below_expectation"

        return {
            "method": self.method,
            "scores": {"salary": points},
            "metadata": {
                "status": status,
                "job_max": job_max,
                "expected": expected,
                "partial_threshold": threshold,
                "gap_amount": max(expected - job_max, 0.0),
            },
        }
