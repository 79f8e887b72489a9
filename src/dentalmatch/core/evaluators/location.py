"""Location compatibility evaluation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ...schemas import CandidateCV, JobPosting


@dataclass
class LocationConfig:
    """Points awarded for exact and partial location matches."""

    full_points: float = 45.0
    partial_points: float = 30.0


class LocationEvaluator:
    """Match the job location against the candidate city and preferred locations."""

    method = "location"

    def __init__(self, *, config: LocationConfig | None = None) -> None:
        self._config = config or LocationConfig()

    @property
    def max_points(self) -> float:
        return max(self._config.full_points, self._config.partial_points)

    def evaluate(self, job: JobPosting, cv: CandidateCV) -> dict[str, Any]:
        job_location = job.location.lower()
        city = cv.city.lower()
        preferred = [loc.lower() for loc in cv.location_preferred]

        if job_location == city or job_location in preferred:
            return self._build_response(
                self._config.full_points,
                status="exact",
                matched=job_location,
            )

        for location in preferred:
            if job_location in location or location in job_location:
                return self._build_response(
                    self._config.partial_points,
                    status="partial",
                    matched=location,
                )

        return self._build_response(0.0, status="no_match")

    def _build_response(
        self,
        points: float,
        *,
        status: str,
        matched: str | None = None,
    ) -> dict[str, Any]:
        return {
            "method": self.method,
            "scores": {"location": points},
            "metadata": {"status": status, "matched_location": matched},
        }
