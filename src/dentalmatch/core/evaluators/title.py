"""Job title relevance evaluation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ...schemas import CandidateCV, JobPosting


@dataclass
class TitleConfig:
    """Points awarded for title relevance."""

    full_points: float = 40.0
    partial_points: float = 20.0


class TitleEvaluator:
    """Compare the job title with the candidate bio, then with their skills."""

    method = "title"

    def __init__(self, *, config: TitleConfig | None = None) -> None:
        self._config = config or TitleConfig()

    @property
    def max_points(self) -> float:
        return max(self._config.full_points, self._config.partial_points)

    def evaluate(self, job: JobPosting, cv: CandidateCV) -> dict[str, Any]:
        title = job.title.lower()
        bio = cv.bio.lower()

        # A blank title is a substring of any non-empty bio.
        if bio and title in bio:
            return self._build_response(self._config.full_points, status="bio_match")

        matched_skills = [skill for skill in cv.skills if skill.lower() in title]
        if matched_skills:
            return self._build_response(
                self._config.partial_points,
                status="skill_match",
                matched_skills=matched_skills,
            )

        return self._build_response(0.0, status="no_match")

    def _build_response(
        self,
        points: float,
        *,
        status: str,
        matched_skills: list[str] | None = None,
    ) -> dict[str, Any]:
        return {
            "method": self.method,
            "scores": {"title": points},
            "metadata": {
                "status": status,
                "matched_skills": matched_skills or [],
            },
        }
