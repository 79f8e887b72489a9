"""Shared skill overlap evaluation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable

from ...schemas import CandidateCV, JobPosting


@dataclass
class SkillsConfig:
    """Per-skill points and the overall clamp."""

    points_per_skill: float = 10.0
    max_points: float = 50.0


class SkillsEvaluator:
    """Count skills present in both the job and the CV."""

    method = "skills"

    def __init__(self, *, config: SkillsConfig | None = None) -> None:
        self._config = config or SkillsConfig()

    @property
    def max_points(self) -> float:
        return self._config.max_points

    def evaluate(self, job: JobPosting, cv: CandidateCV) -> dict[str, Any]:
        candidate_skills = {skill.lower() for skill in cv.skills}
        shared = [
            skill for skill in self._unique_lower(job.skills) if skill in candidate_skills
        ]
        raw_points = len(shared) * self._config.points_per_skill
        points = min(raw_points, self._config.max_points)

        return {
            "method": self.method,
            "scores": {"skills": max(points, 0.0)},
            "metadata": {
                "shared_skills": shared,
                "raw_points": raw_points,
                "capped": raw_points > self._config.max_points,
            },
        }

    @staticmethod
    def _unique_lower(skills: Iterable[str]) -> list[str]:
        seen: list[str] = []
        for skill in skills:
            lowered = skill.lower()
            if lowered not in seen:
                seen.append(lowered)
        return seen
