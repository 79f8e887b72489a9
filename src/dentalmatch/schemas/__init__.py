"""Pydantic schema definitions for the canonical matching inputs."""

from __future__ import annotations

from .cv import CandidateCV, ExperienceEntry
from .job import JobPosting, SalaryRange
from .search import SearchFilters

__all__ = [
    "CandidateCV",
    "ExperienceEntry",
    "JobPosting",
    "SalaryRange",
    "SearchFilters",
]
