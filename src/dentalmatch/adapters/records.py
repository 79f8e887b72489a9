"""Record adapters normalizing data-layer rows and application objects."""

from __future__ import annotations

import json
from typing import Any, Mapping, Sequence

from ..schemas import CandidateCV, JobPosting

KeyPath = tuple[str, ...]

_MISSING = object()

JOB_FIELD_ALIASES: dict[str, Sequence[KeyPath]] = {
    "job_id": (("id",), ("job_id",), ("jobId",)),
    "title": (("title",),),
    "location": (("location",), ("city",)),
    "employment_type": (("employment_type",), ("employmentType",)),
    "skills": (("skills",), ("required_skills",), ("requiredSkills",)),
    "min_experience": (("min_experience",), ("minExperience",)),
}

JOB_SALARY_ALIASES: dict[str, Sequence[KeyPath]] = {
    "min": (("salary", "min"), ("salary_min",), ("salaryMin",)),
    "max": (("salary", "max"), ("salary_max",), ("salaryMax",)),
    "currency": (("salary", "currency"), ("salary_currency",), ("salaryCurrency",)),
}

CV_FIELD_ALIASES: dict[str, Sequence[KeyPath]] = {
    "cv_id": (("id",), ("cv_id",), ("cvId",)),
    "full_name": (("full_name",), ("fullName",), ("personalInfo", "fullName")),
    "bio": (("bio",), ("personalInfo", "bio"), ("personal_info", "bio")),
    "city": (("city",), ("personalInfo", "city"), ("personal_info", "city")),
    "location_preferred": (
        ("location_preferred",),
        ("locationPreferred",),
        ("location", "preferred"),
    ),
    "availability_type": (
        ("availability_type",),
        ("availabilityType",),
        ("availability", "type"),
    ),
    "skills": (("skills",),),
    "salary_expected": (
        ("salary_expected",),
        ("salaryExpected",),
        ("salary", "expected"),
    ),
    "experience": (("experience",), ("experiences",)),
}

EXPERIENCE_FIELD_ALIASES: dict[str, Sequence[KeyPath]] = {
    "title": (("title",), ("role",)),
    "company": (("company",),),
    "location": (("location",),),
    "start": (("start",), ("start_date",), ("startDate",)),
    "end": (("end",), ("end_date",), ("endDate",)),
    "current": (("current",), ("is_current",), ("isCurrent",)),
    "description": (("description",), ("summary",)),
}


def lookup(record: Mapping[str, Any], paths: Sequence[KeyPath]) -> Any:
    """Return the first value found along ``paths``, or ``None``."""
    for path in paths:
        value: Any = record
        for key in path:
            if not isinstance(value, Mapping):
                value = _MISSING
                break
            value = value.get(key, _MISSING)
            if value is _MISSING:
                break
        if value is not _MISSING and value is not None:
            return value
    return None


def remap(record: Mapping[str, Any], aliases: Mapping[str, Sequence[KeyPath]]) -> dict[str, Any]:
    mapped: dict[str, Any] = {}
    for name, paths in aliases.items():
        value = lookup(record, paths)
        if value is not None:
            mapped[name] = value
    return mapped


def load_record(blob: bytes | str | Mapping[str, Any]) -> dict[str, Any]:
    if isinstance(blob, Mapping):
        return dict(blob)
    if isinstance(blob, bytes):
        blob = blob.decode("utf-8")
    try:
        data = json.loads(blob)
    except json.JSONDecodeError as exc:
        raise ValueError("Invalid record payload") from exc
    if not isinstance(data, dict):
        raise ValueError("Record payload must be a JSON object")
    return data


class JobRecordAdapter:
    """Adapter converting job rows or application objects into JobPosting."""

    entity = "job"

    def parse(self, blob: bytes | str | Mapping[str, Any]) -> JobPosting:
        record = load_record(blob)
        mapped = remap(record, JOB_FIELD_ALIASES)
        # Job location is plain text; a nested mapping belongs to a CV shape.
        if isinstance(mapped.get("location"), Mapping):
            mapped.pop("location")
        mapped["salary"] = remap(record, JOB_SALARY_ALIASES)
        return JobPosting.model_validate(mapped)


class CVRecordAdapter:
    """Adapter converting CV rows or application objects into CandidateCV."""

    entity = "cv"

    def parse(self, blob: bytes | str | Mapping[str, Any]) -> CandidateCV:
        record = load_record(blob)
        mapped = remap(record, CV_FIELD_ALIASES)
        experience = mapped.get("experience")
        if isinstance(experience, (list, tuple)):
            mapped["experience"] = [
                remap(item, EXPERIENCE_FIELD_ALIASES) if isinstance(item, Mapping) else item
                for item in experience
            ]
        return CandidateCV.model_validate(mapped)


def job_from_record(blob: bytes | str | Mapping[str, Any]) -> JobPosting:
    return JobRecordAdapter().parse(blob)


def cv_from_record(blob: bytes | str | Mapping[str, Any]) -> CandidateCV:
    return CVRecordAdapter().parse(blob)
