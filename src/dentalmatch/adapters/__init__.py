"""Boundary adapters for job and CV records."""

from __future__ import annotations

from typing import Any, Mapping, Protocol, runtime_checkable

from .records import CVRecordAdapter, JobRecordAdapter, cv_from_record, job_from_record


@runtime_checkable
class RecordAdapter(Protocol):
    """Record adapter contract.

    Implementations accept a data-layer row (snake_case) or an application
    object (camelCase, possibly nested) and return the canonical model.
    """

    entity: str

    def parse(self, blob: bytes | str | Mapping[str, Any]) -> Any:
        """Parse one record into its canonical model."""


__all__ = [
    "RecordAdapter",
    "JobRecordAdapter",
    "CVRecordAdapter",
    "job_from_record",
    "cv_from_record",
]
