"""Matching pipeline assembly and execution."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pendulum
import structlog

from .adapters import CVRecordAdapter, JobRecordAdapter
from .core import MatchScorer, RankedJob, SmartSearchParser, rank_jobs
from .schemas import CandidateCV, JobPosting, SearchFilters
from . import __version__


class RecordLoadError(ValueError):
    """Raised when job loading encounters invalid records."""

    def __init__(self, errors: list[str], partial: list[JobPosting]):
        super().__init__("Record loading failed")
        self.errors = errors
        self.partial = partial

    def __str__(self) -> str:  # pragma: no cover - trivial
        return f"Record loading failed: {self.errors}"


class JobLoader:
    """Load job postings from a JSON array or a JSONL file."""

    def __init__(self, adapter: JobRecordAdapter | None = None):
        self._adapter = adapter or JobRecordAdapter()

    def load(self, path: Path) -> list[JobPosting]:
        text = path.read_text(encoding="utf-8")
        if text.lstrip().startswith("["):
            return self._load_array(text)
        return self._load_lines(text)

    def _load_array(self, text: str) -> list[JobPosting]:
        try:
            records = json.loads(text)
        except json.JSONDecodeError as exc:
            raise RecordLoadError([f"invalid JSON ({exc})"], []) from exc
        jobs: list[JobPosting] = []
        errors: list[str] = []
        for idx, record in enumerate(records, start=1):
            self._parse_into(record, f"record {idx}", jobs, errors)
        if errors:
            raise RecordLoadError(errors, jobs)
        return jobs

    def _load_lines(self, text: str) -> list[JobPosting]:
        jobs: list[JobPosting] = []
        errors: list[str] = []
        for idx, line in enumerate(text.splitlines(), start=1):
            raw = line.strip()
            if not raw:
                continue
            try:
                record = json.loads(raw)
            except json.JSONDecodeError as exc:
                errors.append(f"line {idx}: invalid JSON ({exc})")
                continue
            self._parse_into(record, f"line {idx}", jobs, errors)
        if errors:
            raise RecordLoadError(errors, jobs)
        return jobs

    def _parse_into(
        self,
        record: Any,
        where: str,
        jobs: list[JobPosting],
        errors: list[str],
    ) -> None:
        if not isinstance(record, dict):
            errors.append(f"{where}: expected a JSON object")
            return
        try:
            jobs.append(self._adapter.parse(record))
        except ValueError as exc:
            errors.append(f"{where}: {exc}")


class CVLoader:
    """Load a single candidate CV document."""

    def __init__(self, adapter: CVRecordAdapter | None = None):
        self._adapter = adapter or CVRecordAdapter()

    def load(self, path: Path) -> CandidateCV:
        with path.open("r", encoding="utf-8") as handle:
            try:
                data = json.load(handle)
            except json.JSONDecodeError as exc:
                raise ValueError(f"Invalid CV JSON: {exc}") from exc
        if not isinstance(data, dict):
            raise ValueError("CV JSON must be an object")
        return self._adapter.parse(data)


class OutputWriter:
    """Persist ranked matches."""

    def write(self, path: Path, payload: dict | list[dict]) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(
            json.dumps(payload, ensure_ascii=False, indent=2),
            encoding="utf-8",
        )


class MatchPipeline:
    """End-to-end job matching orchestrator."""

    def __init__(
        self,
        *,
        scorer: MatchScorer,
        parser: SmartSearchParser,
        job_loader: JobLoader | None = None,
        cv_loader: CVLoader | None = None,
        writer: OutputWriter | None = None,
        default_limit: int | None = None,
        default_min_score: float | None = None,
    ) -> None:
        self._scorer = scorer
        self._parser = parser
        self._jobs = job_loader or JobLoader()
        self._cvs = cv_loader or CVLoader()
        self._writer = writer or OutputWriter()
        self._default_limit = default_limit
        self._default_min_score = default_min_score
        self._logger = structlog.get_logger(__name__)

    def run(
        self,
        *,
        jobs_path: Path,
        output_path: Path,
        cv_path: Path | None = None,
        query: str | None = None,
        limit: int | None = None,
        min_score: float | None = None,
        audit_logger: "AuditLogger | None" = None,
    ) -> list[dict]:
        load_errors: list[str] = []
        try:
            jobs = self._jobs.load(jobs_path)
        except RecordLoadError as exc:
            jobs = exc.partial
            load_errors.extend(exc.errors)
            self._logger.warning("jobs.partial_load", errors=exc.errors)

        cv = self._cvs.load(cv_path) if cv_path else None
        filters = self._parser.parse(query) if query else SearchFilters(query="")
        if not filters.is_empty():
            self._logger.info(
                "search.filters",
                query=filters.query,
                location=filters.location,
                employment_type=filters.employment_type,
            )

        ranked = rank_jobs(
            jobs,
            cv,
            filters=filters,
            scorer=self._scorer,
            limit=limit if limit is not None else self._default_limit,
            min_score=min_score if min_score is not None else self._default_min_score,
        )

        serialized_results: list[dict] = []
        for position, item in enumerate(ranked, start=1):
            entry = serialize_ranked_job(item, rank=position)
            serialized_results.append(entry)

            if audit_logger:
                audit_logger.append(
                    {
                        "job_id": item.job.job_id,
                        "cv_id": cv.cv_id if cv else None,
                        "rank": position,
                        "score": item.score,
                        "breakdown": entry["breakdown"],
                        "query": filters.query,
                    }
                )

            self._logger.info(
                "match.result",
                job_id=item.job.job_id,
                cv_id=cv.cv_id if cv else None,
                rank=position,
                score=item.score,
                label=item.label,
            )

        metadata = {
            "cv_id": cv.cv_id if cv else None,
            "job_count": len(jobs),
            "result_count": len(serialized_results),
            "max_score": self._scorer.max_score,
            "filters": filters.model_dump(mode="json"),
            "errors": load_errors,
            "timestamp": pendulum.now().to_iso8601_string(),
            "app_version": __version__,
        }
        self._writer.write(
            output_path,
            {"metadata": metadata, "results": serialized_results},
        )
        return serialized_results


def serialize_ranked_job(item: RankedJob, *, rank: int) -> dict[str, Any]:
    result = item.result
    return {
        "rank": rank,
        "job": item.job.model_dump(mode="json"),
        "score": item.score,
        "percent": item.percent,
        "label": item.label,
        "breakdown": result.breakdown.as_dict() if result else {},
        "evaluations": [
            ev.as_dict()
            for ev in (result.evaluations if result else ())
        ],
    }


class AuditLogger:
    """Append-only audit logger writing JSON lines."""

    def __init__(self, path: Path):
        self._path = path
        self._path.parent.mkdir(parents=True, exist_ok=True)

    def append(self, record: dict) -> None:
        with self._path.open("a", encoding="utf-8") as handle:
            handle.write(json.dumps(record, ensure_ascii=False))
            handle.write("\n")
