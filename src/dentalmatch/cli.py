"""Typer CLI entrypoint for the matching pipeline."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Optional

import typer
import yaml
from pydantic import ValidationError

from .container import create_container
from .logging import configure_logging
from .pipeline import AuditLogger
from .schemas.config import load_config

app = typer.Typer(help="Dental job matching CLI.")


def _load_settings(config: Path | None) -> dict[str, Any]:
    if not config:
        return {}
    with config.open("r", encoding="utf-8") as handle:
        loaded = yaml.safe_load(handle) or {}
    if not isinstance(loaded, dict):
        raise typer.BadParameter("Config file must be a YAML object", param_name="config")
    try:
        return load_config(loaded).to_settings()
    except ValidationError as exc:
        raise typer.BadParameter(str(exc), param_name="config") from exc


@app.command()
def match(
    jobs: Path = typer.Option(..., exists=True, readable=True, dir_okay=False, help="Jobs JSON or JSONL path."),
    output: Path = typer.Option(
        ...,
        exists=False,
        file_okay=True,
        dir_okay=False,
        resolve_path=True,
        help="Output JSON path.",
    ),
    cv: Optional[Path] = typer.Option(None, exists=True, readable=True, dir_okay=False, help="Candidate CV JSON path."),
    query: Optional[str] = typer.Option(None, help="Free-text search, e.g. 'part time dentist in baghdad'."),
    limit: Optional[int] = typer.Option(None, min=0, help="Maximum number of results."),
    min_score: Optional[float] = typer.Option(None, min=0, help="Drop results scoring below this value."),
    config: Optional[Path] = typer.Option(None, exists=True, readable=True, dir_okay=False, help="YAML config path."),
    log_level: str = typer.Option("INFO", help="Log level for structured logging."),
    log_format: str = typer.Option("json", help="Log rendering: json or console."),
    audit_log: Optional[Path] = typer.Option(None, dir_okay=False, help="Audit log output (JSONL)."),
) -> None:
    """Rank job postings against a candidate CV."""
    settings = _load_settings(config)

    try:
        configure_logging(log_level, log_format=log_format)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_name="log_format") from exc

    container = create_container(settings=settings)
    pipeline = container.pipeline()
    audit_logger = AuditLogger(audit_log) if audit_log else None

    try:
        results = pipeline.run(
            jobs_path=jobs,
            output_path=output,
            cv_path=cv,
            query=query,
            limit=limit,
            min_score=min_score,
            audit_logger=audit_logger,
        )
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc
    typer.echo(f"Ranked {len(results)} jobs. Results saved to {output}.")


@app.command()
def parse(
    query: str = typer.Argument(..., help="Free-text search to parse."),
    config: Optional[Path] = typer.Option(None, exists=True, readable=True, dir_okay=False, help="YAML config path."),
) -> None:
    """Print the filters extracted from a free-text search."""
    container = create_container(settings=_load_settings(config))
    filters = container.search_parser().parse(query)
    typer.echo(json.dumps(filters.model_dump(mode="json"), ensure_ascii=False))


def main() -> None:
    app()


if __name__ == "__main__":
    main()
