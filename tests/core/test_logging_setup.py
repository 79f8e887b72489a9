from __future__ import annotations

import json
from collections.abc import Iterator

import pytest
import structlog

from dentalmatch.logging import configure_logging


@pytest.fixture(autouse=True)
def reset_structlog() -> Iterator[None]:
    yield
    structlog.reset_defaults()


def test_configure_logging_writes_json_to_stderr(capsys: pytest.CaptureFixture[str]):
    configure_logging("INFO")

    structlog.get_logger("dentalmatch.test").info("match.result", job_id="J-1", score=135.0)

    captured = capsys.readouterr()
    assert captured.out == ""
    event = json.loads(captured.err.strip().splitlines()[-1])
    assert event["event"] == "match.result"
    assert event["level"] == "info"
    assert event["score"] == 135.0


def test_configure_logging_filters_below_level(capsys: pytest.CaptureFixture[str]):
    configure_logging("WARNING")

    structlog.get_logger("dentalmatch.test").info("search.filters", query="baghdad")

    assert capsys.readouterr().err == ""


def test_configure_logging_console_format(capsys: pytest.CaptureFixture[str]):
    configure_logging("INFO", log_format="console")

    structlog.get_logger("dentalmatch.test").warning("jobs.partial_load", errors=["line 3"])

    err = capsys.readouterr().err
    assert "jobs.partial_load" in err
    assert "warning" in err


def test_configure_logging_rejects_unknown_format():
    with pytest.raises(ValueError):
        configure_logging("INFO", log_format="xml")
