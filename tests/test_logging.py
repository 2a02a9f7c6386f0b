"""Tests for structured logging setup."""

import json

import pytest
import structlog

from dartweave.logging import setup_logging


@pytest.fixture(autouse=True)
def _reset_structlog():
    yield
    structlog.contextvars.clear_contextvars()
    structlog.reset_defaults()


def _last_record(capsys) -> dict:
    return json.loads(capsys.readouterr().out.strip().splitlines()[-1])


def test_json_logs_carry_bound_context(capsys):
    setup_logging("DEBUG", json_logs=True)
    logger = structlog.get_logger("dartweave.tests")

    with structlog.contextvars.bound_contextvars(generation_run="run-1"):
        logger.info("artifact_added", path="lib/a.dart")

    record = _last_record(capsys)
    assert record["event"] == "artifact_added"
    assert record["level"] == "info"
    assert record["path"] == "lib/a.dart"
    assert record["generation_run"] == "run-1"
    assert "timestamp" in record


def test_level_filtering(capsys):
    setup_logging("WARNING", json_logs=True)
    logger = structlog.get_logger("dartweave.tests")

    logger.info("hidden")
    logger.warning("missing_dependencies_found", count=2)

    lines = capsys.readouterr().out.strip().splitlines()
    assert [json.loads(line)["event"] for line in lines] == ["missing_dependencies_found"]
