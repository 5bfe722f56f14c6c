"""Test loguru setup."""

import json
import sys
from pathlib import Path

import pytest
from loguru import logger

from school_analytics.utils import log_file_path, setup_logger


@pytest.fixture(autouse=True)
def restore_logger():
    """Close sinks added by a test and restore the default one."""
    yield
    logger.remove()
    logger.configure(extra={})
    logger.add(sys.stderr)


def test_log_file_named_after_run(tmp_path: Path):
    """Test the file sink is named after the run id."""
    log_path = setup_logger(log_level="INFO", log_dir=tmp_path, run_id="abc123")

    logger.info("seeded")

    assert log_path == tmp_path / "run_abc123.log"
    content = log_path.read_text()
    assert "seeded" in content
    assert "| abc123 |" in content


def test_shared_log_file_without_run_id(tmp_path: Path):
    """Test runs without an id share one file."""
    log_path = setup_logger(log_dir=tmp_path)

    assert log_path == log_file_path(tmp_path) == tmp_path / "school_analytics.log"
    assert log_path.exists()


def test_console_only(tmp_path: Path):
    """Test file logging can be disabled."""
    assert setup_logger(log_to_file=False, log_dir=tmp_path / "logs") is None
    assert not (tmp_path / "logs").exists()


def test_serialized_log_file(tmp_path: Path):
    """Test JSON-lines output carries the run id."""
    log_path = setup_logger(log_dir=tmp_path, run_id="r1", serialize=True)

    logger.warning("course full")

    records = [json.loads(line) for line in log_path.read_text().splitlines()]
    assert records[-1]["record"]["message"] == "course full"
    assert records[-1]["record"]["extra"]["run_id"] == "r1"


def test_level_filter(tmp_path: Path):
    """Test records below the level are dropped."""
    log_path = setup_logger(log_level="WARNING", log_dir=tmp_path, run_id="r2")

    logger.info("hidden")
    logger.warning("shown")

    content = log_path.read_text()
    assert "hidden" not in content
    assert "shown" in content
