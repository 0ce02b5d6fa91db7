# tests/unit/test_logging.py

"""Tests for structlog configuration."""

import json
import logging
from pathlib import Path

import structlog

from gcharness.telemetry import setup_logging
from gcharness.telemetry.logger import LOG_EMOJIS


def test_json_file_logging(tmp_path: Path) -> None:
    log_file = tmp_path / "harness.log"
    setup_logging(level=logging.DEBUG, log_file=str(log_file), file_only=True)

    structlog.get_logger("scenarios.driver").info("Scenario passed", scenario="default", emoji_key="pass")
    logging.getLogger().handlers[0].flush()

    records = [json.loads(line) for line in log_file.read_text(encoding="utf-8").splitlines()]
    record = next(r for r in records if "Scenario passed" in r["event"])
    assert record["scenario"] == "default"
    assert record["level"] == "info"
    assert record["event"].startswith(LOG_EMOJIS["pass"])
    assert "emoji_key" not in record


def test_setup_replaces_previous_handlers(tmp_path: Path) -> None:
    setup_logging(level=logging.INFO)
    setup_logging(level=logging.WARNING, log_file=str(tmp_path / "a.log"))
    root = logging.getLogger()
    assert root.level == logging.WARNING
    assert len(root.handlers) == 2
