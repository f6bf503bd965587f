"""Tests for structlog configuration."""

from __future__ import annotations

import json
import logging
from collections.abc import Generator

import pytest
import structlog
from sqlalchemy import Connection, text

from rinha.config.logging import configure_logging
from rinha.infrastructure.repositories.people import PeopleRepository


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Restore root logger state after each test."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    rinha = logging.getLogger("rinha")
    rinha_level = rinha.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    rinha.setLevel(rinha_level)


class TestConfigureLogging:
    def test_verbose_enables_debug(self) -> None:
        configure_logging(verbose=True, log_json=False)
        assert logging.getLogger("rinha").level == logging.DEBUG
        assert logging.getLogger().level == logging.WARNING

    def test_non_verbose_sets_warning(self) -> None:
        configure_logging(verbose=False, log_json=False)
        assert logging.getLogger("rinha").level == logging.WARNING

    def test_human_mode_output(self) -> None:
        configure_logging(verbose=True, log_json=False)
        log = structlog.get_logger("rinha.test")
        log.warning("hello world", key="val")
        # Smoke test: format depends on terminal

    def test_json_mode_output(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        log = structlog.get_logger("rinha.test")
        log.warning("json test", answer=42)
        captured = capfd.readouterr()
        parsed = json.loads(captured.err.strip())
        assert parsed["event"] == "json test"
        assert parsed["answer"] == 42
        assert parsed["level"] == "warning"
        assert parsed["logger"] == "rinha.test"
        assert "timestamp" in parsed

    def test_stdlib_rinha_logger_gets_structured_fields(
        self, capfd: pytest.CaptureFixture[str]
    ) -> None:
        configure_logging(verbose=True, log_json=True)

        logging.getLogger("rinha.infrastructure.repositories.people").debug("Created person 1")

        captured = capfd.readouterr()
        parsed = json.loads(captured.err.strip())
        assert parsed["event"] == "Created person 1"
        assert parsed["level"] == "debug"
        assert parsed["logger"] == "rinha.infrastructure.repositories.people"

    def test_store_error_logged_with_traceback(
        self, conn: Connection, capfd: pytest.CaptureFixture[str]
    ) -> None:
        conn.execute(text("DROP TABLE users"))
        conn.commit()
        configure_logging(verbose=False, log_json=True)

        assert PeopleRepository(conn).count_people() == 0

        captured = capfd.readouterr()
        parsed = json.loads(captured.err.strip().splitlines()[-1])
        assert parsed["level"] == "warning"
        assert parsed["event"].startswith("Store error during count")
        assert "OperationalError" in parsed["exception"]

    def test_third_party_debug_is_suppressed(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)

        logging.getLogger("sqlalchemy.engine").info("SELECT 1")

        captured = capfd.readouterr()
        assert captured.err == ""

    def test_idempotent_calls(self) -> None:
        """Multiple configure_logging calls don't stack handlers."""
        configure_logging(verbose=True, log_json=False)
        configure_logging(verbose=True, log_json=True)
        root = logging.getLogger()
        assert len(root.handlers) == 1
