"""Tests for the init command."""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner
from sqlalchemy import create_engine, inspect

from rinha.cli import cli


@pytest.mark.usefixtures("_isolated_root")
class TestInitCommand:
    def test_creates_users_table(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        result = cli_runner.invoke(cli, ["init"])
        assert result.exit_code == 0, result.output
        assert "Initialized" in result.output

        engine = create_engine(f"sqlite:///{tmp_path / 'rinha.db'}")
        assert "users" in inspect(engine).get_table_names()
        engine.dispose()

    def test_idempotent(self, cli_runner: CliRunner) -> None:
        assert cli_runner.invoke(cli, ["init"]).exit_code == 0
        assert cli_runner.invoke(cli, ["init"]).exit_code == 0

    def test_examples(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["init", "--examples"])
        assert result.exit_code == 0
        assert "rinha init" in result.output

    def test_uses_configured_url(
        self, cli_runner: CliRunner, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        target = tmp_path / "elsewhere.db"
        monkeypatch.setenv("RINHA_DATABASE__URL", f"sqlite:///{target}")

        result = cli_runner.invoke(cli, ["init"])
        assert result.exit_code == 0, result.output
        assert "elsewhere.db" in result.output
        assert not (tmp_path / "rinha.db").exists()

        engine = create_engine(f"sqlite:///{target}")
        assert "users" in inspect(engine).get_table_names()
        engine.dispose()
