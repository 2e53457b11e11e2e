"""Tests for the Typer CLI."""

import pytest
from typer.testing import CliRunner

from authsrv.presentation.cli.app import app
from tests.shared.fixtures.database import sqlite_url

runner = CliRunner()


@pytest.fixture
def db_env(tmp_path, monkeypatch):
    """Point the CLI at a throwaway SQLite database."""
    monkeypatch.setenv("DB_URL", sqlite_url(tmp_path))
    return tmp_path / "authsrv-test.db"


def test_db_init_creates_database(db_env):
    result = runner.invoke(app, ["db", "init"])

    assert result.exit_code == 0, result.output
    assert "Database initialized" in result.output
    assert db_env.exists()


def test_tokens_purge_on_empty_database(db_env):
    runner.invoke(app, ["db", "init"])

    result = runner.invoke(app, ["tokens", "purge"])

    assert result.exit_code == 0, result.output
    assert "Purged 0" in result.output


def test_db_reset_with_force(db_env):
    runner.invoke(app, ["db", "init"])

    result = runner.invoke(app, ["db", "reset", "--force"])

    assert result.exit_code == 0, result.output
    assert "Database recreated" in result.output


def test_db_drop_aborts_without_confirmation(db_env):
    result = runner.invoke(app, ["db", "drop"], input="n\n")

    assert result.exit_code == 1
    assert "Aborted" in result.output


def test_secrets_generate():
    result = runner.invoke(app, ["secrets", "generate"])

    assert result.exit_code == 0
    assert "JWT_SECRET_KEY" in result.output
    assert "POSTGRES_PASSWORD" in result.output
