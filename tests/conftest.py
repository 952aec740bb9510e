"""Shared test fixtures for tablecopy."""

from pathlib import Path

import pytest
from typer.testing import CliRunner

from tablecopy.cli.main import app
from tablecopy.core.layout import detect_layout
from tablecopy.core.lines import BufferLineSource

# psql aligned output, border 1
ORDERS_TABLE = [
    " id | name  | amount",
    "----+-------+--------",
    "  1 | alice |   10.5",
    "  2 | bob   |      3",
    "  3 | carol | ",
    "(3 rows)",
]

# psql aligned output, border 2
BORDERED_TABLE = [
    "+----+-------+",
    "| id | name  |",
    "+----+-------+",
    "|  1 | alice |",
    "|  2 | bob   |",
    "+----+-------+",
    "(2 rows)",
]


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch, tmp_path):
    """Keep the user's config file and TABLECOPY_* variables out of tests."""
    monkeypatch.setattr(
        "tablecopy.core.config.DEFAULT_CONFIG_PATH", tmp_path / "missing.toml"
    )
    for var in (
        "TABLECOPY_FORMAT",
        "TABLECOPY_TABLE_NAME",
        "TABLECOPY_FORCE8BIT",
        "TABLECOPY_EMPTY_STRING_IS_NULL",
        "TABLECOPY_SENTRY_DSN",
    ):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def runner():
    """Typer CLI test runner."""
    return CliRunner()


@pytest.fixture
def cli_runner(runner):
    """Invoke the CLI app with the given arguments."""

    def invoke(*args: str, **kwargs):
        return runner.invoke(app, list(args), **kwargs)

    return invoke


@pytest.fixture
def orders_lines():
    return list(ORDERS_TABLE)


@pytest.fixture
def orders_layout(orders_lines):
    return detect_layout(orders_lines)


@pytest.fixture
def orders_source(orders_lines):
    return BufferLineSource(orders_lines)


@pytest.fixture
def orders_file(tmp_path) -> Path:
    path = tmp_path / "orders.txt"
    path.write_text("\n".join(ORDERS_TABLE) + "\n", encoding="utf-8")
    return path


@pytest.fixture
def bordered_lines():
    return list(BORDERED_TABLE)


@pytest.fixture
def titled_lines():
    return ["     Orders", *BORDERED_TABLE[:4], BORDERED_TABLE[5], "(1 row)"]
