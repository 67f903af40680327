"""Parametrized help and --examples tests for all CLI commands."""

from __future__ import annotations

import pytest
from click.testing import CliRunner

from catalogctl.cli import cli

# (CLI args, expected keywords in output)
HELP_COMMANDS: list[tuple[list[str], list[str]]] = [
    (["validate", "--help"], ["book", "file"]),
    (["validate", "book", "--help"], ["--isbn", "--title", "--author", "--price", "--publisher"]),
    (["validate", "file", "--help"], ["FILE", "--partial"]),
    (["rules", "--help"], ["List the field rules"]),
]


@pytest.mark.parametrize(
    "args,keywords",
    HELP_COMMANDS,
    ids=[" ".join(args) for args, _ in HELP_COMMANDS],
)
def test_help(cli_runner: CliRunner, args: list[str], keywords: list[str]) -> None:
    result = cli_runner.invoke(cli, args)
    assert result.exit_code == 0
    for keyword in keywords:
        assert keyword in result.output


@pytest.mark.parametrize(
    "args",
    [["validate"], ["validate", "book"], ["validate", "file"], ["rules"]],
)
def test_examples(cli_runner: CliRunner, args: list[str]) -> None:
    result = cli_runner.invoke(cli, [*args, "--examples"])
    assert result.exit_code == 0
    assert "Examples for" in result.output
    assert "catalogctl" in result.output
