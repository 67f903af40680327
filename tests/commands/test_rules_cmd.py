"""Tests for the rules CLI command."""

from __future__ import annotations

import json

import pytest
from click.testing import CliRunner

from catalogctl.cli import cli
from catalogctl.domain.rules import ISBN_CHECKSUM, PRICE_POSITIVE


@pytest.mark.usefixtures("_isolated_cwd")
class TestRulesCommand:
    def test_lists_rules(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["rules"])
        assert result.exit_code == 0
        assert PRICE_POSITIVE in result.output
        assert ISBN_CHECKSUM not in result.output

    def test_json(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "rules"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["data"]["count"] == 6
        assert data["meta"]["isbn_checksum"] is False

    def test_checksum_via_env(self, cli_runner: CliRunner, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CATALOGCTL_VALIDATION__ISBN_CHECKSUM", "true")
        result = cli_runner.invoke(cli, ["--json", "rules"])
        data = json.loads(result.output)
        assert data["data"]["count"] == 7
        assert data["meta"]["isbn_checksum"] is True
