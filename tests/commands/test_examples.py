"""Tests for --examples flag on CLI commands."""

from __future__ import annotations

import pytest
from click.testing import CliRunner

from inputcounter.cli import cli

# (CLI args, expected keywords in output)
EXAMPLES_COMMANDS: list[tuple[list[str], list[str]]] = [
    (["--examples"], ["inputcounter count", "inputcounter validate"]),
    (["count", "--examples"], ["--file body.html"]),
    (["validate", "--examples"], ["--max 280"]),
    (["render", "--examples"], ["--field-group-editor", "--class"]),
    (["simulate", "--examples"], ["mode:markup", "--gate"]),
]


@pytest.mark.usefixtures("_isolated_project")
class TestExamples:
    @pytest.mark.parametrize(
        ("args", "keywords"),
        EXAMPLES_COMMANDS,
        ids=[" ".join(a) for a, _ in EXAMPLES_COMMANDS],
    )
    def test_examples(self, cli_runner: CliRunner, args: list[str], keywords: list[str]) -> None:
        result = cli_runner.invoke(cli, args)
        assert result.exit_code == 0, result.output
        assert "Examples for" in result.output
        for keyword in keywords:
            assert keyword in result.output

    def test_examples_not_in_help_body(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["simulate", "--help"])
        assert result.exit_code == 0
        assert "--examples" in result.output
        assert "mode:markup y" not in result.output
