"""Tests for colspec compile command."""

from __future__ import annotations

import json

from click.testing import CliRunner

from colspec_cli.commands.compile import compile_cmd


class TestCompileCommand:
    """Tests for compile command."""

    def test_compile_single_spec(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(compile_cmd, ["AGE:.metadata.creationTimestamp|T"])

        assert result.exit_code == 0
        assert "AGE" in result.output
        assert "time" in result.output

    def test_compile_requires_a_spec(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(compile_cmd, [])
        assert result.exit_code == 2

    def test_malformed_spec_fails(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(compile_cmd, ["***"])

        assert result.exit_code == 1
        assert "malformed_spec" in result.output

    def test_good_specs_still_printed_when_one_fails(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(compile_cmd, ["NAME", "BAD:$invalid[[path"])

        assert result.exit_code == 1
        assert "NAME" in result.output
        assert "column 1" in result.output
        assert "invalid_path" in result.output


class TestCompileJSON:
    """Tests for compile --json output."""

    def test_json_output(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(compile_cmd, ["--json", "CPU:.status.cpu|N"])

        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["failures"] == []
        (column,) = data["columns"]
        assert column["name"] == "CPU"
        assert column["path"] == "{.status.cpu}"
        assert column["attrs"]["capacity"] is True
        assert column["attrs"]["align"] == "right"

    def test_json_output_reports_failures(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(compile_cmd, ["--json", "NAME", "***"])

        assert result.exit_code == 1
        assert '"malformed_spec"' in result.output
