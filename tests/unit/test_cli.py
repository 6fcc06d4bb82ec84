"""Tests for CLI commands."""

from pathlib import Path

import pytest
from typer.testing import CliRunner

from minexpr import __version__
from minexpr.cli import app
from minexpr.core.config import CONFIG_FILENAME, LOG_LEVEL_ENV_VAR


@pytest.fixture
def cli_runner():
    """Return a CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run every command from an empty directory with no env overrides."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv(LOG_LEVEL_ENV_VAR, raising=False)
    return tmp_path


def test_run_success(cli_runner: CliRunner):
    result = cli_runner.invoke(app, ["run", "1+2*3"])
    assert result.exit_code == 0
    out = result.stdout
    assert "=== Lexical Analysis ===" in out
    assert "[NUMBER('1' @0), PLUS('+' @1)" in out
    assert "Parse result: success" in out
    assert "=== Syntax Tree ===" in out
    assert "+\n  1\n  *\n    2\n    3\n" in out
    assert "Result: 7" in out


def test_run_reads_prompted_line(cli_runner: CliRunner):
    result = cli_runner.invoke(app, ["run"], input="(2+3)*4\n")
    assert result.exit_code == 0
    assert "Expression: " in result.stdout
    assert "Result: 20" in result.stdout


def test_run_parse_error(cli_runner: CliRunner):
    result = cli_runner.invoke(app, ["run", "2+"])
    assert result.exit_code == 1
    assert "=== Lexical Analysis ===" in result.stdout
    assert "Parse result: success" not in result.stdout
    assert "Parse error at position 2: Unexpected token ''" in result.stdout


def test_run_lex_error(cli_runner: CliRunner):
    result = cli_runner.invoke(app, ["run", "2+#3"])
    assert result.exit_code == 1
    assert "=== Lexical Analysis ===" not in result.stdout
    assert "Lex error at position 2: Unexpected character '#'" in result.stdout


def test_run_division_by_zero(cli_runner: CliRunner):
    result = cli_runner.invoke(app, ["run", "4/0"])
    assert result.exit_code == 1
    assert "Parse result: success" in result.stdout
    assert "=== Syntax Tree ===" in result.stdout
    assert "Runtime error: Division by zero" in result.stdout
    assert "Result:" not in result.stdout


def test_run_deeply_nested_parens(cli_runner: CliRunner):
    source = "(" * 300 + "1" + ")" * 300
    result = cli_runner.invoke(app, ["run", "--no-tokens", source])
    assert result.exit_code == 1
    assert "Parse error at position 100: Expression nested too deeply" in result.stdout
    assert "Parse result: success" not in result.stdout


def test_run_hides_sections(cli_runner: CliRunner):
    result = cli_runner.invoke(app, ["run", "--no-tokens", "--no-tree", "8/2"])
    assert result.exit_code == 0
    assert "Lexical Analysis" not in result.stdout
    assert "Syntax Tree" not in result.stdout
    assert "Result: 4" in result.stdout


def test_run_uses_config_file(cli_runner: CliRunner, isolated_cwd: Path):
    (isolated_cwd / CONFIG_FILENAME).write_text("[driver]\nshow_tokens = false\n")
    result = cli_runner.invoke(app, ["run", "1"])
    assert result.exit_code == 0
    assert "Lexical Analysis" not in result.stdout
    assert "Syntax Tree" in result.stdout


def test_run_flag_overrides_config(cli_runner: CliRunner, isolated_cwd: Path):
    config = isolated_cwd / "custom.toml"
    config.write_text("[driver]\nshow_tree = false\n")
    result = cli_runner.invoke(app, ["run", "--config", str(config), "--tree", "1"])
    assert result.exit_code == 0
    assert "Syntax Tree" in result.stdout


def test_run_bad_config(cli_runner: CliRunner, isolated_cwd: Path):
    (isolated_cwd / CONFIG_FILENAME).write_text('[driver]\nlog_level = "loud"\n')
    result = cli_runner.invoke(app, ["run", "1"])
    assert result.exit_code == 2
    assert "Invalid log level" in result.stdout


def test_tokens_command(cli_runner: CliRunner):
    result = cli_runner.invoke(app, ["tokens", "12 +3"])
    assert result.exit_code == 0
    assert "[NUMBER('12' @0), PLUS('+' @3), NUMBER('3' @4), EOF@5]" in result.stdout


def test_tree_command(cli_runner: CliRunner):
    result = cli_runner.invoke(app, ["tree", "--", "-(1)"])
    assert result.exit_code == 0
    assert result.stdout == "-\n  1\n"


def test_eval_command(cli_runner: CliRunner):
    result = cli_runner.invoke(app, ["eval", "10-3-2"])
    assert result.exit_code == 0
    assert result.stdout.strip() == "5"


def test_eval_command_fraction(cli_runner: CliRunner):
    result = cli_runner.invoke(app, ["eval", "7/2"])
    assert result.stdout.strip() == "3.5"


def test_eval_command_error(cli_runner: CliRunner):
    result = cli_runner.invoke(app, ["eval", "(2+3"])
    assert result.exit_code == 1
    assert "Parse error at position 4: Expected ')'" in result.stdout


def test_version(cli_runner: CliRunner):
    result = cli_runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert f"minexpr version {__version__}" in result.stdout
