# tests/integration/test_cli_config.py
# Integration tests for CLI config commands w/ isolated home

import json
from pathlib import Path

from typer.testing import CliRunner

from countdown.cli.app import app

ENV = {"NO_COLOR": "1", "TERM": "dumb"}


# * config path returns the isolated config location
def test_config_path_returns_isolated_path(isolate_config):
    runner = CliRunner()
    result = runner.invoke(app, ["config", "path"], env=ENV)

    assert result.exit_code == 0
    config_path = Path(result.stdout.strip())
    assert config_path == isolate_config / ".countdown" / "config.json"
    assert config_path.exists()


# * config set then get returns the same value
def test_config_set_get_round_trip():
    runner = CliRunner()

    result = runner.invoke(app, ["config", "set", "tick_interval_ms", "250"], env=ENV)
    assert result.exit_code == 0, result.output

    result = runner.invoke(app, ["config", "get", "tick_interval_ms"], env=ENV)
    assert result.exit_code == 0
    assert result.stdout.strip() == "250"

    result = runner.invoke(app, ["config", "set", "accent_color", "magenta"], env=ENV)
    assert result.exit_code == 0

    result = runner.invoke(app, ["config", "get", "accent_color"], env=ENV)
    assert result.stdout.strip() == '"magenta"'


# * Invalid values are rejected & not persisted
def test_config_set_invalid_value(isolate_config):
    runner = CliRunner()
    result = runner.invoke(app, ["config", "set", "clear_on_stop", "maybe"], env=ENV)

    assert result.exit_code == 1
    assert "Invalid setting" in result.stdout
    data = json.loads((isolate_config / ".countdown" / "config.json").read_text())
    assert data["clear_on_stop"] is False


# * Unknown keys are a usage error
def test_config_unknown_key():
    runner = CliRunner()
    result = runner.invoke(app, ["config", "get", "volume"], env=ENV)
    assert result.exit_code == 2


# * config (no subcommand) & config list show every setting
def test_config_list():
    runner = CliRunner()
    for args in (["config"], ["config", "list"]):
        result = runner.invoke(app, args, env=ENV)
        assert result.exit_code == 0
        for key in ("tick_interval_ms", "clear_on_stop", "bell_on_finish", "accent_color", "dev_mode"):
            assert key in result.stdout


# * config reset restores defaults
def test_config_reset(isolate_config):
    runner = CliRunner()
    runner.invoke(app, ["config", "set", "tick_interval_ms", "100"], env=ENV)
    result = runner.invoke(app, ["config", "reset"], env=ENV)

    assert result.exit_code == 0
    data = json.loads((isolate_config / ".countdown" / "config.json").read_text())
    assert data["tick_interval_ms"] == 1000


# * Running w/o a subcommand prints help
def test_no_subcommand_shows_help():
    runner = CliRunner()
    result = runner.invoke(app, [], env=ENV)

    assert result.exit_code == 0
    assert "start" in result.stdout
    assert "config" in result.stdout


# * Unknown accent colors are rejected before they can reach the live display
def test_config_set_unknown_accent_color(isolate_config):
    runner = CliRunner()
    result = runner.invoke(app, ["config", "set", "accent_color", "purplee"], env=ENV)

    assert result.exit_code == 1
    assert "accent_color must be a Rich color" in result.stdout
    data = json.loads((isolate_config / ".countdown" / "config.json").read_text())
    assert data["accent_color"] == "cyan"
