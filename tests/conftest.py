# tests/conftest.py
# Pytest configuration w/ isolation fixtures for deterministic test runs

import json
from pathlib import Path

import pytest

from tests.test_support.fake_clock import FakeClock


@pytest.fixture(autouse=True)
def isolate_config(tmp_path, monkeypatch):
    # Patch Path.home() to isolated temp directory
    fake_home = tmp_path / "fake_home"
    fake_home.mkdir()

    countdown_dir = fake_home / ".countdown"
    countdown_dir.mkdir()

    # Create minimal config.json w/ test defaults
    config_data = {
        "tick_interval_ms": 1000,
        "clear_on_stop": False,
        "bell_on_finish": False,
        "accent_color": "cyan",
        "dev_mode": False,
    }

    config_file = countdown_dir / "config.json"
    with open(config_file, "w") as f:
        json.dump(config_data, f, indent=2)

    monkeypatch.setattr(Path, "home", lambda: fake_home)
    monkeypatch.delenv("COUNTDOWN_CONFIG", raising=False)

    # ! reset global settings_manager state & patch its config_path to use isolated location
    from countdown.config.settings import settings_manager

    settings_manager._settings = None
    settings_manager.config_path = config_file

    # ! reset output manager to NullOutputManager for test isolation
    from countdown.core.output import reset_output_manager

    reset_output_manager()

    yield fake_home

    reset_output_manager()


@pytest.fixture
def fake_clock():
    return FakeClock()


@pytest.fixture
def virtual_ticks(monkeypatch, fake_clock):
    # route `countdown start` through a scheduler driven by the fake clock
    from countdown.core.tick_source import SchedulerTickSource
    from countdown.cli.commands import start as start_module

    monkeypatch.setattr(
        start_module,
        "make_tick_source",
        lambda: SchedulerTickSource(fake_clock.now, fake_clock.sleep),
    )
    return fake_clock
