# countdown/config/settings.py
# Configuration management for Countdown CLI including tick interval & display behaviour

import os
from pathlib import Path
from typing import Dict, Any, Optional, cast
import typer
from dataclasses import dataclass, asdict
from rich.color import Color, ColorParseError

from ..countdown_io.generics import read_json_safe, write_json_safe
from ..core.exceptions import JSONParsingError, SettingsValidationError

CONFIG_ENV_VAR = "COUNTDOWN_CONFIG"

# smallest tick interval accepted; anything finer just burns CPU in the render loop
MIN_TICK_INTERVAL_MS = 10


# * Default settings dataclass for Countdown CLI
@dataclass
class CountdownSettings:
    # engine settings
    tick_interval_ms: int = 1000
    # reset the readout on manual stop instead of leaving the last value
    clear_on_stop: bool = False

    # display settings
    bell_on_finish: bool = True
    accent_color: str = "cyan"

    # dev mode setting (allows DEBUG-level output w/ --verbose)
    dev_mode: bool = False

    def __post_init__(self) -> None:
        # tick_interval_ms validation (strict int, no bools)
        if (
            isinstance(self.tick_interval_ms, bool)
            or not isinstance(self.tick_interval_ms, int)
            or self.tick_interval_ms < MIN_TICK_INTERVAL_MS
        ):
            raise SettingsValidationError(
                f"tick_interval_ms must be an integer >= {MIN_TICK_INTERVAL_MS}, "
                f"got {self.tick_interval_ms!r}",
                "tick_interval_ms",
                self.tick_interval_ms,
            )

        # strict bool validation (no coercion)
        for name in ("clear_on_stop", "bell_on_finish", "dev_mode"):
            value = getattr(self, name)
            if not isinstance(value, bool):
                raise SettingsValidationError(
                    f"{name} must be a boolean (true/false), "
                    f"got {type(value).__name__}: {value}",
                    name,
                    value,
                )

        # accent_color must be something Rich can render as a color
        if not isinstance(self.accent_color, str) or not self.accent_color.strip():
            raise SettingsValidationError(
                f"accent_color must be a non-empty string, got {self.accent_color!r}",
                "accent_color",
                self.accent_color,
            )
        try:
            Color.parse(self.accent_color)
        except ColorParseError as e:
            raise SettingsValidationError(
                f"accent_color must be a Rich color name, #rrggbb or rgb(r,g,b), "
                f"got {self.accent_color!r}: {e}",
                "accent_color",
                self.accent_color,
            ) from e


# config file location, honouring COUNTDOWN_CONFIG (also settable from .env)
def default_config_path() -> Path:
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        return Path(override).expanduser()
    return Path.home() / ".countdown" / "config.json"


# * Settings management class w/ JSON persistence for loading, saving, & modifying settings
class SettingsManager:
    def __init__(self, config_path: Optional[Path] = None):
        self.config_path = config_path or default_config_path()
        self._settings: Optional[CountdownSettings] = None

    # load settings from file or return defaults
    def load(self) -> CountdownSettings:
        if self._settings is not None:
            return self._settings

        if self.config_path.exists():
            try:
                data = read_json_safe(self.config_path)
                self._settings = CountdownSettings(**data)
            except (JSONParsingError, TypeError, ValueError) as e:
                typer.echo(f"Warning: Invalid config file {self.config_path}: {e}")
                typer.echo("Using default settings")
                self._settings = CountdownSettings()
        else:
            self._settings = CountdownSettings()

        return self._settings

    # save settings to file
    def save(self, settings: CountdownSettings) -> None:
        write_json_safe(asdict(settings), self.config_path)
        self._settings = settings

    # get a specific setting value
    def get(self, key: str) -> Any:
        settings = self.load()
        return getattr(settings, key, None)

    # set a specific setting value; the whole dataclass is rebuilt so validation runs
    def set(self, key: str, value: Any) -> None:
        settings = self.load()
        if not hasattr(settings, key):
            raise ValueError(f"Unknown setting: {key}")

        data = asdict(settings)
        data[key] = value
        self.save(CountdownSettings(**data))

    # reset to default settings
    def reset(self) -> None:
        self.save(CountdownSettings())

    # list all settings as a dictionary
    def list_settings(self) -> Dict[str, Any]:
        return asdict(self.load())


# global settings manager instance
settings_manager = SettingsManager()


# * Retrieve settings preferring injected object from Typer context
def get_settings(
    ctx: typer.Context, provided: Optional[CountdownSettings] = None
) -> CountdownSettings:
    # prefer explicitly provided settings
    if provided is not None:
        return provided

    # search ctx, parent, & root for CountdownSettings
    candidates: list[typer.Context] = [ctx]
    parent = cast(Optional[typer.Context], getattr(ctx, "parent", None))
    if parent is not None:
        candidates.append(parent)
    find_root = getattr(ctx, "find_root", None)
    root_ctx = (
        cast(Optional[typer.Context], find_root()) if callable(find_root) else None
    )
    if root_ctx is not None:
        candidates.append(root_ctx)

    for c in candidates:
        obj = getattr(c, "obj", None)
        if isinstance(obj, CountdownSettings):
            return obj

    # fallback to loading from disk
    return settings_manager.load()
