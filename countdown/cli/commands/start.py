# countdown/cli/commands/start.py
# `countdown start` - run a countdown in the terminal w/ a live progress display

from __future__ import annotations

from typing import Optional

import typer

from ..app import app
from ...config.settings import MIN_TICK_INTERVAL_MS, get_settings
from ...core.duration import duration_from_fields, format_hms, parse_clock
from ...core.engine import CountdownEngine
from ...core.exceptions import InvalidDurationError
from ...core.tick_source import SchedulerTickSource
from ...core.types import CountdownEvent
from ...core.verbose import vlog_config
from ...countdown_io.console import console, get_console
from ...ui.countdown_view import CountdownView

# exit code for a countdown interrupted w/ Ctrl+C (128 + SIGINT)
EXIT_STOPPED = 130


# ring the terminal bell (silently skipped when stdout is not a terminal)
def ring_bell() -> None:
    get_console().bell()


# factory kept at module level so tests can swap in a virtual clock
def make_tick_source() -> SchedulerTickSource:
    return SchedulerTickSource()


# resolve positional clock shorthand or -H/-m/-s fields into milliseconds
def resolve_duration(
    clock: Optional[str], hours: str, minutes: str, seconds: str
) -> int:
    try:
        if clock is not None:
            if duration_from_fields(hours, minutes, seconds) != 0:
                raise typer.BadParameter(
                    "give the duration either as HH:MM:SS or via --hours/--minutes/--seconds, not both"
                )
            return parse_clock(clock)
        return duration_from_fields(hours, minutes, seconds)
    except InvalidDurationError as e:
        raise typer.BadParameter(str(e))


# * Run a countdown until it finishes or is interrupted
@app.command()
def start(
    ctx: typer.Context,
    clock: Optional[str] = typer.Argument(
        None, help="Duration as SS, MM:SS or HH:MM:SS", show_default=False
    ),
    hours: str = typer.Option("0", "--hours", "-H", help="Hours to count down"),
    minutes: str = typer.Option("0", "--minutes", "-m", help="Minutes to count down"),
    seconds: str = typer.Option("0", "--seconds", "-s", help="Seconds to count down"),
    interval: Optional[int] = typer.Option(
        None, "--interval", help="Tick interval in ms (overrides config)"
    ),
    no_bell: bool = typer.Option(False, "--no-bell", help="Do not ring the terminal bell at zero"),
) -> None:
    settings = get_settings(ctx)
    duration_ms = resolve_duration(clock, hours, minutes, seconds)

    interval_ms = interval if interval is not None else settings.tick_interval_ms
    if interval_ms < MIN_TICK_INTERVAL_MS:
        raise typer.BadParameter(
            f"--interval must be at least {MIN_TICK_INTERVAL_MS}ms, got {interval_ms}"
        )
    vlog_config("tick_interval_ms", interval_ms)
    vlog_config("clear_on_stop", settings.clear_on_stop)

    source = make_tick_source()
    engine = CountdownEngine(
        source, interval_ms=interval_ms, clear_on_stop=settings.clear_on_stop
    )
    view = CountdownView(
        engine,
        get_console(),
        accent_color=settings.accent_color,
        description=format_hms(duration_ms),
    )

    with view:
        try:
            engine.start(duration_ms)
            source.run()
        except KeyboardInterrupt:
            engine.stop()
        finally:
            # no armed tick may outlive the command, whatever escaped run()
            engine.stop()

    if view.last_event is CountdownEvent.STOPPED:
        readout = view.last_snapshot.display_text or "--:--:--"
        console.print(f"[yellow]Stopped[/] at [bold]{readout}[/]")
        raise typer.Exit(EXIT_STOPPED)

    console.print(f"[green]✓[/] Countdown of [bold]{format_hms(duration_ms)}[/] finished")
    if settings.bell_on_finish and not no_bell:
        ring_bell()
