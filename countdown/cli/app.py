# countdown/cli/app.py
# Root Typer application & command registration
#
# ! Command imports at bottom of file are deferred to avoid circular dependencies.

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv

# load environment variables once at startup (COUNTDOWN_CONFIG may live in .env)
load_dotenv()

from ..config.settings import settings_manager
from ..countdown_io.console import console


app = typer.Typer(
    rich_markup_mode="rich",
    add_completion=False,
    help="Countdown timer w/ a live progress bar & HH:MM:SS readout",
    context_settings={"help_option_names": ["--help", "-h"]},
)


# * Load settings & set up verbose logging before any subcommand runs
@app.callback(invoke_without_command=True)
def main_callback(
    ctx: typer.Context,
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable verbose logging for debugging"
    ),
    log_file: Optional[Path] = typer.Option(
        None, "--log-file", help="Write verbose logs to file (enables verbose mode)"
    ),
) -> None:
    # respect injected ctx.obj from tests/embedding; only load if absent
    if getattr(ctx, "obj", None) is None:
        ctx.obj = settings_manager.load()

    # initialize verbose logging; must be after settings load to check dev_mode
    from ..core.verbose import init_verbose, cleanup_verbose, vlog_config

    # log_file implies verbose mode
    verbose_enabled = verbose or log_file is not None
    dev_mode = ctx.obj.dev_mode if hasattr(ctx.obj, "dev_mode") else False
    init_verbose(enabled=verbose_enabled, log_file=log_file, dev_mode=dev_mode)
    ctx.call_on_close(cleanup_verbose)
    vlog_config("config_path", settings_manager.config_path)

    if ctx.invoked_subcommand is None:
        console.print(ctx.get_help())
        ctx.exit()


# ! import command modules here to avoid circular import w/ app object
from .commands import start as _start  # noqa: F401,E402
from .commands import config as _config  # noqa: F401,E402
