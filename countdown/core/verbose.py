# countdown/core/verbose.py
# Verbose logging utilities - delegates to unified OutputManager w/ structured logging for engine transitions, ticks, file I/O & config

from __future__ import annotations

from pathlib import Path
from typing import Any

from .output import get_output_manager, set_output_manager, OutputLevel


# * Initialize verbose logging for a session
def init_verbose(
    enabled: bool = False,
    log_file: Path | None = None,
    dev_mode: bool = False,
) -> None:
    if enabled and dev_mode:
        requested_level = OutputLevel.DEBUG
    elif enabled:
        requested_level = OutputLevel.VERBOSE
    else:
        requested_level = OutputLevel.NORMAL

    try:
        from ..cli.output_manager import OutputManager

        manager = OutputManager()
        manager.initialize(
            requested_level=requested_level,
            dev_mode=dev_mode,
            log_file=log_file,
        )
        set_output_manager(manager)
    except ImportError:
        pass


# * Check if verbose logging is enabled
def is_verbose_enabled() -> bool:
    return get_output_manager().is_verbose_enabled()


# * Core verbose logging function
def vlog(category: str, message: str, detail: str | None = None) -> None:
    get_output_manager().verbose(message, category, detail)


# * Log an engine state transition (start, stop, finish)
def vlog_engine(transition: str, detail: str | None = None) -> None:
    get_output_manager().verbose(transition, "ENGINE", detail)


# * Log a single tick; only shown at DEBUG since a long countdown produces thousands
def vlog_tick(remaining_ms: int, elapsed_ms: int) -> None:
    get_output_manager().debug(
        f"-{elapsed_ms}ms, {remaining_ms}ms remaining", "TICK"
    )


# * Log file read operation
def vlog_file_read(path: Path, size: int | None = None) -> None:
    size_str = f" ({size:,} bytes)" if size is not None else ""
    get_output_manager().verbose(f"Read: {path}{size_str}", "FILE")


# * Log file write operation
def vlog_file_write(path: Path, size: int | None = None) -> None:
    size_str = f" ({size:,} bytes)" if size is not None else ""
    get_output_manager().verbose(f"Write: {path}{size_str}", "FILE")


# * Log configuration values being used
def vlog_config(key: str, value: Any) -> None:
    get_output_manager().verbose(f"{key} = {value}", "CONFIG")


# * Cleanup verbose logging
def cleanup_verbose() -> None:
    get_output_manager().end_session()
