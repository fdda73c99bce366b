# countdown/countdown_io/__init__.py
# Console & filesystem helpers

from .console import console, get_console, configure_console, reset_console
from .generics import ensure_parent, read_json_safe, write_json_safe

__all__ = [
    "console",
    "get_console",
    "configure_console",
    "reset_console",
    "ensure_parent",
    "read_json_safe",
    "write_json_safe",
]
