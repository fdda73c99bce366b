# countdown/ui/rich_components.py
# Centralized Rich component imports

from __future__ import annotations

# Core Rich components
from rich.console import Console
from rich.text import Text

# Progress components
from rich.progress import (
    Progress,
    BarColumn,
    TextColumn,
    ProgressColumn,
    TaskID,
)

__all__ = [
    "Console",
    "Text",
    "Progress",
    "BarColumn",
    "TextColumn",
    "ProgressColumn",
    "TaskID",
]
