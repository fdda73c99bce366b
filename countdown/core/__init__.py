# countdown/core/__init__.py
# Pure countdown logic: engine, tick sources, duration helpers & output registry (no I/O)

from .engine import CountdownEngine
from .exceptions import CountdownError, InvalidDurationError
from .tick_source import ManualTickSource, SchedulerTickSource, TickHandle, TickSource
from .types import CountdownEvent, CountdownPhase, CountdownSnapshot

__all__ = [
    "CountdownEngine",
    "CountdownError",
    "InvalidDurationError",
    "ManualTickSource",
    "SchedulerTickSource",
    "TickHandle",
    "TickSource",
    "CountdownEvent",
    "CountdownPhase",
    "CountdownSnapshot",
]
