# countdown/core/types.py
# Value types describing countdown state as seen by observers

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable

from .duration import format_hms


# * Engine lifecycle phase; a natural finish returns to IDLE
class CountdownPhase(Enum):
    IDLE = "idle"
    RUNNING = "running"
    # manually stopped: not running but readout left as it was
    STOPPED = "stopped"


# * Notification kinds delivered to observers
class CountdownEvent(Enum):
    STARTED = "started"
    TICK = "tick"
    STOPPED = "stopped"
    FINISHED = "finished"


# * Immutable view of engine state; display fields are derived, never stored
@dataclass(frozen=True)
class CountdownSnapshot:
    total_ms: int
    remaining_ms: int
    phase: CountdownPhase

    @property
    def is_running(self) -> bool:
        return self.phase is CountdownPhase.RUNNING

    @property
    def display_text(self) -> str:
        if self.phase is CountdownPhase.IDLE:
            return ""
        return format_hms(self.remaining_ms)

    @property
    def progress_fraction(self) -> float:
        if self.phase is CountdownPhase.IDLE or self.total_ms == 0:
            return 1.0
        return self.remaining_ms / self.total_ms

    @property
    def elapsed_ms(self) -> int:
        return self.total_ms - self.remaining_ms


# observer callback signature: (event, snapshot)
CountdownObserver = Callable[[CountdownEvent, CountdownSnapshot], None]
