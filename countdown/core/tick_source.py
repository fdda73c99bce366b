# countdown/core/tick_source.py
# Injectable periodic tick sources: a virtual clock for tests & a sched-based cooperative loop

from __future__ import annotations

import sched
import time
from typing import Callable, Optional, Protocol, runtime_checkable

# tick callback receives the milliseconds elapsed since the previous tick
TickCallback = Callable[[int], None]


# * Handle for one running tick stream
@runtime_checkable
class TickHandle(Protocol):
    @property
    def active(self) -> bool: ...

    def cancel(self) -> None: ...


# * Anything that can start a periodic callback & hand back a cancellable handle
@runtime_checkable
class TickSource(Protocol):
    def start(self, interval_ms: int, callback: TickCallback) -> TickHandle: ...


def _check_interval(interval_ms: int) -> None:
    if interval_ms <= 0:
        raise ValueError(f"tick interval must be positive, got {interval_ms}")


# ---------------------------------------------------------------------------
# Virtual clock
# ---------------------------------------------------------------------------


class _ManualStream:
    def __init__(self, source: "ManualTickSource", interval_ms: int, callback: TickCallback):
        self._source = source
        self.interval_ms = interval_ms
        self.callback = callback
        # virtual time of the next tick
        self.next_due_ms = source.now_ms + interval_ms
        self._active = True

    @property
    def active(self) -> bool:
        return self._active

    def cancel(self) -> None:
        if self._active:
            self._active = False
            self._source._streams.remove(self)


# * Deterministic tick source driven by advance(); no wall-clock waiting
class ManualTickSource:
    def __init__(self) -> None:
        self.now_ms = 0
        self._streams: list[_ManualStream] = []

    def start(self, interval_ms: int, callback: TickCallback) -> _ManualStream:
        _check_interval(interval_ms)
        stream = _ManualStream(self, interval_ms, callback)
        self._streams.append(stream)
        return stream

    @property
    def active_streams(self) -> int:
        return len(self._streams)

    # move virtual time forward, firing due ticks in deadline order
    def advance(self, ms: int) -> None:
        if ms < 0:
            raise ValueError(f"cannot advance by negative time: {ms}")
        target = self.now_ms + ms
        while True:
            due = [s for s in self._streams if s.next_due_ms <= target]
            if not due:
                break
            stream = min(due, key=lambda s: s.next_due_ms)
            self.now_ms = stream.next_due_ms
            stream.next_due_ms += stream.interval_ms
            stream.callback(stream.interval_ms)
        self.now_ms = target

    # fire exactly n ticks of the earliest stream(s), regardless of interval
    def tick(self, count: int = 1) -> None:
        for _ in range(count):
            if not self._streams:
                return
            nearest = min(s.next_due_ms for s in self._streams)
            self.advance(nearest - self.now_ms)


# ---------------------------------------------------------------------------
# Cooperative scheduler
# ---------------------------------------------------------------------------


class _ScheduledStream:
    def __init__(
        self,
        scheduler: sched.scheduler,
        timefunc: Callable[[], float],
        interval_ms: int,
        callback: TickCallback,
    ):
        self._scheduler = scheduler
        self._interval_ms = interval_ms
        self._callback = callback
        # absolute deadlines (origin + n * interval) keep ticks from drifting
        self._origin = timefunc()
        self._count = 0
        self._event: Optional[sched.Event] = None
        self._active = True
        self._arm()

    @property
    def active(self) -> bool:
        return self._active

    def _arm(self) -> None:
        deadline = self._origin + (self._count + 1) * self._interval_ms / 1000
        self._event = self._scheduler.enterabs(deadline, 1, self._fire)

    def _fire(self) -> None:
        self._event = None
        if not self._active:
            return
        self._count += 1
        # re-arm before the callback so a cancel() inside it removes the next event
        self._arm()
        self._callback(self._interval_ms)

    def cancel(self) -> None:
        if not self._active:
            return
        self._active = False
        if self._event is not None:
            self._scheduler.cancel(self._event)
            self._event = None


# * Tick source backed by sched.scheduler; run() drives ticks on the calling thread
class SchedulerTickSource:
    def __init__(
        self,
        timefunc: Callable[[], float] = time.monotonic,
        delayfunc: Callable[[float], object] = time.sleep,
    ) -> None:
        self._timefunc = timefunc
        self._scheduler = sched.scheduler(timefunc, delayfunc)

    def start(self, interval_ms: int, callback: TickCallback) -> _ScheduledStream:
        _check_interval(interval_ms)
        return _ScheduledStream(self._scheduler, self._timefunc, interval_ms, callback)

    @property
    def idle(self) -> bool:
        return self._scheduler.empty()

    # block until every stream is cancelled
    def run(self) -> None:
        self._scheduler.run()
