# countdown/core/engine.py
# Countdown state machine: turns a requested duration into ordered tick notifications

from __future__ import annotations

from typing import Callable, Optional

from .exceptions import InvalidDurationError
from .tick_source import TickHandle, TickSource
from .types import CountdownEvent, CountdownObserver, CountdownPhase, CountdownSnapshot
from .verbose import vlog_engine, vlog_tick

DEFAULT_TICK_INTERVAL_MS = 1000


class CountdownEngine:
    """Countdown timer decoupled from any presentation.

    The engine owns the duration & remaining time of one run at a time. Ticks
    come from an injected ``TickSource``; observers registered through
    ``subscribe`` receive ``(event, snapshot)`` after every state change.

    Phases: ``IDLE --start--> RUNNING --tick(0)--> IDLE`` (reported as
    ``FINISHED``) and ``RUNNING --stop--> STOPPED``. A stopped engine keeps its
    last readout until the next ``start`` unless ``clear_on_stop`` is set.
    """

    def __init__(
        self,
        tick_source: TickSource,
        interval_ms: int = DEFAULT_TICK_INTERVAL_MS,
        clear_on_stop: bool = False,
    ) -> None:
        if interval_ms <= 0:
            raise ValueError(f"interval_ms must be positive, got {interval_ms}")
        self._tick_source = tick_source
        self._interval_ms = interval_ms
        self._clear_on_stop = clear_on_stop

        self._total_ms = 0
        self._remaining_ms = 0
        self._phase = CountdownPhase.IDLE
        self._handle: Optional[TickHandle] = None
        # bumped per run so a tick from a cancelled stream can never mutate state
        self._generation = 0
        self._observers: list[CountdownObserver] = []

    # ------------------------------------------------------------------
    # observable state
    # ------------------------------------------------------------------

    @property
    def interval_ms(self) -> int:
        return self._interval_ms

    @property
    def total_ms(self) -> int:
        return self._total_ms

    @property
    def remaining_ms(self) -> int:
        return self._remaining_ms

    @property
    def phase(self) -> CountdownPhase:
        return self._phase

    @property
    def is_running(self) -> bool:
        return self._phase is CountdownPhase.RUNNING

    @property
    def display_text(self) -> str:
        return self.snapshot().display_text

    @property
    def progress_fraction(self) -> float:
        return self.snapshot().progress_fraction

    def snapshot(self) -> CountdownSnapshot:
        return CountdownSnapshot(
            total_ms=self._total_ms,
            remaining_ms=self._remaining_ms,
            phase=self._phase,
        )

    # * Register an observer; returns a callable that unregisters it
    def subscribe(self, observer: CountdownObserver) -> Callable[[], None]:
        self._observers.append(observer)

        def unsubscribe() -> None:
            if observer in self._observers:
                self._observers.remove(observer)

        return unsubscribe

    # ------------------------------------------------------------------
    # intents
    # ------------------------------------------------------------------

    # * Begin a new run, cancelling any run already in flight
    def start(self, duration_ms: int) -> None:
        if isinstance(duration_ms, bool) or not isinstance(duration_ms, int):
            raise InvalidDurationError(
                f"duration_ms must be an integer, got {type(duration_ms).__name__}",
                duration_ms,
            )
        if duration_ms < 0:
            raise InvalidDurationError(
                f"duration_ms must not be negative, got {duration_ms}", duration_ms
            )

        self._cancel_ticks()
        self._generation += 1
        self._total_ms = duration_ms
        self._remaining_ms = duration_ms

        if duration_ms == 0:
            vlog_engine("Zero duration, finishing immediately")
            self._phase = CountdownPhase.IDLE
            self._notify(CountdownEvent.FINISHED)
            return

        self._phase = CountdownPhase.RUNNING
        vlog_engine(
            f"Started {duration_ms}ms countdown",
            f"interval={self._interval_ms}ms, run={self._generation}",
        )
        generation = self._generation
        self._notify(CountdownEvent.STARTED)

        # an observer may have stopped or restarted the engine from STARTED
        if self._generation != generation or not self.is_running:
            return
        self._handle = self._tick_source.start(
            self._interval_ms, lambda elapsed: self._on_tick(generation, elapsed)
        )

    # * Cancel the current run; a no-op when nothing is running
    def stop(self) -> None:
        if not self.is_running:
            return
        self._cancel_ticks()
        self._generation += 1
        vlog_engine(
            f"Stopped with {self._remaining_ms}ms remaining",
            "readout cleared" if self._clear_on_stop else "readout kept",
        )
        if self._clear_on_stop:
            self._reset_to_idle()
        else:
            self._phase = CountdownPhase.STOPPED
        self._notify(CountdownEvent.STOPPED)

    # ------------------------------------------------------------------
    # internals
    # ------------------------------------------------------------------

    def _on_tick(self, generation: int, elapsed_ms: int) -> None:
        if generation != self._generation or not self.is_running:
            return
        self._remaining_ms = max(0, self._remaining_ms - max(0, elapsed_ms))
        vlog_tick(self._remaining_ms, elapsed_ms)

        if self._remaining_ms > 0:
            self._notify(CountdownEvent.TICK)
            return

        self._cancel_ticks()
        self._generation += 1
        self._reset_to_idle()
        vlog_engine(f"Finished {self._total_ms}ms countdown")
        self._notify(CountdownEvent.FINISHED)

    def _reset_to_idle(self) -> None:
        self._phase = CountdownPhase.IDLE
        self._remaining_ms = self._total_ms

    def _cancel_ticks(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def _notify(self, event: CountdownEvent) -> None:
        snapshot = self.snapshot()
        # copy so observers may (un)subscribe while being notified
        for observer in list(self._observers):
            observer(event, snapshot)
