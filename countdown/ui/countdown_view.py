# countdown/ui/countdown_view.py
# Live countdown display: mirrors engine snapshots onto a Rich progress bar & digital readout

from __future__ import annotations

from typing import Any, Callable, Optional

from .rich_components import BarColumn, Console, Progress, ProgressColumn, TaskID, Text, TextColumn
from ..core.engine import CountdownEngine
from ..core.types import CountdownEvent, CountdownSnapshot

# bar resolution; the bar tracks progress_fraction, not milliseconds
PROGRESS_SCALE = 1000

_STATE_LABELS = {
    CountdownEvent.STARTED: "running",
    CountdownEvent.TICK: "running",
    CountdownEvent.STOPPED: "stopped",
    CountdownEvent.FINISHED: "done",
}


# digital HH:MM:SS readout column fed from the task's "readout" field
class ReadoutColumn(ProgressColumn):
    def __init__(self, style: str = "bold") -> None:
        super().__init__()
        self._style = style

    def render(self, task: Any) -> Text:
        return Text(task.fields.get("readout", ""), style=self._style)


class CountdownView:
    """Render an engine's observable state; never computes time on its own."""

    def __init__(
        self,
        engine: CountdownEngine,
        console: Console,
        accent_color: str = "cyan",
        description: str = "Countdown",
    ) -> None:
        self.engine = engine
        self.accent_color = accent_color
        self.description = description
        self.progress = Progress(
            TextColumn("[progress.description]{task.description}"),
            BarColumn(
                bar_width=40,
                complete_style=accent_color,
                finished_style=accent_color,
            ),
            ReadoutColumn(style=f"bold {accent_color}"),
            TextColumn("[dim]{task.fields[state]}"),
            console=console,
            transient=False,
            auto_refresh=False,
        )
        self._task: Optional[TaskID] = None
        self._unsubscribe: Optional[Callable[[], None]] = None
        self.last_event: Optional[CountdownEvent] = None
        self.last_snapshot: CountdownSnapshot = engine.snapshot()

    def __enter__(self) -> "CountdownView":
        self.attach()
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.detach()

    # * Start the live display & subscribe to engine notifications
    def attach(self) -> None:
        self._task = self.progress.add_task(
            self.description,
            total=PROGRESS_SCALE,
            completed=PROGRESS_SCALE,
            readout="",
            state="idle",
        )
        self.progress.start()
        self._unsubscribe = self.engine.subscribe(self.on_event)

    # * Unsubscribe & stop rendering; the last frame stays on screen
    def detach(self) -> None:
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None
        self.progress.refresh()
        self.progress.stop()

    # engine observer
    def on_event(self, event: CountdownEvent, snapshot: CountdownSnapshot) -> None:
        self.last_event = event
        self.last_snapshot = snapshot
        if self._task is None:
            return
        self.progress.update(
            self._task,
            completed=round(snapshot.progress_fraction * PROGRESS_SCALE),
            readout=snapshot.display_text,
            state=_STATE_LABELS[event],
        )
        self.progress.refresh()
