"""Progress indicators honouring a one-tick-per-document contract."""

from __future__ import annotations

from typing import Optional

from rich.console import Console
from rich.progress import BarColumn, MofNCompleteColumn, Progress, TaskID, TextColumn


class NullProgress:
    """Progress stand-in for non-interactive output; only counts ticks."""

    def __init__(self) -> None:
        self.ticks = 0

    def __enter__(self) -> "NullProgress":
        return self

    def __exit__(self, *exc_info) -> None:
        return None

    def tick(self) -> None:
        self.ticks += 1


class BarProgress:
    """Transient ``checking [bar] n/total`` bar drawn with Rich.

    A ``None`` total draws a pulsing bar and ``n/?``.
    """

    def __init__(self, total: Optional[int], console: Console) -> None:
        self._progress = Progress(
            TextColumn("checking"),
            BarColumn(bar_width=20),
            MofNCompleteColumn(),
            console=console,
            transient=True,
        )
        self._total = total
        self._task: Optional[TaskID] = None

    def __enter__(self) -> "BarProgress":
        self._progress.start()
        self._task = self._progress.add_task("checking", total=self._total)
        return self

    def __exit__(self, *exc_info) -> None:
        self._progress.stop()

    def tick(self) -> None:
        if self._task is not None:
            self._progress.advance(self._task)


def make_progress(total: Optional[int], console: Console, *, enabled: bool = True):
    """Return a bar on interactive terminals, a silent ticker otherwise."""
    if enabled and console.is_terminal:
        return BarProgress(total, console)
    return NullProgress()
