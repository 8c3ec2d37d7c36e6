"""Rich-based reorder progress display."""

from __future__ import annotations

from types import TracebackType
from typing import ClassVar

from rich.console import Console
from rich.progress import BarColumn, MofNCompleteColumn, Progress, SpinnerColumn, TextColumn, TimeElapsedColumn
from rich.progress import TaskID as RichTaskID

from partysort.core.engine.progress import ReorderProgress


class RichReorderProgress(ReorderProgress):
    """One row per phase, with the latest swap or skip shown beside the bar.

    A phase that starts again (the party is read once to match a preset and
    again before reordering) reuses its row instead of adding a new one::

        with RichReorderProgress() as progress:
            result = await PartySort.from_config(config, progress=progress).apply_preset("Raid")
    """

    _PHASE_LABELS: ClassVar[dict[str, str]] = {
        "Snapshot": "[cyan]Snapshot[/]",
        "Reorder": "[green]Reorder[/]",
        "Settle": "[magenta]Settle[/]",
    }

    def __init__(self, console: Console | None = None) -> None:
        self._console = console or Console(stderr=True)
        self._progress = Progress(
            SpinnerColumn(finished_text="[green]✓[/green]"),
            TextColumn("{task.description:>10}"),
            BarColumn(bar_width=24),
            MofNCompleteColumn(),
            TextColumn("{task.fields[detail]}"),
            TimeElapsedColumn(),
            console=self._console,
            transient=False,
        )
        self._task_ids: dict[str, RichTaskID] = {}

    def __enter__(self) -> RichReorderProgress:
        self._progress.start()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self._progress.stop()

    def phase_start(self, phase: str, total: int | None = None) -> None:
        label = self._PHASE_LABELS.get(phase, phase)
        # Single-step phases count as one item so a restart can reset them.
        steps = total if total is not None else 1
        task_id = self._task_ids.get(phase)
        if task_id is None:
            self._task_ids[phase] = self._progress.add_task(label, total=steps, detail="")
        else:
            self._progress.reset(task_id, total=steps, description=label, detail="")

    def item_done(self, phase: str, detail: str | None = None) -> None:
        task_id = self._task_ids.get(phase)
        if task_id is None:
            return
        if detail is not None:
            self._progress.update(task_id, advance=1, detail=detail)
        else:
            self._progress.advance(task_id)

    def phase_done(self, phase: str) -> None:
        task_id = self._task_ids.get(phase)
        if task_id is None:
            return
        task = self._progress.tasks[task_id]
        self._progress.update(task_id, completed=task.total)

    def phase_error(self, phase: str, error: BaseException) -> None:
        task_id = self._task_ids.get(phase)
        if task_id is None:
            return
        self._progress.update(task_id, description=f"[red]✗ {phase}[/red]", detail=str(error))
