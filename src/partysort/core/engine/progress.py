"""Progress reporting for the reorder pipeline.

Phases are ``Snapshot`` (reading the party), ``Reorder`` (one step per roster
position) and ``Settle``. A phase may start more than once during a single
request; the SDK reads the party both when matching a preset and again
before reordering.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class ReorderProgress(ABC):
    """Observer interface for reorder pipeline progress events."""

    @abstractmethod
    def phase_start(self, phase: str, total: int | None = None) -> None:
        """A phase is (re)starting. *total* is ``None`` for single-step phases."""
        ...  # pragma: no cover

    @abstractmethod
    def item_done(self, phase: str, detail: str | None = None) -> None:
        """One roster position has been resolved.

        *detail* describes what happened there, e.g. ``"move 4 -> 1"`` or
        ``"skip 3"``; it is ``None`` when the position was already in order.
        """
        ...  # pragma: no cover

    @abstractmethod
    def phase_done(self, phase: str) -> None:
        ...  # pragma: no cover

    @abstractmethod
    def phase_error(self, phase: str, error: BaseException) -> None:
        ...  # pragma: no cover


def describe_swap(from_index: int, to_index: int) -> str:
    return f"move {from_index + 1} -> {to_index + 1}"


def describe_skip(position: int) -> str:
    return f"skip {position + 1}"


class NullReorderProgress(ReorderProgress):
    """No-op implementation used when no progress display is requested."""

    def phase_start(self, phase: str, total: int | None = None) -> None:
        pass

    def item_done(self, phase: str, detail: str | None = None) -> None:
        pass

    def phase_done(self, phase: str) -> None:
        pass

    def phase_error(self, phase: str, error: BaseException) -> None:
        pass
