"""Party adapter contracts.

A party adapter stands between the reorder logic and whatever actually owns
the member order. Reads and writes are separate contracts so callers can
inject them independently; most adapters implement both.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from types import TracebackType

from partysort.core.contracts.roster import RosterElement


class RosterSource(ABC):
    @abstractmethod
    async def query_current_order(self) -> list[RosterElement]:
        """Return the roster in its live order, or an empty list when there is no party."""
        ...  # pragma: no cover


class ReorderAuthority(ABC):
    @abstractmethod
    async def execute_swap(self, from_index: int, to_index: int) -> None:
        """Move the member at ``from_index`` to ``to_index``.

        Fire-and-forget: the effect is only observable through a later
        :meth:`RosterSource.query_current_order`.
        """
        ...  # pragma: no cover


class Party(RosterSource, ReorderAuthority):
    async def __aenter__(self) -> Party:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        return None
