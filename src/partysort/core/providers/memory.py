"""In-memory party adapter."""

from __future__ import annotations

from dataclasses import dataclass

from partysort.core.contracts.exceptions import RosterSourceError
from partysort.core.contracts.party import Party
from partysort.core.contracts.roster import MAX_ROSTER_SIZE, RosterElement
from partysort.core.engine.editing import renumber


@dataclass(frozen=True)
class PartyOperation:
    """Deterministic operation log entry."""

    sequence: int
    name: str
    payload: dict[str, int]


class InMemoryParty(Party):
    """Party held in a list, with index-swap semantics and an operation log.

    Used for dry runs (seeded from a real snapshot) and as the reference
    authority in tests.
    """

    def __init__(self, members: list[RosterElement] | None = None) -> None:
        members = list(members or [])
        if len(members) > MAX_ROSTER_SIZE:
            raise RosterSourceError(f"party cannot have more than {MAX_ROSTER_SIZE} members, got {len(members)}")
        self._members = renumber(members)
        self._operation_counter = 0
        self._operations: list[PartyOperation] = []

    @property
    def operations(self) -> tuple[PartyOperation, ...]:
        return tuple(self._operations)

    @property
    def members(self) -> list[RosterElement]:
        return list(self._members)

    def _record_operation(self, name: str, payload: dict[str, int] | None = None) -> None:
        self._operation_counter += 1
        self._operations.append(PartyOperation(sequence=self._operation_counter, name=name, payload=payload or {}))

    async def query_current_order(self) -> list[RosterElement]:
        self._record_operation("query_current_order", {"size": len(self._members)})
        return list(self._members)

    async def execute_swap(self, from_index: int, to_index: int) -> None:
        self._record_operation("execute_swap", {"from_index": from_index, "to_index": to_index})
        if not (0 <= from_index < len(self._members) and 0 <= to_index < len(self._members)):
            return
        members = list(self._members)
        members[from_index], members[to_index] = members[to_index], members[from_index]
        self._members = renumber(members)
