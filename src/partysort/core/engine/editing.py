"""List edits applied to a snapshot or preset while it is being rearranged."""

from __future__ import annotations

from typing import TypeVar

from partysort.core.contracts.roster import RosterElement

T = TypeVar("T")


def _move(items: list[T], old_index: int | None, new_index: int) -> list[T]:
    moved = list(items)
    if old_index is None or new_index < 0 or new_index > len(items) or old_index == new_index:
        return moved
    item = moved.pop(old_index)
    moved.insert(min(new_index, len(moved)), item)
    return moved


def move_member(roster: list[RosterElement], key: str, new_index: int) -> list[RosterElement]:
    """Move the member identified by *key* so it ends up at *new_index*.

    Unknown keys and out-of-range indexes leave the order unchanged.
    """
    old_index = next((idx for idx, member in enumerate(roster) if member.key == key), None)
    return _move(roster, old_index, new_index)


def move_name(names: list[str], name: str, new_index: int) -> list[str]:
    old_index = names.index(name) if name in names else None
    return _move(names, old_index, new_index)


def renumber(roster: list[RosterElement]) -> list[RosterElement]:
    return [member.model_copy(update={"display_position": position}) for position, member in enumerate(roster, 1)]
