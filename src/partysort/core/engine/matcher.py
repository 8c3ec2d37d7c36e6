"""Preset-to-roster matching by player name."""

from __future__ import annotations

import logging
from collections import Counter

from partysort.core.contracts.exceptions import (
    EmptyRosterError,
    InternalLookupError,
    NameSetMismatchError,
    SizeMismatchError,
)
from partysort.core.contracts.roster import RosterElement

logger = logging.getLogger(__name__)


class PresetMatcher:
    """Reorders a roster snapshot to follow a saved list of names.

    Matching is by ``name`` only. When several members share a name, each
    preset entry takes the first member with that name not already taken.
    """

    @staticmethod
    def _ordered_unique(names: list[str], wanted: set[str]) -> list[str]:
        seen: set[str] = set()
        result: list[str] = []
        for name in names:
            if name in wanted and name not in seen:
                seen.add(name)
                result.append(name)
        return result

    @staticmethod
    def _ordered_surplus(names: list[str], surplus: Counter[str]) -> list[str]:
        remaining = Counter(surplus)
        result: list[str] = []
        for name in names:
            if remaining[name] > 0:
                remaining[name] -= 1
                result.append(name)
        return result

    def name_differences(self, preset_names: list[str], current_names: list[str]) -> tuple[list[str], list[str]]:
        """Return ``(missing, extra)`` names; both empty when the lists correspond one-to-one."""
        preset_set = set(preset_names)
        current_set = set(current_names)
        if preset_set != current_set:
            return (
                self._ordered_unique(preset_names, preset_set - current_set),
                self._ordered_unique(current_names, current_set - preset_set),
            )
        preset_counts = Counter(preset_names)
        current_counts = Counter(current_names)
        return (
            self._ordered_surplus(preset_names, preset_counts - current_counts),
            self._ordered_surplus(current_names, current_counts - preset_counts),
        )

    def match(self, preset_names: list[str], current: list[RosterElement]) -> list[RosterElement]:
        if not current:
            raise EmptyRosterError()
        if len(preset_names) != len(current):
            raise SizeMismatchError(preset_size=len(preset_names), current_size=len(current))

        missing, extra = self.name_differences(preset_names, [member.name for member in current])
        if missing or extra:
            raise NameSetMismatchError(missing=missing, extra=extra)

        remaining = list(current)
        ordered: list[RosterElement] = []
        for name in preset_names:
            index = next((idx for idx, member in enumerate(remaining) if member.name == name), None)
            if index is None:
                logger.error("Preset name %r passed validation but is not in the roster", name)
                raise InternalLookupError(name)
            ordered.append(remaining.pop(index))
        return ordered
