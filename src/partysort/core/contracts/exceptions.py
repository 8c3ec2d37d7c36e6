"""Exception hierarchy for partysort."""

from __future__ import annotations


class PartySortError(Exception):
    """Base exception for all partysort errors."""


class ConfigError(PartySortError):
    """Configuration loading or validation failure."""


class PresetNotFoundError(ConfigError):
    """No preset with the requested name exists in the configuration."""

    def __init__(self, name: str) -> None:
        super().__init__(f"No preset named {name!r}.")
        self.name = name


class RosterSourceError(PartySortError):
    """Party provider failed to read or write the roster."""


class ReorderError(PartySortError):
    """Base failure of a reorder request before any swap is issued."""


class OrderMismatchError(ReorderError):
    """Desired order does not have the same length as the live roster."""

    def __init__(self, *, expected: int, actual: int) -> None:
        super().__init__(f"Desired order has {actual} members but party has {expected}.")
        self.expected = expected
        self.actual = actual


class MatchError(PartySortError):
    """Preset could not be matched against the current roster."""


class EmptyRosterError(MatchError, ReorderError):
    """No current roster to operate on."""

    def __init__(self, message: str = "No party list (solo or not in party).") -> None:
        super().__init__(message)


class SizeMismatchError(MatchError):
    """Preset and roster have a different number of members."""

    def __init__(self, *, preset_size: int, current_size: int) -> None:
        super().__init__(f"Preset has {preset_size} players but party has {current_size}.")
        self.preset_size = preset_size
        self.current_size = current_size


class NameSetMismatchError(MatchError):
    """Preset names and roster names differ.

    Attributes:
        missing: Names listed in the preset but absent from the party.
        extra: Names present in the party but absent from the preset.
    """

    def __init__(self, *, missing: list[str], extra: list[str]) -> None:
        parts: list[str] = []
        if missing:
            parts.append("Missing in party: " + ", ".join(missing))
        if extra:
            parts.append("Not in preset: " + ", ".join(extra))
        super().__init__(". ".join(parts))
        self.missing = missing
        self.extra = extra


class InternalLookupError(MatchError):
    """A validated preset name could not be located in the roster."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Name match failed for {name!r}.")
        self.name = name
