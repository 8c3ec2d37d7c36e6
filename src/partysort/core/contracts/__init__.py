"""Core contracts-domain exports."""

from partysort.core.contracts.config import PartySortConfig
from partysort.core.contracts.exceptions import (
    ConfigError,
    EmptyRosterError,
    InternalLookupError,
    MatchError,
    NameSetMismatchError,
    OrderMismatchError,
    PartySortError,
    PresetNotFoundError,
    ReorderError,
    RosterSourceError,
    SizeMismatchError,
)
from partysort.core.contracts.party import Party, ReorderAuthority, RosterSource
from partysort.core.contracts.preset import Preset
from partysort.core.contracts.reorder import ApplyResult, ReconcileReport
from partysort.core.contracts.roster import (
    KEY_SEP,
    MAX_ROSTER_SIZE,
    RosterElement,
    SwapInstruction,
    member_key,
    roster_keys,
)

__all__ = [
    "KEY_SEP",
    "MAX_ROSTER_SIZE",
    "ApplyResult",
    "ConfigError",
    "EmptyRosterError",
    "InternalLookupError",
    "MatchError",
    "NameSetMismatchError",
    "OrderMismatchError",
    "Party",
    "PartySortConfig",
    "PartySortError",
    "Preset",
    "PresetNotFoundError",
    "ReconcileReport",
    "ReorderAuthority",
    "ReorderError",
    "RosterElement",
    "RosterSource",
    "RosterSourceError",
    "SizeMismatchError",
    "SwapInstruction",
    "member_key",
    "roster_keys",
]
