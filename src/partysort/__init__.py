"""Public API surface for partysort."""

__version__ = "1.0.0"

from partysort.core.config import PresetBook, load_config, save_config
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
from partysort.core.contracts.roster import MAX_ROSTER_SIZE, RosterElement, SwapInstruction, member_key, roster_keys
from partysort.core.engine import (
    NullReorderProgress,
    PresetMatcher,
    Reconciler,
    ReorderProgress,
    move_member,
    move_name,
    plan_swaps,
)
from partysort.core.providers import InMemoryParty, JsonFileParty, create_party
from partysort.sdk import PartySort

__all__ = [
    "MAX_ROSTER_SIZE",
    "ApplyResult",
    "ConfigError",
    "EmptyRosterError",
    "InMemoryParty",
    "InternalLookupError",
    "JsonFileParty",
    "MatchError",
    "NameSetMismatchError",
    "NullReorderProgress",
    "OrderMismatchError",
    "Party",
    "PartySort",
    "PartySortConfig",
    "PartySortError",
    "Preset",
    "PresetBook",
    "PresetMatcher",
    "PresetNotFoundError",
    "ReconcileReport",
    "Reconciler",
    "ReorderAuthority",
    "ReorderError",
    "ReorderProgress",
    "RosterElement",
    "RosterSource",
    "RosterSourceError",
    "SizeMismatchError",
    "SwapInstruction",
    "__version__",
    "create_party",
    "load_config",
    "member_key",
    "move_member",
    "move_name",
    "plan_swaps",
    "roster_keys",
    "save_config",
]
