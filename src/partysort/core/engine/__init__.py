"""Core engine-domain exports."""

from .editing import move_member, move_name, renumber
from .matcher import PresetMatcher
from .progress import NullReorderProgress, ReorderProgress, describe_skip, describe_swap
from .reconciler import Reconciler, find_key, plan_report, plan_swaps

__all__ = [
    "NullReorderProgress",
    "PresetMatcher",
    "Reconciler",
    "ReorderProgress",
    "describe_skip",
    "describe_swap",
    "find_key",
    "move_member",
    "move_name",
    "plan_report",
    "plan_swaps",
    "renumber",
]
