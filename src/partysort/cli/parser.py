"""CLI parser construction."""

from __future__ import annotations

import argparse
from importlib.metadata import PackageNotFoundError, version


def _package_version() -> str:
    try:
        return version("partysort")
    except PackageNotFoundError:
        return "0.0.0"


def _add_config(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--config", default="./partysort.json", help="Path to partysort.json")


def _add_order_source(parser: argparse.ArgumentParser) -> None:
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--order", help="Comma-separated player names in the desired order")
    source.add_argument("--preset", help="Name of a saved preset")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="partysort")
    parser.add_argument("--version", action="version", version=f"%(prog)s {_package_version()}")

    subparsers = parser.add_subparsers(dest="command", required=True)

    show_parser = subparsers.add_parser("show", help="Print the current party order")
    _add_config(show_parser)
    show_parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")

    plan_parser = subparsers.add_parser("plan", help="Print the swaps needed to reach an order")
    _add_config(plan_parser)
    _add_order_source(plan_parser)
    plan_parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")

    apply_parser = subparsers.add_parser("apply", help="Reorder the party")
    _add_config(apply_parser)
    _add_order_source(apply_parser)
    mode = apply_parser.add_mutually_exclusive_group(required=True)
    mode.add_argument("--dry-run", action="store_true", help="Preview mode")
    mode.add_argument("--apply", action="store_true", help="Apply mode")
    apply_parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")

    preset_parser = subparsers.add_parser("preset", help="Preset operations")
    preset_subparsers = preset_parser.add_subparsers(dest="preset_command", required=True)

    preset_list = preset_subparsers.add_parser("list", help="List saved presets")
    _add_config(preset_list)

    preset_save = preset_subparsers.add_parser("save", help="Save the current order (or --order) as a preset")
    _add_config(preset_save)
    preset_save.add_argument("--name", required=True, help="Preset name")
    preset_save.add_argument("--order", default=None, help="Comma-separated player names (default: current party)")
    preset_save.add_argument("--replace", action="store_true", help="Overwrite an existing preset of the same name")
    preset_save.add_argument("--rename", default=None, metavar="NEW_NAME", help="Rename an existing preset")

    preset_move = preset_subparsers.add_parser("move", help="Move a player to another position within a preset")
    _add_config(preset_move)
    preset_move.add_argument("--name", required=True, help="Preset name")
    preset_move.add_argument("--player", required=True, help="Player name to move")
    preset_move.add_argument("--to", required=True, type=int, help="New 1-based position")

    preset_delete = preset_subparsers.add_parser("delete", help="Delete a saved preset")
    _add_config(preset_delete)
    preset_delete.add_argument("--name", required=True, help="Preset name")

    return parser


__all__ = ["build_parser"]
