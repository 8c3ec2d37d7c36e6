"""Preset commands."""

from __future__ import annotations

import argparse

from partysort import PartySortConfig, Preset
from partysort.cli.common import parse_names


def format_preset_list(presets: list[Preset]) -> str:
    lines = ["", "partysort - presets", ""]
    if not presets:
        lines.append("  No saved presets.")
    for preset in presets:
        count = len(preset.player_names)
        lines.append(f"  {preset.name} ({count} player{'s' if count != 1 else ''})")
        lines.append(f"    {', '.join(preset.player_names)}")
    lines.append("")
    return "\n".join(lines)


async def run_preset(args: argparse.Namespace) -> PartySortConfig:
    import partysort.cli as cli

    config = cli.load_config(args.config)
    pp = cli.PartySort.from_config(config)

    if args.preset_command == "list":
        print(cli._format_preset_list(pp.list_presets()))
        return config

    if args.preset_command == "move":
        updated = pp.move_preset_player(args.name, args.player, args.to - 1)
        cli.save_config(updated, args.config)
        print(f"Moved {args.player!r} to position {args.to} in preset {args.name.strip()!r}.")
        return updated

    if args.preset_command == "save":
        if args.rename is not None:
            player_names = parse_names(args.order) if args.order is not None else None
            if player_names == []:
                raise cli.EmptyRosterError()
            updated = pp.update_preset(args.name, new_name=args.rename, player_names=player_names)
            cli.save_config(updated, args.config)
            print(f"Renamed preset {args.name.strip()!r} to {args.rename.strip()!r}.")
            return updated
        if args.order is not None:
            names = parse_names(args.order)
        else:
            names = [member.name for member in await pp.snapshot()]
        if not names:
            raise cli.EmptyRosterError()
        if args.replace and any(preset.name == args.name.strip() for preset in pp.list_presets()):
            updated = pp.update_preset(args.name, player_names=names)
        else:
            updated = pp.presets.add(args.name, names)
        cli.save_config(updated, args.config)
        print(f"Saved preset {args.name.strip()!r} ({len(names)} players).")
        return updated

    updated = pp.delete_preset(args.name)
    cli.save_config(updated, args.config)
    print(f"Deleted preset {args.name.strip()!r}.")
    return updated


__all__ = ["format_preset_list", "run_preset"]
