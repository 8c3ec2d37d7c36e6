"""Show command."""

from __future__ import annotations

import argparse

from partysort import RosterElement
from partysort.cli.common import format_roster


async def run_show(args: argparse.Namespace) -> list[RosterElement]:
    import partysort.cli as cli

    config = cli.load_config(args.config)
    roster = await cli.PartySort.from_config(config).snapshot()
    print("\n".join(["", "partysort - current order", "", *format_roster(roster), ""]))
    return roster


__all__ = ["run_show"]
