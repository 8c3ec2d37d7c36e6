"""Plan command formatting."""

from __future__ import annotations

import argparse

from partysort import PartySort, RosterElement, SwapInstruction
from partysort.cli.common import format_roster, parse_names
from partysort.core.engine.progress import describe_swap


async def resolve_desired(pp: PartySort, args: argparse.Namespace) -> list[RosterElement]:
    if args.preset is not None:
        return await pp.match_preset(args.preset)
    return await pp.match_names(parse_names(args.order))


def format_plan_summary(instructions: list[SwapInstruction], desired: list[RosterElement]) -> str:
    lines = ["", "partysort - swap plan", "", "  Target order:", *format_roster(desired), ""]
    if not instructions:
        lines.append("  Status:    already in order")
    else:
        lines.append(f"  Swaps:     {len(instructions)}")
        lines.extend(
            f"    {step}. {describe_swap(instruction.from_index, instruction.to_index)}"
            for step, instruction in enumerate(instructions, 1)
        )
    lines.append("")
    return "\n".join(lines)


async def run_plan(args: argparse.Namespace) -> list[SwapInstruction]:
    import partysort.cli as cli

    config = cli.load_config(args.config)
    pp = cli.PartySort.from_config(config)
    desired = await resolve_desired(pp, args)
    instructions = await pp.plan(desired)
    print(cli._format_plan_summary(instructions, desired))
    return instructions


__all__ = ["format_plan_summary", "resolve_desired", "run_plan"]
