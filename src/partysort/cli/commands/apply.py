"""Apply command formatting."""

from __future__ import annotations

import argparse

from partysort import ApplyResult
from partysort.cli.commands.plan import resolve_desired
from partysort.cli.common import format_comma_or_none, format_roster
from partysort.cli.progress.rich import RichReorderProgress


def format_apply_summary(result: ApplyResult) -> str:
    mode = "dry-run" if result.dry_run else "apply"
    skipped = [str(position + 1) for position in result.skipped_positions]
    lines = [
        "",
        f"partysort - reorder complete ({mode})",
        "",
        f"  Swaps:     {len(result.instructions)}",
        f"  Skipped:   {format_comma_or_none(skipped)}",
        f"  Status:    {'in order' if result.converged else 'not in order'}",
        "",
        "  Party order:",
        *format_roster(result.confirmed),
    ]
    if result.dry_run:
        lines.append("")
        lines.append("  [dry-run] No changes were made")
    lines.append("")
    return "\n".join(lines)


async def run_apply(args: argparse.Namespace) -> ApplyResult:
    import partysort.cli as cli

    config = cli.load_config(args.config)

    if not args.verbose:
        with RichReorderProgress() as progress:
            pp = cli.PartySort.from_config(config, progress=progress)
            desired = await resolve_desired(pp, args)
            result = await pp.reorder(desired, dry_run=args.dry_run)
    else:
        pp = cli.PartySort.from_config(config)
        desired = await resolve_desired(pp, args)
        result = await pp.reorder(desired, dry_run=args.dry_run)

    print(cli._format_apply_summary(result))
    return result


__all__ = ["format_apply_summary", "run_apply"]
