"""CLI app entrypoint and error mapping."""

from __future__ import annotations

import sys

from partysort import ConfigError, MatchError, ReorderError, RosterSourceError


def main(argv: list[str] | None = None) -> int:
    import partysort.cli as cli

    parser = cli.build_parser()
    args = parser.parse_args(argv)

    if getattr(args, "verbose", False):
        cli.logging.basicConfig(level=cli.logging.DEBUG, format="%(name)s %(message)s", stream=sys.stderr)

    try:
        if args.command == "show":
            cli.asyncio.run(cli._run_show(args))
        elif args.command == "plan":
            cli.asyncio.run(cli._run_plan(args))
        elif args.command == "apply":
            cli.asyncio.run(cli._run_apply(args))
        elif args.command == "preset":
            cli.asyncio.run(cli._run_preset(args))
        return 0
    except ConfigError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 3
    except RosterSourceError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 4
    except (MatchError, ReorderError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 5
    except Exception as exc:  # pragma: no cover - defensive fallback
        print(f"error: {exc}", file=sys.stderr)
        return 1


__all__ = ["main"]
