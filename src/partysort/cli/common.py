"""Shared CLI formatting helpers."""

from __future__ import annotations

from partysort import RosterElement


def parse_names(value: str) -> list[str]:
    return [name.strip() for name in value.split(",") if name.strip()]


def format_comma_or_none(values: list[str]) -> str:
    if not values:
        return "none"
    return ", ".join(values)


def format_roster(roster: list[RosterElement]) -> list[str]:
    if not roster:
        return ["  (no party)"]
    width = max(len(member.name) for member in roster)
    return [
        f"  {position}. {member.name:<{width}}  {member.role_abbr} {member.level}"
        for position, member in enumerate(roster, 1)
    ]
