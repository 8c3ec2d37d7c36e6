"""Roster contracts."""

from __future__ import annotations

from pydantic import BaseModel, Field

MAX_ROSTER_SIZE = 8
KEY_SEP = "\x01"


def member_key(name: str, role_abbr: str, level: int) -> str:
    """Identity of a party member that survives a reorder.

    ``KEY_SEP`` never occurs in names, job abbreviations or levels, so two keys
    are equal only when all three fields are equal.
    """
    return f"{name}{KEY_SEP}{role_abbr}{KEY_SEP}{level}"


class RosterElement(BaseModel):
    display_position: int = Field(default=0, ge=0)
    name: str
    role_abbr: str
    level: int = Field(ge=0)
    icon_id: int = 0

    model_config = {"frozen": True}

    @property
    def key(self) -> str:
        return member_key(self.name, self.role_abbr, self.level)


class SwapInstruction(BaseModel):
    """Move the member currently at ``from_index`` to ``to_index``."""

    from_index: int = Field(ge=0)
    to_index: int = Field(ge=0)

    model_config = {"frozen": True}


def roster_keys(roster: list[RosterElement]) -> list[str]:
    return [element.key for element in roster]
