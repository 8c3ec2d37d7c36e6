from __future__ import annotations

import pytest
from pydantic import ValidationError

from partysort.core.contracts.roster import KEY_SEP, RosterElement, SwapInstruction, member_key, roster_keys


def test_member_key_joins_fields_with_separator() -> None:
    assert member_key("Alice", "PLD", 90) == f"Alice{KEY_SEP}PLD{KEY_SEP}90"


def test_member_key_is_deterministic_for_identical_fields() -> None:
    assert member_key("Alice", "PLD", 90) == member_key("Alice", "PLD", 90)


@pytest.mark.parametrize(
    ("other"),
    [
        ("Alicia", "PLD", 90),
        ("Alice", "WAR", 90),
        ("Alice", "PLD", 91),
        ("Alice", "PLD9", 0),
        ("AlicePLD", "", 90),
    ],
)
def test_member_key_differs_when_any_field_differs(other: tuple[str, str, int]) -> None:
    assert member_key("Alice", "PLD", 90) != member_key(*other)


def test_member_key_is_injective_over_field_grid() -> None:
    names = ["A", "B", "AB", ""]
    roles = ["PLD", "P", "LD", ""]
    levels = [0, 1, 10, 100]
    keys = {member_key(name, role, level) for name in names for role in roles for level in levels}
    assert len(keys) == len(names) * len(roles) * len(levels)


def test_roster_element_key_ignores_position_and_icon() -> None:
    first = RosterElement(display_position=1, name="Alice", role_abbr="PLD", level=90, icon_id=62119)
    moved = RosterElement(display_position=4, name="Alice", role_abbr="PLD", level=90, icon_id=0)

    assert first.key == moved.key
    assert roster_keys([first, moved]) == [first.key, first.key]


def test_roster_element_is_frozen_and_rejects_negative_level() -> None:
    member = RosterElement(name="Alice", role_abbr="PLD", level=90)
    with pytest.raises(ValidationError):
        member.name = "Bob"  # type: ignore[misc]
    with pytest.raises(ValidationError):
        RosterElement(name="Alice", role_abbr="PLD", level=-1)


def test_swap_instruction_rejects_negative_indexes() -> None:
    assert SwapInstruction(from_index=3, to_index=0).from_index == 3
    with pytest.raises(ValidationError):
        SwapInstruction(from_index=-1, to_index=0)
