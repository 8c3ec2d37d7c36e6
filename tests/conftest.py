"""Shared test fixtures for partysort tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from partysort.core.contracts.config import PartySortConfig
from partysort.core.contracts.roster import RosterElement


def make_member(name: str, role_abbr: str = "WAR", level: int = 100, position: int = 0) -> RosterElement:
    return RosterElement(display_position=position, name=name, role_abbr=role_abbr, level=level)


@pytest.fixture
def full_party() -> list[RosterElement]:
    """An eight-member party in its live order."""
    return [
        make_member("Alisaie", "RDM", 100, 1),
        make_member("Alphinaud", "SGE", 100, 2),
        make_member("Thancred", "GNB", 100, 3),
        make_member("Y'shtola", "BLM", 100, 4),
        make_member("Urianger", "AST", 100, 5),
        make_member("Estinien", "DRG", 100, 6),
        make_member("G'raha Tia", "WHM", 100, 7),
        make_member("Krile", "PCT", 100, 8),
    ]


@pytest.fixture
def small_party() -> list[RosterElement]:
    return [make_member("Carol", "WHM", 90, 1), make_member("Alice", "PLD", 90, 2), make_member("Bob", "BRD", 88, 3)]


@pytest.fixture
def memory_config() -> PartySortConfig:
    return PartySortConfig(provider="memory", settle_delay=0)


@pytest.fixture
def file_config(tmp_path: Path) -> PartySortConfig:
    return PartySortConfig(provider="file", roster_path=tmp_path / "roster.json", settle_delay=0)
