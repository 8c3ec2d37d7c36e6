"""JSON-file-backed party adapter."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, ValidationError

from partysort.core.contracts.exceptions import RosterSourceError
from partysort.core.contracts.party import Party
from partysort.core.contracts.roster import MAX_ROSTER_SIZE, RosterElement
from partysort.core.engine.editing import renumber

logger = logging.getLogger(__name__)


class RosterFile(BaseModel):
    members: list[RosterElement] = Field(default_factory=list, max_length=MAX_ROSTER_SIZE)


class JsonFileParty(Party):
    """Party whose live order is a roster JSON file.

    Every swap is written back to disk immediately. A missing file reads as an
    empty party.
    """

    def __init__(self, path: Path) -> None:
        self._path = path

    @property
    def path(self) -> Path:
        return self._path

    def _read(self) -> list[RosterElement]:
        if not self._path.exists():
            return []
        try:
            payload: Any = json.loads(self._path.read_text(encoding="utf-8"))
            return renumber(RosterFile.model_validate(payload).members)
        except (OSError, UnicodeDecodeError, json.JSONDecodeError, ValidationError) as exc:
            raise RosterSourceError(f"invalid roster file: {self._path}") from exc

    def _write(self, members: list[RosterElement]) -> None:
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._path.write_text(RosterFile(members=members).model_dump_json(indent=2) + "\n", encoding="utf-8")
        except OSError as exc:
            raise RosterSourceError(f"failed to write roster file: {self._path}") from exc

    async def query_current_order(self) -> list[RosterElement]:
        return self._read()

    async def execute_swap(self, from_index: int, to_index: int) -> None:
        members = self._read()
        if not (0 <= from_index < len(members) and 0 <= to_index < len(members)):
            logger.debug("Ignoring swap %d -> %d outside roster of %d", from_index, to_index, len(members))
            return
        members[from_index], members[to_index] = members[to_index], members[from_index]
        self._write(renumber(members))
