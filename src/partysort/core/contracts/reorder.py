"""Reorder result contracts."""

from __future__ import annotations

from pydantic import BaseModel, Field

from partysort.core.contracts.roster import RosterElement, SwapInstruction


class ReconcileReport(BaseModel):
    instructions: list[SwapInstruction] = Field(default_factory=list)
    skipped_positions: list[int] = Field(default_factory=list)


class ApplyResult(BaseModel):
    instructions: list[SwapInstruction] = Field(default_factory=list)
    skipped_positions: list[int] = Field(default_factory=list)
    confirmed: list[RosterElement] = Field(default_factory=list)
    converged: bool = False
    dry_run: bool = False
