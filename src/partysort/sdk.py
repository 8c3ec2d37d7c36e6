"""SDK composition root for partysort."""

from __future__ import annotations

import asyncio
import logging

from partysort.core.config import PresetBook
from partysort.core.contracts.config import PartySortConfig
from partysort.core.contracts.exceptions import EmptyRosterError, OrderMismatchError
from partysort.core.contracts.party import Party, ReorderAuthority, RosterSource
from partysort.core.contracts.preset import Preset
from partysort.core.contracts.reorder import ApplyResult
from partysort.core.contracts.roster import RosterElement, SwapInstruction, roster_keys
from partysort.core.engine.matcher import PresetMatcher
from partysort.core.engine.progress import NullReorderProgress, ReorderProgress
from partysort.core.engine.reconciler import Reconciler, plan_swaps
from partysort.core.providers.factory import create_party
from partysort.core.providers.memory import InMemoryParty

logger = logging.getLogger(__name__)


class PartySort:
    """partysort SDK public API.

    Reads come from *source*, swaps go to *authority*. Apply requests are
    serialized: a second :meth:`reorder` waits until the first one has settled
    and re-read the party.
    """

    def __init__(
        self,
        *,
        source: RosterSource,
        authority: ReorderAuthority,
        config: PartySortConfig,
        progress: ReorderProgress | None = None,
        matcher: PresetMatcher | None = None,
    ) -> None:
        self._source = source
        self._authority = authority
        self._config = config
        self._progress: ReorderProgress = progress or NullReorderProgress()
        self._matcher = matcher or PresetMatcher()
        self._apply_lock = asyncio.Lock()

    @classmethod
    def from_config(
        cls,
        config: PartySortConfig,
        *,
        party: Party | None = None,
        progress: ReorderProgress | None = None,
    ) -> PartySort:
        resolved = party if party is not None else create_party(config)
        return cls(source=resolved, authority=resolved, config=config, progress=progress)

    @property
    def config(self) -> PartySortConfig:
        return self._config

    @property
    def presets(self) -> PresetBook:
        return PresetBook(self._config)

    async def snapshot(self) -> list[RosterElement]:
        self._progress.phase_start("Snapshot")
        try:
            members = await self._source.query_current_order()
        except BaseException as exc:
            self._progress.phase_error("Snapshot", exc)
            raise
        self._progress.phase_done("Snapshot")
        return members

    async def plan(self, desired: list[RosterElement]) -> list[SwapInstruction]:
        """Preview the swaps that would turn the live order into *desired*."""
        current = await self.snapshot()
        self._check_lengths(current, desired)
        return plan_swaps(roster_keys(current), roster_keys(desired))

    async def match_preset(self, name: str) -> list[RosterElement]:
        preset = self.presets.get(name)
        return self._matcher.match(preset.player_names, await self.snapshot())

    async def match_names(self, names: list[str]) -> list[RosterElement]:
        return self._matcher.match(names, await self.snapshot())

    async def apply_preset(self, name: str, *, dry_run: bool = False) -> ApplyResult:
        return await self.reorder(await self.match_preset(name), dry_run=dry_run)

    async def reorder(self, desired: list[RosterElement], *, dry_run: bool = False) -> ApplyResult:
        """Drive the party to *desired*, wait for it to settle, and re-read it.

        With ``dry_run`` the swaps are issued against an in-memory copy of the
        current snapshot instead of the real authority.
        """
        async with self._apply_lock:
            current = await self.snapshot()
            self._check_lengths(current, desired)

            if dry_run:
                party = InMemoryParty(current)
                source: RosterSource = party
                authority: ReorderAuthority = party
            else:
                source, authority = self._source, self._authority

            desired_keys = roster_keys(desired)
            report = await Reconciler(
                source, authority, strategy=self._config.strategy, progress=self._progress
            ).reconcile(desired_keys)

            if not dry_run:
                await self._settle()
            confirmed = await source.query_current_order()
            converged = roster_keys(confirmed) == desired_keys
            if not converged:
                logger.warning("Party order did not converge after %d swaps", len(report.instructions))

            return ApplyResult(
                instructions=report.instructions,
                skipped_positions=report.skipped_positions,
                confirmed=confirmed,
                converged=converged,
                dry_run=dry_run,
            )

    def save_preset(self, name: str, roster: list[RosterElement]) -> PartySortConfig:
        self._config = self.presets.add(name, [member.name for member in roster])
        return self._config

    def update_preset(
        self, name: str, *, new_name: str | None = None, player_names: list[str] | None = None
    ) -> PartySortConfig:
        self._config = self.presets.replace(name, new_name=new_name, player_names=player_names)
        return self._config

    def move_preset_player(self, name: str, player: str, new_index: int) -> PartySortConfig:
        self._config = self.presets.move_player(name, player, new_index)
        return self._config

    def delete_preset(self, name: str) -> PartySortConfig:
        self._config = self.presets.delete(name)
        return self._config

    def list_presets(self) -> list[Preset]:
        return self.presets.presets

    async def _settle(self) -> None:
        delay = self._config.settle_delay
        if delay <= 0:
            return
        self._progress.phase_start("Settle")
        await asyncio.sleep(delay)
        self._progress.phase_done("Settle")

    @staticmethod
    def _check_lengths(current: list[RosterElement], desired: list[RosterElement]) -> None:
        if not current:
            raise EmptyRosterError()
        if len(current) != len(desired):
            raise OrderMismatchError(expected=len(current), actual=len(desired))
