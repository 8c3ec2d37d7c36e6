"""Swap planning and execution against a reorder authority."""

from __future__ import annotations

import logging
from typing import Literal

from partysort.core.contracts.party import ReorderAuthority, RosterSource
from partysort.core.contracts.reorder import ReconcileReport
from partysort.core.contracts.roster import SwapInstruction, roster_keys
from partysort.core.engine.progress import NullReorderProgress, ReorderProgress, describe_skip, describe_swap

logger = logging.getLogger(__name__)

Strategy = Literal["live", "batch"]


def find_key(keys: list[str], key: str, *, start: int) -> int | None:
    """Index of the first occurrence of *key* at or after *start*."""
    for index in range(start, len(keys)):
        if keys[index] == key:
            return index
    return None


def plan_report(current_order: list[str], desired_order: list[str]) -> ReconcileReport:
    """Compute every swap up front against a simulated index-swap array.

    Position ``i`` is finalized on iteration ``i`` and never touched again, so
    the plan has at most ``n - 1`` instructions. A desired key that cannot be
    found among the unresolved positions is skipped, not fatal.
    """
    report = ReconcileReport()
    if len(current_order) != len(desired_order):
        return report

    working = list(current_order)
    for index, wanted in enumerate(desired_order):
        if working[index] == wanted:
            continue
        source_index = find_key(working, wanted, start=index + 1)
        if source_index is None:
            report.skipped_positions.append(index)
            continue
        working[index], working[source_index] = working[source_index], working[index]
        report.instructions.append(SwapInstruction(from_index=source_index, to_index=index))
    return report


def plan_swaps(current_order: list[str], desired_order: list[str]) -> list[SwapInstruction]:
    return plan_report(current_order, desired_order).instructions


class Reconciler:
    """Drives an authority to a desired key order, one swap at a time.

    With the ``live`` strategy the live order is re-read before every position,
    so authorities whose swaps have side effects on later positions still
    converge. The ``batch`` strategy plans against the first read only.
    """

    def __init__(
        self,
        source: RosterSource,
        authority: ReorderAuthority,
        *,
        strategy: Strategy = "live",
        progress: ReorderProgress | None = None,
    ) -> None:
        self._source = source
        self._authority = authority
        self._strategy = strategy
        self._progress: ReorderProgress = progress or NullReorderProgress()

    async def reconcile(self, desired_order: list[str]) -> ReconcileReport:
        self._progress.phase_start("Reorder", total=len(desired_order))
        try:
            if self._strategy == "batch":
                report = await self._reconcile_batch(desired_order)
            else:
                report = await self._reconcile_live(desired_order)
            self._progress.phase_done("Reorder")
            return report
        except BaseException as exc:
            self._progress.phase_error("Reorder", exc)
            raise

    async def _reconcile_live(self, desired_order: list[str]) -> ReconcileReport:
        report = ReconcileReport()
        count = len(desired_order)
        for index in range(count):
            live = roster_keys(await self._source.query_current_order())
            if len(live) != count:
                logger.warning("Live roster has %d members, expected %d; stopping", len(live), count)
                break
            detail: str | None = None
            if live[index] != desired_order[index]:
                source_index = find_key(live, desired_order[index], start=index + 1)
                if source_index is None:
                    detail = self._skip(index, report)
                else:
                    detail = await self._swap(SwapInstruction(from_index=source_index, to_index=index), report)
            self._progress.item_done("Reorder", detail)
        return report

    async def _reconcile_batch(self, desired_order: list[str]) -> ReconcileReport:
        current = roster_keys(await self._source.query_current_order())
        report = ReconcileReport()
        if len(current) != len(desired_order):
            logger.warning("Live roster has %d members, expected %d; stopping", len(current), len(desired_order))
            return report

        planned = plan_report(current, desired_order)
        swaps_by_target = {instruction.to_index: instruction for instruction in planned.instructions}
        skipped = set(planned.skipped_positions)
        for index in range(len(desired_order)):
            detail: str | None = None
            if index in skipped:
                detail = self._skip(index, report)
            elif index in swaps_by_target:
                detail = await self._swap(swaps_by_target[index], report)
            self._progress.item_done("Reorder", detail)
        return report

    def _skip(self, position: int, report: ReconcileReport) -> str:
        logger.warning("No unresolved member matches position %d; skipping", position)
        report.skipped_positions.append(position)
        return describe_skip(position)

    async def _swap(self, instruction: SwapInstruction, report: ReconcileReport) -> str:
        logger.debug("Moving member from position %d to %d", instruction.from_index, instruction.to_index)
        await self._authority.execute_swap(instruction.from_index, instruction.to_index)
        report.instructions.append(instruction)
        return describe_swap(instruction.from_index, instruction.to_index)
