"""Command-line interface for partysort."""

from __future__ import annotations

import asyncio
import logging as logging

from partysort import EmptyRosterError as EmptyRosterError
from partysort import PartySort as PartySort
from partysort import load_config as load_config
from partysort import save_config as save_config
from partysort.cli.app import main as main
from partysort.cli.commands import apply as apply_command
from partysort.cli.commands import plan as plan_command
from partysort.cli.commands import preset as preset_command
from partysort.cli.commands import show as show_command
from partysort.cli.parser import build_parser as build_parser

_format_plan_summary = plan_command.format_plan_summary
_format_apply_summary = apply_command.format_apply_summary
_format_preset_list = preset_command.format_preset_list

_run_show = show_command.run_show
_run_plan = plan_command.run_plan
_run_apply = apply_command.run_apply
_run_preset = preset_command.run_preset

__all__ = ["asyncio", "build_parser", "main"]
