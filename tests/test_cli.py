from __future__ import annotations

import json
from pathlib import Path

import pytest

from partysort import ApplyResult, RosterElement, SwapInstruction
from partysort.cli import _format_apply_summary, _format_plan_summary, _format_preset_list, build_parser, main
from partysort.cli.common import format_roster, parse_names
from partysort.core.contracts.preset import Preset
from partysort.core.providers.file import RosterFile


def _write_setup(tmp_path: Path, members: list[RosterElement], presets: list[dict[str, object]] | None = None) -> Path:
    (tmp_path / "roster.json").write_text(RosterFile(members=members).model_dump_json(), encoding="utf-8")
    config_path = tmp_path / "partysort.json"
    config_path.write_text(
        json.dumps(
            {
                "provider": "file",
                "roster_path": "roster.json",
                "settle_delay": 0,
                "presets": presets or [],
            }
        ),
        encoding="utf-8",
    )
    return config_path


def _roster_names(tmp_path: Path) -> list[str]:
    payload = json.loads((tmp_path / "roster.json").read_text(encoding="utf-8"))
    return [member["name"] for member in payload["members"]]


def test_build_parser_requires_subcommand() -> None:
    with pytest.raises(SystemExit) as exc:
        build_parser().parse_args([])

    assert exc.value.code == 2


def test_build_parser_apply_requires_mode_and_order_source() -> None:
    parser = build_parser()

    with pytest.raises(SystemExit):
        parser.parse_args(["apply", "--order", "A,B"])
    with pytest.raises(SystemExit):
        parser.parse_args(["apply", "--dry-run"])
    with pytest.raises(SystemExit):
        parser.parse_args(["apply", "--dry-run", "--order", "A", "--preset", "Raid"])

    args = parser.parse_args(["apply", "--preset", "Raid", "--apply"])
    assert args.preset == "Raid"
    assert args.apply is True
    assert args.config == "./partysort.json"


def test_parse_names_trims_and_drops_blanks() -> None:
    assert parse_names(" A, B ,,C ") == ["A", "B", "C"]


def test_format_roster_aligns_names(small_party: list[RosterElement]) -> None:
    assert format_roster(small_party) == ["  1. Carol  WHM 90", "  2. Alice  PLD 90", "  3. Bob    BRD 88"]
    assert format_roster([]) == ["  (no party)"]


def test_format_plan_summary_lists_one_based_moves(small_party: list[RosterElement]) -> None:
    text = _format_plan_summary([SwapInstruction(from_index=2, to_index=0)], small_party)

    assert "Swaps:     1" in text
    assert "1. move 3 -> 1" in text


def test_format_plan_summary_in_order(small_party: list[RosterElement]) -> None:
    assert "already in order" in _format_plan_summary([], small_party)


def test_format_apply_summary_dry_run(small_party: list[RosterElement]) -> None:
    result = ApplyResult(confirmed=small_party, skipped_positions=[1], converged=False, dry_run=True)

    text = _format_apply_summary(result)

    assert "reorder complete (dry-run)" in text
    assert "Skipped:   2" in text
    assert "not in order" in text
    assert "[dry-run] No changes were made" in text


def test_format_preset_list() -> None:
    assert "No saved presets." in _format_preset_list([])
    text = _format_preset_list([Preset(name="Raid", player_names=["A"])])
    assert "Raid (1 player)" in text


def test_main_show_prints_roster(
    tmp_path: Path, small_party: list[RosterElement], capsys: pytest.CaptureFixture[str]
) -> None:
    config_path = _write_setup(tmp_path, small_party)

    assert main(["show", "--config", str(config_path)]) == 0
    assert "1. Carol" in capsys.readouterr().out


def test_main_plan_does_not_touch_roster(
    tmp_path: Path, small_party: list[RosterElement], capsys: pytest.CaptureFixture[str]
) -> None:
    config_path = _write_setup(tmp_path, small_party)

    assert main(["plan", "--config", str(config_path), "--order", "Bob,Alice,Carol"]) == 0
    assert "move 3 -> 1" in capsys.readouterr().out
    assert _roster_names(tmp_path) == ["Carol", "Alice", "Bob"]


def test_main_apply_reorders_roster_file(tmp_path: Path, small_party: list[RosterElement]) -> None:
    config_path = _write_setup(tmp_path, small_party)

    assert main(["apply", "--config", str(config_path), "--order", "Alice,Bob,Carol", "--apply", "-v"]) == 0
    assert _roster_names(tmp_path) == ["Alice", "Bob", "Carol"]


def test_main_apply_dry_run_keeps_roster_file(
    tmp_path: Path, small_party: list[RosterElement], capsys: pytest.CaptureFixture[str]
) -> None:
    config_path = _write_setup(tmp_path, small_party)

    assert main(["apply", "--config", str(config_path), "--order", "Alice,Bob,Carol", "--dry-run"]) == 0
    assert _roster_names(tmp_path) == ["Carol", "Alice", "Bob"]
    assert "[dry-run]" in capsys.readouterr().out


def test_main_apply_preset(tmp_path: Path, small_party: list[RosterElement]) -> None:
    config_path = _write_setup(tmp_path, small_party, [{"name": "Raid", "player_names": ["Bob", "Carol", "Alice"]}])

    assert main(["apply", "--config", str(config_path), "--preset", "Raid", "--apply", "-v"]) == 0
    assert _roster_names(tmp_path) == ["Bob", "Carol", "Alice"]


def test_main_match_error_exit_code(
    tmp_path: Path, small_party: list[RosterElement], capsys: pytest.CaptureFixture[str]
) -> None:
    config_path = _write_setup(tmp_path, small_party)

    assert main(["plan", "--config", str(config_path), "--order", "Alice,Bob,Zed"]) == 5
    assert "Missing in party: Zed. Not in preset: Carol" in capsys.readouterr().err


def test_main_size_mismatch_exit_code(tmp_path: Path, small_party: list[RosterElement]) -> None:
    config_path = _write_setup(tmp_path, small_party)

    assert main(["plan", "--config", str(config_path), "--order", "Alice,Bob"]) == 5


def test_main_config_error_exit_code(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["show", "--config", str(tmp_path / "missing.json")]) == 3
    assert "failed reading config file" in capsys.readouterr().err


def test_main_roster_source_error_exit_code(tmp_path: Path, small_party: list[RosterElement]) -> None:
    config_path = _write_setup(tmp_path, small_party)
    (tmp_path / "roster.json").write_text("{broken", encoding="utf-8")

    assert main(["show", "--config", str(config_path)]) == 4


def test_main_preset_save_list_delete(
    tmp_path: Path, small_party: list[RosterElement], capsys: pytest.CaptureFixture[str]
) -> None:
    config_path = _write_setup(tmp_path, small_party)

    assert main(["preset", "save", "--config", str(config_path), "--name", "Raid"]) == 0
    saved = json.loads(config_path.read_text(encoding="utf-8"))
    assert saved["presets"] == [{"name": "Raid", "player_names": ["Carol", "Alice", "Bob"]}]
    assert saved["roster_path"] == "roster.json"

    assert main(["preset", "save", "--config", str(config_path), "--name", "Raid", "--order", "A,B"]) == 3
    assert main(["preset", "save", "--config", str(config_path), "--name", "Raid", "--order", "A,B", "--replace"]) == 0
    assert json.loads(config_path.read_text(encoding="utf-8"))["presets"][0]["player_names"] == ["A", "B"]

    capsys.readouterr()
    assert main(["preset", "list", "--config", str(config_path)]) == 0
    assert "Raid (2 players)" in capsys.readouterr().out

    assert main(["preset", "delete", "--config", str(config_path), "--name", "Raid"]) == 0
    assert json.loads(config_path.read_text(encoding="utf-8"))["presets"] == []
    assert main(["preset", "delete", "--config", str(config_path), "--name", "Raid"]) == 3


def test_main_non_utf8_roster_file_exit_code(tmp_path: Path, small_party: list[RosterElement]) -> None:
    config_path = _write_setup(tmp_path, small_party)
    (tmp_path / "roster.json").write_bytes(b'{"members": [{"name": "\xff", "role_abbr": "WAR", "level": 1}]}')

    assert main(["show", "--config", str(config_path)]) == 4


def test_main_preset_rename_keeps_names(tmp_path: Path, small_party: list[RosterElement]) -> None:
    config_path = _write_setup(tmp_path, small_party, [{"name": "Raid", "player_names": ["Bob", "Carol", "Alice"]}])

    assert main(["preset", "save", "--config", str(config_path), "--name", "Raid", "--rename", "Savage"]) == 0
    presets = json.loads(config_path.read_text(encoding="utf-8"))["presets"]
    assert presets == [{"name": "Savage", "player_names": ["Bob", "Carol", "Alice"]}]

    assert main(["preset", "save", "--config", str(config_path), "--name", "Raid", "--rename", "Trial"]) == 3


def test_main_preset_move_player(tmp_path: Path, small_party: list[RosterElement]) -> None:
    config_path = _write_setup(tmp_path, small_party, [{"name": "Raid", "player_names": ["Bob", "Carol", "Alice"]}])
    move = ["preset", "move", "--config", str(config_path), "--name", "Raid"]

    assert main([*move, "--player", "Alice", "--to", "1"]) == 0
    presets = json.loads(config_path.read_text(encoding="utf-8"))["presets"]
    assert presets[0]["player_names"] == ["Alice", "Bob", "Carol"]

    assert main([*move, "--player", "Alice", "--to", "4"]) == 3
    assert main([*move, "--player", "Zed", "--to", "1"]) == 3
