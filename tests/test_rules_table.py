from __future__ import annotations

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
APP_DIR = ROOT / "src" / "app"
sys.path.insert(0, str(APP_DIR))

from protocol import MoveSet, build_table  # type: ignore[import-not-found]  # noqa: E402
from rules_table import format_help, format_menu  # type: ignore[import-not-found]  # noqa: E402


def _cells(rendered: str) -> list[list[str]]:
    return [
        [cell.strip() for cell in line.strip("|").split("|")]
        for line in rendered.splitlines()
        if line.startswith("|")
    ]


def test_help_table_layout() -> None:
    rows = _cells(format_help(build_table(MoveSet.from_args(["rock", "paper", "scissors"]))))
    assert rows == [
        ["Moves", "rock", "paper", "scissors"],
        ["rock", "Draw", "Lose", "Win"],
        ["paper", "Win", "Draw", "Lose"],
        ["scissors", "Lose", "Win", "Draw"],
    ]


def test_numeric_looking_moves_are_shown_verbatim() -> None:
    moves = ["007", "1e3", "nan"]
    rows = _cells(format_help(build_table(MoveSet.from_args(moves))))
    assert rows[0] == ["Moves", *moves]
    assert [row[0] for row in rows[1:]] == moves


def test_menu_numbers_moves_from_one() -> None:
    assert format_menu(MoveSet.from_args(["007", "-x", "b"])).splitlines() == [
        "Available moves:",
        "1 - 007",
        "2 - -x",
        "3 - b",
        "0 - exit",
        "? - help",
    ]
