from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
APP_DIR = ROOT / "src" / "app"
sys.path.insert(0, str(APP_DIR))

import cli  # type: ignore[import-not-found]  # noqa: E402
from commit_reveal import generate_tag  # type: ignore[import-not-found]  # noqa: E402


@pytest.mark.parametrize("argv", [["a", "a", "b"], ["a", "b"], []])
def test_main_rejects_bad_move_sets(argv: list[str], capsys, monkeypatch) -> None:
    def fail(prompt: str) -> str:
        raise AssertionError("session must not start")

    monkeypatch.setattr("builtins.input", fail)

    assert cli.main(argv) == 1
    err = capsys.readouterr().err
    assert "odd number" in err
    assert "unique" in err
    assert "Example:" in err


def test_main_plays_then_exits(capsys, monkeypatch) -> None:
    lines = iter(["2", "?", "0"])
    monkeypatch.setattr("builtins.input", lambda prompt: next(lines))

    assert cli.main(["rock", "paper", "scissors"]) == 0
    out = capsys.readouterr().out
    assert "Your move: paper" in out
    assert "HMAC key: " in out
    assert "| Moves" in out
    assert out.rstrip().endswith("Exiting the game.")


def test_main_handles_keyboard_interrupt(capsys, monkeypatch) -> None:
    def interrupt(prompt: str) -> str:
        raise KeyboardInterrupt

    monkeypatch.setattr("builtins.input", interrupt)

    assert cli.main(["rock", "paper", "scissors"]) == 130
    assert "Goodbye" in capsys.readouterr().out


def test_verify_main(capsys) -> None:
    key = "00" * 32
    tag = generate_tag(key, "spock")

    assert cli.verify_main([key, "spock", tag]) == 0
    assert capsys.readouterr().out.strip() == "OK"

    assert cli.verify_main([key, "lizard", tag]) == 1
    assert capsys.readouterr().out.strip() == "MISMATCH"


def test_main_counts_double_dash_as_a_move(capsys) -> None:
    assert cli.main(["a", "--", "b", "c"]) == 1
    assert "odd number" in capsys.readouterr().err


def test_main_accepts_move_names_starting_with_dash(capsys, monkeypatch) -> None:
    lines = iter(["2", "0"])
    monkeypatch.setattr("builtins.input", lambda prompt: next(lines))

    assert cli.main(["rock", "-paper", "scissors"]) == 0
    out = capsys.readouterr().out
    assert "2 - -paper" in out
    assert "Your move: -paper" in out
