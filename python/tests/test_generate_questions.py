"""
Tests for the question generator command-line interface.
"""

from __future__ import annotations

import json

import pytest

from generate_questions import EXIT_INVALID_INPUT, EXIT_SUCCESS, cli, main


def test_cli_prints_json_questions(capsys: pytest.CaptureFixture[str]) -> None:
    exit_code = cli(["Senior React Engineer", "--seed", "3"])

    assert exit_code == EXIT_SUCCESS
    questions = json.loads(capsys.readouterr().out)
    assert [q["questionNumber"] for q in questions] == [1, 2, 3, 4, 5]
    assert questions[0]["questionType"] == "technical"


def test_cli_seed_is_reproducible(capsys: pytest.CaptureFixture[str]) -> None:
    cli(["Data Scientist", "--persona", "skeptic", "--seed", "11"])
    first = capsys.readouterr().out
    cli(["Data Scientist", "--persona", "skeptic", "--seed", "11"])
    second = capsys.readouterr().out

    assert first == second


def test_cli_focus_and_persona(capsys: pytest.CaptureFixture[str]) -> None:
    cli(["Sales Manager", "--persona", "rushed", "--focus", "leadership", "--seed", "7"])
    questions = json.loads(capsys.readouterr().out)

    assert [q["questionType"] for q in questions] == [
        "leadership",
        "leadership",
        "behavioral",
        "leadership",
        "situational",
    ]
    assert all(q["questionText"].startswith("Keep it brief: ") for q in questions)


def test_cli_classify_only(capsys: pytest.CaptureFixture[str]) -> None:
    exit_code = cli(["Registered Nurse", "--classify-only"])

    assert exit_code == EXIT_SUCCESS
    assert json.loads(capsys.readouterr().out) == {
        "roleDescription": "Registered Nurse",
        "roleCategory": "healthcare",
    }


def test_cli_pretty_output(capsys: pytest.CaptureFixture[str]) -> None:
    cli(["Senior React Engineer", "--pretty", "--seed", "1"])
    lines = capsys.readouterr().out.strip().splitlines()

    assert len(lines) == 5
    assert lines[0].startswith("1. 💼 [Role-Specific] ")
    assert lines[4].startswith("5. 👥 [Leadership] ")


def test_cli_rejects_unknown_persona() -> None:
    with pytest.raises(SystemExit):
        cli(["Senior React Engineer", "--persona", "pirate"])


def test_main_rejects_blank_role(capsys: pytest.CaptureFixture[str]) -> None:
    assert main("   ") == EXIT_INVALID_INPUT
    assert capsys.readouterr().out == ""
