"""
Tests for persona plugin registry and behavior.
"""

from __future__ import annotations

import random

import pytest

from interview_questions.models import Persona
from interview_questions.personas import (
    BRIEF_PREFIX,
    CHALLENGE_CLAUSES,
    available_personas,
    load_persona,
    resolve_persona,
)


def test_available_personas_in_registry_order() -> None:
    assert available_personas() == ("technical", "skeptic", "friendly", "rushed")


def test_every_persona_enum_is_registered() -> None:
    for persona in Persona:
        assert load_persona(persona).persona_id == persona.value


def test_load_persona_normalizes_case_and_whitespace() -> None:
    assert load_persona("  Skeptic ").persona_id == "skeptic"


def test_load_unknown_persona_fails_fast() -> None:
    with pytest.raises(ValueError, match="Unknown persona"):
        load_persona("does-not-exist")


def test_load_empty_persona_fails_fast() -> None:
    with pytest.raises(ValueError, match="empty"):
        load_persona("   ")


@pytest.mark.parametrize("persona", ["does-not-exist", "", None])
def test_resolve_persona_falls_back_to_technical(persona: str | None) -> None:
    assert resolve_persona(persona).persona_id == "technical"


def test_each_persona_has_five_signals() -> None:
    for persona_id in available_personas():
        signals = load_persona(persona_id).signals
        assert len(signals) == 5
        assert all(signal.name and signal.definition for signal in signals)


def test_rushed_persona_prefixes_question() -> None:
    rushed = load_persona("rushed")

    assert rushed.modify_question("What is a closure?", random.Random(0)) == (
        BRIEF_PREFIX + "What is a closure?"
    )


def test_skeptic_persona_appends_challenge() -> None:
    skeptic = load_persona("skeptic")
    modified = skeptic.modify_question("How do you cache data?", random.Random(0))

    assert modified.startswith("How do you cache data?")
    assert modified[len("How do you cache data?"):] in CHALLENGE_CLAUSES


def test_skeptic_challenge_follows_rng() -> None:
    skeptic = load_persona("skeptic")
    seen = {
        skeptic.modify_question("Q?", random.Random(seed))[len("Q?"):]
        for seed in range(200)
    }

    assert seen == set(CHALLENGE_CLAUSES)


@pytest.mark.parametrize("persona_id", ["technical", "friendly"])
def test_pass_through_personas_leave_question_unchanged(persona_id: str) -> None:
    plugin = load_persona(persona_id)

    assert plugin.modify_question("Walk me through a deploy.", random.Random(0)) == (
        "Walk me through a deploy."
    )
