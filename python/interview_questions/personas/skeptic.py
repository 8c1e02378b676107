"""
Skeptic persona.
"""

from __future__ import annotations

import random

from interview_questions.models import HiringSignal, QuestionType
from interview_questions.personas.base import BasePersonaPlugin


CHALLENGE_CLAUSES: tuple[str, ...] = (
    " And what could go wrong with that approach?",
    " How would you handle the edge cases?",
    " What's the main weakness of that approach?",
    " Why should I believe that would work?",
)


class SkepticPersonaPlugin(BasePersonaPlugin):
    """Pushes back on every question with a challenge clause."""

    persona_id = "skeptic"
    label = "The Skeptic"
    emoji = "🤨"
    description = "Challenges your answers, tests composure under pressure"
    question_mix = (
        QuestionType.TECHNICAL,
        QuestionType.BEHAVIORAL,
        QuestionType.PROBLEM_SOLVING,
        QuestionType.BEHAVIORAL,
        QuestionType.SITUATIONAL,
    )
    signals = (
        HiringSignal(
            name="Defensiveness Under Pressure",
            definition="Ability to remain composed when challenged or questioned",
        ),
        HiringSignal(
            name="Evidence-Based Reasoning",
            definition="Supporting claims with data, examples, or concrete reasoning",
        ),
        HiringSignal(
            name="Receptiveness to Feedback",
            definition="Openness to alternative viewpoints and constructive criticism",
        ),
        HiringSignal(
            name="Problem Ownership",
            definition="Taking responsibility for challenges and demonstrating learning",
        ),
        HiringSignal(
            name="Confidence Without Arrogance",
            definition="Asserting expertise while remaining humble and curious",
        ),
    )

    def modify_question(self, question: str, rng: random.Random) -> str:
        return question + rng.choice(CHALLENGE_CLAUSES)
