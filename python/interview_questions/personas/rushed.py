"""
Rushed manager persona.
"""

from __future__ import annotations

import random

from interview_questions.models import HiringSignal, QuestionType
from interview_questions.personas.base import BasePersonaPlugin


BRIEF_PREFIX = "Keep it brief: "


class RushedPersonaPlugin(BasePersonaPlugin):
    """Short on time; every question asks for a concise answer."""

    persona_id = "rushed"
    label = "Rushed Manager"
    emoji = "⏱️"
    description = "Fast-paced, tests your ability to be concise"
    question_mix = (
        QuestionType.TECHNICAL,
        QuestionType.BEHAVIORAL,
        QuestionType.PROBLEM_SOLVING,
        QuestionType.LEADERSHIP,
        QuestionType.CULTURE_FIT,
    )
    signals = (
        HiringSignal(
            name="Conciseness",
            definition="Ability to communicate key points quickly without rambling",
        ),
        HiringSignal(
            name="Prioritization",
            definition="Focus on the most important information first",
        ),
        HiringSignal(
            name="Composure Under Time Pressure",
            definition="Remaining calm and organized when rushed",
        ),
        HiringSignal(
            name="Impact Focus",
            definition="Emphasizing results and outcomes over process details",
        ),
        HiringSignal(
            name="Adaptability",
            definition="Adjusting communication style to match interviewer's pace",
        ),
    )

    def modify_question(self, question: str, rng: random.Random) -> str:
        return BRIEF_PREFIX + question
