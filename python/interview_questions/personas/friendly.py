"""
Friendly coach persona.
"""

from __future__ import annotations

from interview_questions.models import HiringSignal, QuestionType
from interview_questions.personas.base import BasePersonaPlugin


class FriendlyPersonaPlugin(BasePersonaPlugin):
    """Conversational interviewer weighted toward culture fit."""

    persona_id = "friendly"
    label = "Friendly Coach"
    emoji = "😊"
    description = "Conversational, focuses on culture fit and collaboration"
    question_mix = (
        QuestionType.BEHAVIORAL,
        QuestionType.CULTURE_FIT,
        QuestionType.BEHAVIORAL,
        QuestionType.LEADERSHIP,
        QuestionType.CULTURE_FIT,
    )
    signals = (
        HiringSignal(
            name="Storytelling",
            definition="Ability to share experiences in a structured and engaging way",
        ),
        HiringSignal(
            name="Collaboration Examples",
            definition="Demonstrating teamwork and interpersonal skills",
        ),
        HiringSignal(
            name="Self-Awareness",
            definition="Honest reflection on strengths, weaknesses, and growth areas",
        ),
        HiringSignal(
            name="Cultural Fit",
            definition="Values alignment and enthusiasm for the role and company",
        ),
        HiringSignal(
            name="Curiosity",
            definition="Asking thoughtful questions and showing genuine interest",
        ),
    )
