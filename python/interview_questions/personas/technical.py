"""
Technical expert persona.
"""

from __future__ import annotations

from interview_questions.models import HiringSignal, QuestionType
from interview_questions.personas.base import BasePersonaPlugin


class TechnicalPersonaPlugin(BasePersonaPlugin):
    """Deep role-specific questions, asked as written."""

    persona_id = "technical"
    label = "Technical Expert"
    emoji = "💻"
    description = "Deep role-specific questions, expects specific details and trade-offs"
    question_mix = (
        QuestionType.TECHNICAL,
        QuestionType.TECHNICAL,
        QuestionType.SITUATIONAL,
        QuestionType.PROBLEM_SOLVING,
        QuestionType.LEADERSHIP,
    )
    signals = (
        HiringSignal(
            name="Problem Framing",
            definition="Ability to break down complex problems into clear components",
        ),
        HiringSignal(
            name="Technical Depth",
            definition="Understanding of technical concepts and ability to explain them clearly",
        ),
        HiringSignal(
            name="Trade-off Discussion",
            definition="Awareness of pros/cons and ability to justify technical decisions",
        ),
        HiringSignal(
            name="Code Quality Awareness",
            definition="Consideration for maintainability, testing, and best practices",
        ),
        HiringSignal(
            name="Communication Clarity",
            definition="Ability to explain technical concepts to different audiences",
        ),
    )
