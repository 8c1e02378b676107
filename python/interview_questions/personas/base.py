"""
Persona plugin interface and shared base class.
"""

from __future__ import annotations

import random
from typing import ClassVar, Protocol

from interview_questions.models import HiringSignal, PersonaDisplay, QuestionType


class PersonaPlugin(Protocol):
    """Interface every interviewer persona implements."""

    persona_id: str
    label: str
    emoji: str
    description: str
    question_mix: tuple[QuestionType, ...]
    signals: tuple[HiringSignal, ...]

    def modify_question(self, question: str, rng: random.Random) -> str:
        """Rephrase a selected bank question in this persona's voice."""

    def display(self) -> PersonaDisplay:
        """Presentation info for this persona."""


class BasePersonaPlugin:
    """Defaults shared by the built-in personas. Questions pass through unchanged."""

    persona_id: ClassVar[str]
    label: ClassVar[str]
    emoji: ClassVar[str]
    description: ClassVar[str]
    question_mix: ClassVar[tuple[QuestionType, ...]]
    signals: ClassVar[tuple[HiringSignal, ...]]

    def modify_question(self, question: str, rng: random.Random) -> str:
        return question

    def display(self) -> PersonaDisplay:
        return PersonaDisplay(
            persona_id=self.persona_id,
            emoji=self.emoji,
            label=self.label,
            description=self.description,
        )
