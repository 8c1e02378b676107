"""
Presentation lookups for question types and personas.

Both lookups are total: unknown keys get a fallback entry instead of an
error, so rendering code never has to handle a failure.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Final, Mapping

from .models import Persona, PersonaDisplay, QuestionType, QuestionTypeDisplay
from .personas import available_personas, resolve_persona


QUESTION_TYPE_DISPLAYS: Final[Mapping[QuestionType, QuestionTypeDisplay]] = MappingProxyType({
    QuestionType.TECHNICAL: QuestionTypeDisplay(emoji="💼", label="Role-Specific"),
    QuestionType.BEHAVIORAL: QuestionTypeDisplay(emoji="💬", label="Behavioral"),
    QuestionType.SITUATIONAL: QuestionTypeDisplay(emoji="🎯", label="Situational"),
    QuestionType.LEADERSHIP: QuestionTypeDisplay(emoji="👥", label="Leadership"),
    QuestionType.PROBLEM_SOLVING: QuestionTypeDisplay(emoji="🧩", label="Problem Solving"),
    QuestionType.CULTURE_FIT: QuestionTypeDisplay(emoji="🤝", label="Culture Fit"),
    QuestionType.SOFT_SKILLS: QuestionTypeDisplay(emoji="🗣️", label="Soft Skills"),
})

UNKNOWN_QUESTION_TYPE_DISPLAY = QuestionTypeDisplay(emoji="❓", label="General")


def get_question_type_display(question_type: QuestionType | str | None) -> QuestionTypeDisplay:
    """Emoji and label for a question type."""
    try:
        key = QuestionType(question_type)
    except ValueError:
        return UNKNOWN_QUESTION_TYPE_DISPLAY
    return QUESTION_TYPE_DISPLAYS.get(key, UNKNOWN_QUESTION_TYPE_DISPLAY)


def get_persona_display(persona: Persona | str | None) -> PersonaDisplay:
    """Emoji, label and description for a persona (technical if unknown)."""
    return resolve_persona(persona).display()


def list_persona_displays() -> list[PersonaDisplay]:
    return [get_persona_display(persona_id) for persona_id in available_personas()]
