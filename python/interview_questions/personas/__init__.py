"""
Interviewer persona plugins.
"""

from interview_questions.personas.base import BasePersonaPlugin, PersonaPlugin
from interview_questions.personas.registry import (
    available_personas,
    load_persona,
    resolve_persona,
)
from interview_questions.personas.rushed import BRIEF_PREFIX
from interview_questions.personas.skeptic import CHALLENGE_CLAUSES

__all__ = [
    "BasePersonaPlugin",
    "PersonaPlugin",
    "BRIEF_PREFIX",
    "CHALLENGE_CLAUSES",
    "available_personas",
    "load_persona",
    "resolve_persona",
]
