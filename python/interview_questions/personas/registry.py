"""
Persona plugin registry.
"""

from __future__ import annotations

import logging

from interview_questions.models import Persona
from interview_questions.personas.base import PersonaPlugin
from interview_questions.personas.friendly import FriendlyPersonaPlugin
from interview_questions.personas.rushed import RushedPersonaPlugin
from interview_questions.personas.skeptic import SkepticPersonaPlugin
from interview_questions.personas.technical import TechnicalPersonaPlugin


logger = logging.getLogger(__name__)

DEFAULT_PERSONA_ID = Persona.TECHNICAL.value


def _build_registry() -> dict[str, PersonaPlugin]:
    plugins: tuple[PersonaPlugin, ...] = (
        TechnicalPersonaPlugin(),
        SkepticPersonaPlugin(),
        FriendlyPersonaPlugin(),
        RushedPersonaPlugin(),
    )
    return {plugin.persona_id: plugin for plugin in plugins}


_REGISTRY = _build_registry()


def _normalize(persona: Persona | str | None) -> str:
    if isinstance(persona, Persona):
        return persona.value
    return (persona or "").strip().lower()


def available_personas() -> tuple[str, ...]:
    """Return all persona IDs in registry order."""
    return tuple(_REGISTRY.keys())


def load_persona(persona: Persona | str) -> PersonaPlugin:
    """Load a persona plugin by ID."""
    normalized = _normalize(persona)
    if not normalized:
        raise ValueError("Persona id is empty.")

    plugin = _REGISTRY.get(normalized)
    if plugin is None:
        supported = ", ".join(available_personas())
        raise ValueError(
            f"Unknown persona '{persona}'. Supported personas: {supported}."
        )
    return plugin


def resolve_persona(persona: Persona | str | None) -> PersonaPlugin:
    """Load a persona plugin, falling back to the technical persona."""
    try:
        return load_persona(persona or "")
    except ValueError as exc:
        logger.warning(f"{exc} Falling back to '{DEFAULT_PERSONA_ID}'.")
        return _REGISTRY[DEFAULT_PERSONA_ID]
