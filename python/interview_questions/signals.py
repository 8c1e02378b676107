"""Hiring signals each persona listens for."""

from __future__ import annotations

from .models import HiringSignal, Persona
from .personas import resolve_persona


def get_signals_for_persona(persona: Persona | str | None) -> tuple[HiringSignal, ...]:
    """Return the persona's hiring signals, or the technical persona's if unknown."""
    return resolve_persona(persona).signals
