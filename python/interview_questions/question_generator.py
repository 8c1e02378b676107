"""
Interview question generator.

Builds a five-question interview for a role description and persona:

1. Classify the role into a RoleCategory.
2. Pick the type mix: the focus category's mix when one is given,
   otherwise the persona's own mix.
3. For each slot, shuffle the matching bank and take the first question
   not already used in this interview (repeats only once a pool is
   exhausted).
4. Rephrase the question through the persona modifier.

Randomness comes from an injected ``random.Random`` so callers can pin
the output with a seed.
"""

from __future__ import annotations

import logging
import random
from types import MappingProxyType
from typing import Final, Mapping, Optional

from .banks import DEFAULT_BANKS, FALLBACK_QUESTION, QuestionBanks
from .models import (
    QUESTIONS_PER_INTERVIEW,
    FocusCategory,
    GeneratedQuestion,
    Persona,
    QuestionType,
    RoleCategory,
)
from .personas import resolve_persona
from .personas.base import PersonaPlugin
from .role_classifier import RoleClassifier


logger = logging.getLogger(__name__)


_T = QuestionType.TECHNICAL
_B = QuestionType.BEHAVIORAL
_SIT = QuestionType.SITUATIONAL
_L = QuestionType.LEADERSHIP
_PS = QuestionType.PROBLEM_SOLVING
_CF = QuestionType.CULTURE_FIT
_SS = QuestionType.SOFT_SKILLS

FOCUS_CATEGORY_MIX: Final[Mapping[FocusCategory, tuple[QuestionType, ...]]] = MappingProxyType({
    # Role-specific depth
    FocusCategory.TECHNICAL: (_T, _T, _T, _PS, _SIT),
    # Past experience, STAR format
    FocusCategory.BEHAVIORAL: (_B, _B, _B, _B, _SIT),
    FocusCategory.LEADERSHIP: (_L, _L, _B, _L, _SIT),
    FocusCategory.PROBLEM_SOLVING: (_PS, _PS, _T, _PS, _SIT),
    # Communication and collaboration
    FocusCategory.SOFT_SKILLS: (_SS, _SS, _SS, _B, _CF),
    FocusCategory.CULTURE_FIT: (_CF, _CF, _B, _CF, _B),
    # Hypothetical scenarios
    FocusCategory.SITUATIONAL: (_SIT, _SIT, _B, _SIT, _PS),
    FocusCategory.MIXED: (_T, _B, _L, _PS, _CF),
})


def _coerce_focus(
    focus_category: FocusCategory | str | None,
) -> Optional[FocusCategory]:
    if isinstance(focus_category, FocusCategory):
        return focus_category
    if not focus_category:
        return None
    try:
        return FocusCategory(focus_category.strip().lower())
    except ValueError:
        logger.warning(
            f"Unknown focus category '{focus_category}'. Using persona question mix."
        )
        return None


class QuestionGenerator:
    """
    Generates interview question sets from static banks.

    Instances hold no per-call state and can be shared between callers.

    Example:
        >>> generator = QuestionGenerator(rng=random.Random(7))
        >>> questions = generator.generate("Senior React Engineer", "technical")
        >>> [q.question_number for q in questions]
        [1, 2, 3, 4, 5]
    """

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        banks: QuestionBanks = DEFAULT_BANKS,
        classifier: Optional[RoleClassifier] = None,
    ) -> None:
        self._rng = rng or random.Random()
        self._banks = banks
        self._classifier = classifier or RoleClassifier()

    @property
    def classifier(self) -> RoleClassifier:
        return self._classifier

    def resolve_mix(
        self,
        persona: Persona | str | None,
        focus_category: FocusCategory | str | None = None,
    ) -> tuple[QuestionType, ...]:
        """Return the ordered question types for the five slots."""
        focus = _coerce_focus(focus_category)
        if focus is not None:
            return FOCUS_CATEGORY_MIX[focus]
        return resolve_persona(persona).question_mix

    def generate(
        self,
        role_description: str,
        persona: Persona | str | None,
        focus_category: FocusCategory | str | None = None,
    ) -> list[GeneratedQuestion]:
        """Generate exactly five numbered questions."""
        category = self._classifier.classify(role_description)
        plugin = resolve_persona(persona)
        focus = _coerce_focus(focus_category)
        mix = FOCUS_CATEGORY_MIX[focus] if focus is not None else plugin.question_mix

        logger.debug(
            f"Role '{role_description}' -> category '{category.value}', "
            f"persona '{plugin.persona_id}', focus '{focus.value if focus else 'default'}', "
            f"mix {[t.value for t in mix]}"
        )

        questions: list[GeneratedQuestion] = []
        used: set[str] = set()

        for index, question_type in enumerate(mix[:QUESTIONS_PER_INTERVIEW]):
            selected = self._select(question_type, category, used)
            used.add(selected)
            questions.append(
                GeneratedQuestion(
                    question_number=index + 1,
                    question_type=question_type,
                    question_text=self._apply_persona(plugin, selected),
                )
            )

        return questions

    def _select(
        self,
        question_type: QuestionType,
        category: RoleCategory,
        used: set[str],
    ) -> str:
        pool = list(self._banks.pool_for(question_type, category))
        if not pool:
            return FALLBACK_QUESTION

        self._rng.shuffle(pool)
        for candidate in pool:
            if candidate not in used:
                return candidate

        logger.debug(
            f"Pool for {question_type.value}/{category.value} exhausted; repeating a question"
        )
        return pool[0]

    def _apply_persona(self, plugin: PersonaPlugin, question: str) -> str:
        return plugin.modify_question(question, self._rng)


_DEFAULT_GENERATOR = QuestionGenerator()


def generate_interview_questions(
    role_description: str,
    persona: Persona | str | None,
    focus_category: FocusCategory | str | None = None,
    *,
    rng: Optional[random.Random] = None,
) -> list[GeneratedQuestion]:
    """Generate five questions with the shared generator, or a seeded one if ``rng`` is given."""
    generator = _DEFAULT_GENERATOR if rng is None else QuestionGenerator(rng=rng)
    return generator.generate(role_description, persona, focus_category)
