"""
Interview Question Engine Package.

Rule-based interview question generation for mock interviews.

Components:
    - RoleClassifier: Maps free-text role descriptions to a RoleCategory
    - QuestionGenerator: Builds five typed questions from banks, mixes and personas
    - QuestionBanks: Static technical/situational/shared question pools
    - Personas: Interviewer persona plugins (mix, signals, text modifier)
    - Display helpers: Emoji/label lookups for question types and personas
    - Role catalog: Example titles for autocomplete
    - Models: Enums and Pydantic models for generated questions

Example:
    >>> import random
    >>> from interview_questions import QuestionGenerator
    >>>
    >>> generator = QuestionGenerator(rng=random.Random(42))
    >>> questions = generator.generate("Senior React Engineer", "technical")
    >>> [q.question_type.value for q in questions]
    ['technical', 'technical', 'situational', 'problem_solving', 'leadership']
"""

from .models import (
    MAX_ROLE_DESCRIPTION_LENGTH,
    MIN_ROLE_DESCRIPTION_LENGTH,
    QUESTIONS_PER_INTERVIEW,
    FocusCategory,
    GeneratedQuestion,
    HiringSignal,
    Persona,
    PersonaDisplay,
    QuestionType,
    QuestionTypeDisplay,
    RoleCategory,
)

from .role_classifier import (
    FALLBACK_CATEGORY,
    ROLE_RULES,
    ClassifierRule,
    RoleClassifier,
    classify_role,
)

from .banks import (
    DEFAULT_BANKS,
    FALLBACK_QUESTION,
    QuestionBanks,
)

from .personas import (
    BRIEF_PREFIX,
    CHALLENGE_CLAUSES,
    available_personas,
    load_persona,
    resolve_persona,
)

from .question_generator import (
    FOCUS_CATEGORY_MIX,
    QuestionGenerator,
    generate_interview_questions,
)

from .display import (
    get_persona_display,
    get_question_type_display,
    list_persona_displays,
)

from .signals import get_signals_for_persona

from .role_catalog import COMMON_ROLES, suggest_roles


__all__ = [
    # Models
    "FocusCategory",
    "GeneratedQuestion",
    "HiringSignal",
    "Persona",
    "PersonaDisplay",
    "QuestionType",
    "QuestionTypeDisplay",
    "RoleCategory",
    "QUESTIONS_PER_INTERVIEW",
    "MIN_ROLE_DESCRIPTION_LENGTH",
    "MAX_ROLE_DESCRIPTION_LENGTH",
    # Classification
    "ClassifierRule",
    "RoleClassifier",
    "ROLE_RULES",
    "FALLBACK_CATEGORY",
    "classify_role",
    # Banks
    "QuestionBanks",
    "DEFAULT_BANKS",
    "FALLBACK_QUESTION",
    # Personas
    "BRIEF_PREFIX",
    "CHALLENGE_CLAUSES",
    "available_personas",
    "load_persona",
    "resolve_persona",
    # Generation
    "FOCUS_CATEGORY_MIX",
    "QuestionGenerator",
    "generate_interview_questions",
    # Display
    "get_persona_display",
    "get_question_type_display",
    "list_persona_displays",
    "get_signals_for_persona",
    # Role catalog
    "COMMON_ROLES",
    "suggest_roles",
]

__version__ = "0.1.0"
