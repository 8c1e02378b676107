"""
Enums and Pydantic models for the interview question engine.

Defines the fixed taxonomies (role categories, personas, focus categories,
question types) and the immutable value objects returned to callers.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


QUESTIONS_PER_INTERVIEW = 5
MIN_ROLE_DESCRIPTION_LENGTH = 3
MAX_ROLE_DESCRIPTION_LENGTH = 500


class RoleCategory(str, Enum):
    """Coarse classification of a free-text job title."""

    FRONTEND = "frontend"
    BACKEND = "backend"
    FULLSTACK = "fullstack"
    MOBILE = "mobile"
    DATA = "data"
    ML = "ml"
    DEVOPS = "devops"
    SECURITY = "security"
    PRODUCT = "product"
    DESIGN = "design"
    SALES = "sales"
    MARKETING = "marketing"
    FINANCE = "finance"
    HR = "hr"
    OPERATIONS = "operations"
    CUSTOMER_SERVICE = "customerservice"
    HEALTHCARE = "healthcare"
    EDUCATION = "education"
    LEGAL = "legal"
    CONSULTING = "consulting"
    CREATIVE = "creative"
    HOSPITALITY = "hospitality"
    RETAIL = "retail"
    LEADERSHIP = "leadership"
    GENERAL = "general"


class Persona(str, Enum):
    """Interviewer style."""

    TECHNICAL = "technical"
    SKEPTIC = "skeptic"
    FRIENDLY = "friendly"
    RUSHED = "rushed"


class FocusCategory(str, Enum):
    """Optional override of the persona-derived question mix."""

    TECHNICAL = "technical"
    BEHAVIORAL = "behavioral"
    LEADERSHIP = "leadership"
    PROBLEM_SOLVING = "problem_solving"
    SOFT_SKILLS = "soft_skills"
    CULTURE_FIT = "culture_fit"
    SITUATIONAL = "situational"
    MIXED = "mixed"


class QuestionType(str, Enum):
    """Kind of question asked in one interview slot."""

    TECHNICAL = "technical"
    BEHAVIORAL = "behavioral"
    SITUATIONAL = "situational"
    LEADERSHIP = "leadership"
    PROBLEM_SOLVING = "problem_solving"
    CULTURE_FIT = "culture_fit"
    SOFT_SKILLS = "soft_skills"


class GeneratedQuestion(BaseModel):
    """
    One question in a generated interview.

    Serialized with camelCase aliases so request handlers can return the
    model directly as JSON.

    Example:
        >>> q = GeneratedQuestion(
        ...     question_number=1,
        ...     question_type=QuestionType.BEHAVIORAL,
        ...     question_text="How do you prioritize when everything seems urgent?",
        ... )
        >>> q.model_dump(by_alias=True)["questionNumber"]
        1
    """
    question_number: int = Field(
        ...,
        ge=1,
        le=QUESTIONS_PER_INTERVIEW,
        alias="questionNumber",
        description="Position of the question in the interview (1-based)",
    )
    question_type: QuestionType = Field(
        ...,
        alias="questionType",
        description="Question type that selected the bank",
    )
    question_text: str = Field(
        ...,
        min_length=1,
        alias="questionText",
        description="Final question text after persona modifiers",
    )

    model_config = {"frozen": True, "populate_by_name": True}


class QuestionTypeDisplay(BaseModel):
    """Presentation info for a question type."""

    emoji: str
    label: str

    model_config = {"frozen": True}


class PersonaDisplay(BaseModel):
    """Presentation info for an interviewer persona."""

    persona_id: str = Field(..., alias="personaId")
    emoji: str
    label: str
    description: str

    model_config = {"frozen": True, "populate_by_name": True}


class HiringSignal(BaseModel):
    """A hiring signal a persona listens for in answers."""

    name: str = Field(..., min_length=1)
    definition: str = Field(..., min_length=1)

    model_config = {"frozen": True}
