"""
Tests for question generation: counts, type mixes, de-duplication,
persona modifiers and seeded determinism.
"""

from __future__ import annotations

import random

import pytest

from interview_questions.banks import (
    BEHAVIORAL_QUESTIONS,
    CULTURE_FIT_QUESTIONS,
    DEFAULT_BANKS,
    FALLBACK_QUESTION,
    LEADERSHIP_QUESTIONS,
    PROBLEM_SOLVING_QUESTIONS,
    SITUATIONAL_QUESTIONS,
    TECHNICAL_QUESTIONS,
    QuestionBanks,
)
from interview_questions.models import (
    QUESTIONS_PER_INTERVIEW,
    FocusCategory,
    Persona,
    QuestionType,
    RoleCategory,
)
from interview_questions.personas import (
    BRIEF_PREFIX,
    CHALLENGE_CLAUSES,
    available_personas,
    load_persona,
)
from interview_questions.question_generator import (
    FOCUS_CATEGORY_MIX,
    QuestionGenerator,
    generate_interview_questions,
)


ALL_PERSONAS = [persona.value for persona in Persona]
ALL_FOCUSES = list(FocusCategory)

# One representative role per category
ROLE_BY_CATEGORY = {
    RoleCategory.FRONTEND: "Senior React Engineer",
    RoleCategory.BACKEND: "Backend Developer",
    RoleCategory.FULLSTACK: "Full Stack Developer",
    RoleCategory.MOBILE: "Senior iOS Engineer",
    RoleCategory.DATA: "Data Scientist",
    RoleCategory.ML: "Machine Learning Engineer",
    RoleCategory.DEVOPS: "DevOps Engineer",
    RoleCategory.SECURITY: "Cloud Security Engineer",
    RoleCategory.PRODUCT: "Product Manager",
    RoleCategory.DESIGN: "UX Designer",
    RoleCategory.SALES: "Sales Manager",
    RoleCategory.MARKETING: "Marketing Specialist",
    RoleCategory.FINANCE: "Financial Analyst",
    RoleCategory.HR: "HR Business Partner",
    RoleCategory.OPERATIONS: "Supply Chain Analyst",
    RoleCategory.CUSTOMER_SERVICE: "Customer Support Specialist",
    RoleCategory.HEALTHCARE: "Registered Nurse",
    RoleCategory.EDUCATION: "High School Teacher",
    RoleCategory.LEGAL: "Corporate Attorney",
    RoleCategory.CONSULTING: "Management Consultant",
    RoleCategory.CREATIVE: "Graphic Designer",
    RoleCategory.HOSPITALITY: "Hotel Front Desk Agent",
    RoleCategory.RETAIL: "Retail Associate",
    RoleCategory.LEADERSHIP: "Engineering Manager",
    RoleCategory.GENERAL: "Software Engineer",
}


def _strip_challenge(text: str) -> str:
    for clause in CHALLENGE_CLAUSES:
        if text.endswith(clause):
            return text[: -len(clause)]
    raise AssertionError(f"No challenge clause on: {text}")


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def generator() -> QuestionGenerator:
    return QuestionGenerator(rng=random.Random(1234))


# =============================================================================
# Shape
# =============================================================================


def test_role_table_covers_every_category(generator: QuestionGenerator) -> None:
    assert set(ROLE_BY_CATEGORY) == set(RoleCategory)
    for category, role in ROLE_BY_CATEGORY.items():
        assert generator.classifier.classify(role) == category, role


@pytest.mark.parametrize("persona", ALL_PERSONAS)
def test_generates_five_numbered_questions(generator: QuestionGenerator, persona: str) -> None:
    questions = generator.generate("Senior React Engineer", persona)

    assert len(questions) == QUESTIONS_PER_INTERVIEW
    assert [q.question_number for q in questions] == [1, 2, 3, 4, 5]
    assert all(q.question_text for q in questions)


@pytest.mark.parametrize("persona", ALL_PERSONAS)
def test_persona_mix_without_focus(generator: QuestionGenerator, persona: str) -> None:
    questions = generator.generate("Data Scientist", persona)

    assert tuple(q.question_type for q in questions) == load_persona(persona).question_mix


@pytest.mark.parametrize("focus", ALL_FOCUSES)
@pytest.mark.parametrize("persona", ALL_PERSONAS)
def test_focus_mix_overrides_persona(
    generator: QuestionGenerator, persona: str, focus: FocusCategory
) -> None:
    questions = generator.generate("Financial Analyst", persona, focus)

    assert tuple(q.question_type for q in questions) == FOCUS_CATEGORY_MIX[focus]


def test_focus_accepts_string_values(generator: QuestionGenerator) -> None:
    questions = generator.generate("Financial Analyst", "technical", "Soft_Skills")

    assert tuple(q.question_type for q in questions) == FOCUS_CATEGORY_MIX[FocusCategory.SOFT_SKILLS]


def test_every_focus_mix_has_five_slots() -> None:
    assert set(FOCUS_CATEGORY_MIX) == set(FocusCategory)
    for mix in FOCUS_CATEGORY_MIX.values():
        assert len(mix) == QUESTIONS_PER_INTERVIEW


def test_persona_mixes() -> None:
    T, B, SIT = QuestionType.TECHNICAL, QuestionType.BEHAVIORAL, QuestionType.SITUATIONAL
    L, PS, CF = QuestionType.LEADERSHIP, QuestionType.PROBLEM_SOLVING, QuestionType.CULTURE_FIT

    assert load_persona("technical").question_mix == (T, T, SIT, PS, L)
    assert load_persona("skeptic").question_mix == (T, B, PS, B, SIT)
    assert load_persona("friendly").question_mix == (B, CF, B, L, CF)
    assert load_persona("rushed").question_mix == (T, B, PS, L, CF)


# =============================================================================
# Fallbacks
# =============================================================================


def test_unknown_persona_uses_technical_mix(generator: QuestionGenerator) -> None:
    questions = generator.generate("Senior React Engineer", "pirate")

    assert tuple(q.question_type for q in questions) == load_persona("technical").question_mix


def test_unknown_focus_uses_persona_mix(generator: QuestionGenerator) -> None:
    questions = generator.generate("Senior React Engineer", "friendly", "astrology")

    assert tuple(q.question_type for q in questions) == load_persona("friendly").question_mix


@pytest.mark.parametrize("focus", [None, ""])
def test_missing_focus_uses_persona_mix(generator: QuestionGenerator, focus: str | None) -> None:
    mix = generator.resolve_mix("rushed", focus)

    assert mix == load_persona("rushed").question_mix


def test_unclassifiable_role_uses_general_banks(generator: QuestionGenerator) -> None:
    questions = generator.generate("zzz-nonsense-title", "technical")

    assert questions[0].question_text in TECHNICAL_QUESTIONS[RoleCategory.GENERAL]
    assert questions[2].question_text in SITUATIONAL_QUESTIONS[RoleCategory.GENERAL]


# =============================================================================
# Uniqueness
# =============================================================================


@pytest.mark.parametrize("category", list(RoleCategory))
def test_questions_are_unique_for_every_category_and_focus(category: RoleCategory) -> None:
    role = ROLE_BY_CATEGORY[category]
    for seed in range(5):
        generator = QuestionGenerator(rng=random.Random(seed))
        for persona in ALL_PERSONAS:
            for focus in [None, *ALL_FOCUSES]:
                texts = [q.question_text for q in generator.generate(role, persona, focus)]
                assert len(set(texts)) == QUESTIONS_PER_INTERVIEW, (role, persona, focus, texts)


def test_default_pools_cover_largest_demand() -> None:
    """Every pool holds at least as many questions as any mix asks for."""
    mixes = [*FOCUS_CATEGORY_MIX.values()] + [
        load_persona(persona_id).question_mix for persona_id in available_personas()
    ]
    for category in RoleCategory:
        for question_type in QuestionType:
            demand = max(mix.count(question_type) for mix in mixes)
            pool = DEFAULT_BANKS.pool_for(question_type, category)
            assert len(set(pool)) >= demand, (category, question_type)


def test_exhausted_pool_repeats_instead_of_failing() -> None:
    banks = QuestionBanks(
        technical={RoleCategory.GENERAL: ("Only technical question?",)},
        situational={RoleCategory.GENERAL: ("Only situational question?",)},
        shared={QuestionType.BEHAVIORAL: ("Only behavioral question?",)},
    )
    generator = QuestionGenerator(rng=random.Random(0), banks=banks)

    questions = generator.generate("Data Scientist", "technical", FocusCategory.BEHAVIORAL)

    assert [q.question_text for q in questions] == [
        "Only behavioral question?",
        "Only behavioral question?",
        "Only behavioral question?",
        "Only behavioral question?",
        "Only situational question?",
    ]


def test_missing_shared_type_falls_back_to_behavioral_pool() -> None:
    banks = QuestionBanks(
        technical={RoleCategory.GENERAL: ("T1?", "T2?", "T3?")},
        situational={RoleCategory.GENERAL: ("S1?",)},
        shared={QuestionType.BEHAVIORAL: ("B1?", "B2?", "B3?", "B4?", "B5?")},
    )
    generator = QuestionGenerator(rng=random.Random(0), banks=banks)

    questions = generator.generate("Retail Associate", "friendly")

    assert all(q.question_text.startswith("B") for q in questions)
    assert len({q.question_text for q in questions}) == QUESTIONS_PER_INTERVIEW


def test_empty_banks_yield_fallback_question() -> None:
    generator = QuestionGenerator(
        rng=random.Random(0),
        banks=QuestionBanks(technical={}, situational={}, shared={}),
    )

    questions = generator.generate("Senior React Engineer", "technical")

    assert len(questions) == QUESTIONS_PER_INTERVIEW
    assert all(q.question_text == FALLBACK_QUESTION for q in questions)


# =============================================================================
# Persona modifiers
# =============================================================================


def test_technical_and_friendly_leave_text_unchanged(generator: QuestionGenerator) -> None:
    technical = generator.generate("Senior React Engineer", "technical")
    assert technical[0].question_text in TECHNICAL_QUESTIONS[RoleCategory.FRONTEND]
    assert technical[4].question_text in LEADERSHIP_QUESTIONS

    friendly = generator.generate("Senior React Engineer", "friendly")
    assert friendly[0].question_text in BEHAVIORAL_QUESTIONS
    assert friendly[1].question_text in CULTURE_FIT_QUESTIONS


def test_rushed_prefixes_every_question(generator: QuestionGenerator) -> None:
    questions = generator.generate("Senior React Engineer", "rushed")

    for q in questions:
        assert q.question_text.startswith(BRIEF_PREFIX)
        assert not q.question_text[len(BRIEF_PREFIX):].startswith(BRIEF_PREFIX)


def test_skeptic_appends_one_challenge_clause(generator: QuestionGenerator) -> None:
    questions = generator.generate("Senior React Engineer", "skeptic")

    assert _strip_challenge(questions[0].question_text) in TECHNICAL_QUESTIONS[RoleCategory.FRONTEND]
    assert _strip_challenge(questions[1].question_text) in BEHAVIORAL_QUESTIONS
    assert _strip_challenge(questions[2].question_text) in PROBLEM_SOLVING_QUESTIONS
    assert _strip_challenge(questions[4].question_text) in SITUATIONAL_QUESTIONS[RoleCategory.FRONTEND]


# =============================================================================
# Worked examples
# =============================================================================


def test_senior_react_engineer_technical() -> None:
    questions = generate_interview_questions(
        "Senior React Engineer", "technical", rng=random.Random(42)
    )

    assert [q.question_type for q in questions] == [
        QuestionType.TECHNICAL,
        QuestionType.TECHNICAL,
        QuestionType.SITUATIONAL,
        QuestionType.PROBLEM_SOLVING,
        QuestionType.LEADERSHIP,
    ]
    assert questions[0].question_text in TECHNICAL_QUESTIONS[RoleCategory.FRONTEND]
    assert questions[1].question_text in TECHNICAL_QUESTIONS[RoleCategory.FRONTEND]
    assert questions[0].question_text != questions[1].question_text
    assert questions[2].question_text in SITUATIONAL_QUESTIONS[RoleCategory.FRONTEND]
    assert questions[3].question_text in PROBLEM_SOLVING_QUESTIONS
    assert questions[4].question_text in LEADERSHIP_QUESTIONS


def test_sales_manager_rushed_leadership_focus() -> None:
    questions = generate_interview_questions(
        "Sales Manager", Persona.RUSHED, FocusCategory.LEADERSHIP, rng=random.Random(7)
    )

    assert [q.question_type for q in questions] == [
        QuestionType.LEADERSHIP,
        QuestionType.LEADERSHIP,
        QuestionType.BEHAVIORAL,
        QuestionType.LEADERSHIP,
        QuestionType.SITUATIONAL,
    ]
    assert all(q.question_text.startswith(BRIEF_PREFIX) for q in questions)
    assert questions[4].question_text[len(BRIEF_PREFIX):] in SITUATIONAL_QUESTIONS[RoleCategory.SALES]


# =============================================================================
# Determinism
# =============================================================================


@pytest.mark.parametrize("persona", ALL_PERSONAS)
def test_same_seed_same_questions(persona: str) -> None:
    first = QuestionGenerator(rng=random.Random(99)).generate("Registered Nurse", persona, "mixed")
    second = QuestionGenerator(rng=random.Random(99)).generate("Registered Nurse", persona, "mixed")

    assert first == second


def test_module_level_function_with_rng_is_reproducible() -> None:
    first = generate_interview_questions("Data Scientist", "skeptic", rng=random.Random(5))
    second = generate_interview_questions("Data Scientist", "skeptic", rng=random.Random(5))

    assert [q.question_text for q in first] == [q.question_text for q in second]


def test_generated_question_serializes_with_camel_case_aliases(generator: QuestionGenerator) -> None:
    payload = generator.generate("Senior React Engineer", "technical")[0].model_dump(
        mode="json", by_alias=True
    )

    assert set(payload) == {"questionNumber", "questionType", "questionText"}
    assert payload["questionNumber"] == 1
    assert payload["questionType"] == "technical"
