#!/usr/bin/env python3
"""
Interview Question Generator CLI.

Prints a five-question interview for a role and persona as JSON, in the
same camelCase shape the question service returns.

Usage:
    uv run python generate_questions.py "Senior React Engineer"

    # With persona, focus and a fixed seed:
    uv run python generate_questions.py "Sales Manager" --persona rushed --focus leadership --seed 7

    # Only show the detected role category:
    uv run python generate_questions.py "Registered Nurse" --classify-only
"""

from __future__ import annotations

import json
import logging
import random
import sys
from typing import Final, Optional, Sequence

from interview_questions import (
    FocusCategory,
    Persona,
    QuestionGenerator,
    available_personas,
    get_question_type_display,
)

# =============================================================================
# Logging Configuration
# =============================================================================

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(levelname)s - %(message)s",
)
logger: logging.Logger = logging.getLogger(__name__)


# =============================================================================
# Exit Codes
# =============================================================================

EXIT_SUCCESS: Final[int] = 0
EXIT_INVALID_INPUT: Final[int] = 2


def main(
    role_description: str,
    persona: str = Persona.TECHNICAL.value,
    focus_category: Optional[str] = None,
    seed: Optional[int] = None,
    classify_only: bool = False,
    pretty: bool = False,
) -> int:
    """
    Generate (or classify) and print the result as JSON.

    Returns:
        Process exit code.
    """
    role_description = role_description.strip()
    if not role_description:
        logger.error("Role description is empty.")
        return EXIT_INVALID_INPUT

    generator = QuestionGenerator(rng=random.Random(seed) if seed is not None else None)
    category = generator.classifier.classify(role_description)

    if classify_only:
        payload: object = {"roleDescription": role_description, "roleCategory": category.value}
    else:
        questions = generator.generate(role_description, persona, focus_category)
        payload = [q.model_dump(mode="json", by_alias=True) for q in questions]
        if pretty:
            for q in questions:
                display = get_question_type_display(q.question_type)
                print(f"{q.question_number}. {display.emoji} [{display.label}] {q.question_text}")
            return EXIT_SUCCESS

    print(json.dumps(payload, indent=2, ensure_ascii=False))
    return EXIT_SUCCESS


def cli(argv: Optional[Sequence[str]] = None) -> int:
    """
    Command-line interface entry point with argument parsing.
    """
    import argparse

    parser = argparse.ArgumentParser(
        description="Generate rule-based interview questions for a role.",
    )
    parser.add_argument("role", help="Role description, e.g. 'Senior React Engineer'")
    parser.add_argument(
        "--persona",
        choices=available_personas(),
        default=Persona.TECHNICAL.value,
        help="Interviewer persona (default: technical)",
    )
    parser.add_argument(
        "--focus",
        choices=[focus.value for focus in FocusCategory],
        default=None,
        dest="focus_category",
        help="Focus category overriding the persona question mix",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for reproducible question selection",
    )
    parser.add_argument(
        "--classify-only",
        action="store_true",
        help="Only print the detected role category",
    )
    parser.add_argument(
        "--pretty",
        action="store_true",
        help="Print a numbered list with type labels instead of JSON",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    args = parser.parse_args(argv)

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    return main(
        role_description=args.role,
        persona=args.persona,
        focus_category=args.focus_category,
        seed=args.seed,
        classify_only=args.classify_only,
        pretty=args.pretty,
    )


if __name__ == "__main__":
    sys.exit(cli())
