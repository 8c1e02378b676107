"""
Role classifier.

Maps a free-text role description ("Senior React Engineer at Series B
Startup") to one RoleCategory using an ordered list of keyword rules.
The first rule with a matching keyword wins, so the order of ROLE_RULES
is the precedence between overlapping titles:

    product -> design -> industry roles -> tech specialties -> leadership

Keywords are plain substrings of the normalized text. Normalization
lower-cases the input, collapses everything outside ``[a-z0-9+#.]`` into
single spaces and pads both ends with a space, so short tokens can be
written padded (" ai ", " go ") to match whole words only.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable, Optional

from .models import RoleCategory


FALLBACK_CATEGORY = RoleCategory.GENERAL

_SEPARATORS = re.compile(r"[^a-z0-9+#.]+")


@dataclass(frozen=True)
class ClassifierRule:
    """One (predicate, category) pair in the ordered rule list."""

    category: RoleCategory
    keywords: tuple[str, ...]

    def matches(self, normalized: str) -> bool:
        return any(keyword in normalized for keyword in self.keywords)


def normalize_role_text(role_description: Optional[str]) -> str:
    """Lower-case, collapse separators and pad with spaces."""
    collapsed = _SEPARATORS.sub(" ", (role_description or "").lower()).strip()
    return f" {collapsed} "


ROLE_RULES: tuple[ClassifierRule, ...] = (
    # Product before leadership so "product manager" is not a generic manager.
    ClassifierRule(
        RoleCategory.PRODUCT,
        (
            "product manager",
            "product owner",
            "product lead",
            "head of product",
            "vp of product",
            "director of product",
            "product director",
            "chief product",
            "product analyst",
            "product operations",
            "program manager",
            "project manager",
            "scrum master",
            "agile coach",
        ),
    ),
    ClassifierRule(
        RoleCategory.DESIGN,
        (
            " ux ",
            " ui ux ",
            "ui designer",
            "ux designer",
            "product designer",
            "interaction designer",
            "experience designer",
            "visual designer",
            "ux researcher",
            "user researcher",
            "design systems",
        ),
    ),
    # Industry roles
    ClassifierRule(
        RoleCategory.SALES,
        (
            "sales",
            "account executive",
            "business development",
            " bdr ",
            " sdr ",
            "account manager",
            "partner manager",
        ),
    ),
    ClassifierRule(
        RoleCategory.MARKETING,
        (
            "marketing",
            "growth",
            " seo ",
            "content",
            "brand",
            "social media",
            "public relations",
        ),
    ),
    ClassifierRule(
        RoleCategory.FINANCE,
        (
            "finance",
            "accounting",
            "accountant",
            "financial",
            "controller",
            "treasurer",
            "treasury",
            "bookkeeper",
            "auditor",
            "budget analyst",
        ),
    ),
    ClassifierRule(
        RoleCategory.HR,
        (
            " hr ",
            "human resource",
            "recruiter",
            "recruiting",
            "talent",
            "people operations",
            "chief people",
            "people partner",
        ),
    ),
    ClassifierRule(
        RoleCategory.OPERATIONS,
        (
            "operations",
            "supply chain",
            "logistics",
            "procurement",
            "warehouse",
            "inventory",
            "fulfillment",
            "dispatcher",
        ),
    ),
    ClassifierRule(
        RoleCategory.CUSTOMER_SERVICE,
        (
            "customer service",
            "customer support",
            "customer success",
            "support specialist",
            "help desk",
            "call center",
        ),
    ),
    ClassifierRule(
        RoleCategory.HEALTHCARE,
        (
            "nurse",
            "doctor",
            "physician",
            "medical",
            "healthcare",
            "clinical",
            "pharmacist",
            "therapist",
            "dentist",
            "paramedic",
            "surgeon",
        ),
    ),
    ClassifierRule(
        RoleCategory.EDUCATION,
        (
            "teacher",
            "professor",
            "instructor",
            "education",
            "academic",
            "trainer",
            "tutor",
            "school principal",
            "curriculum",
        ),
    ),
    ClassifierRule(
        RoleCategory.LEGAL,
        (
            "attorney",
            "lawyer",
            "legal",
            " counsel ",
            "paralegal",
            "compliance officer",
            "compliance manager",
        ),
    ),
    ClassifierRule(
        RoleCategory.CREATIVE,
        (
            "designer",
            "creative",
            "art director",
            "copywriter",
            "illustrator",
            "photographer",
            "animator",
            "video editor",
            "writer",
        ),
    ),
    ClassifierRule(
        RoleCategory.HOSPITALITY,
        (
            "hotel",
            "restaurant",
            "hospitality",
            " chef ",
            "catering",
            "front desk",
            "bartender",
            "barista",
            "banquet",
            "concierge",
        ),
    ),
    ClassifierRule(
        RoleCategory.RETAIL,
        (
            "retail",
            "store manager",
            "merchandise",
            "merchandiser",
            "cashier",
            "store associate",
        ),
    ),
    ClassifierRule(
        RoleCategory.CONSULTING,
        (
            "consultant",
            "consulting",
            "advisory",
        ),
    ),
    # Tech specialties, most specific first
    ClassifierRule(
        RoleCategory.FULLSTACK,
        (
            "full stack",
            "fullstack",
            " mern ",
            " mean ",
            "jamstack",
        ),
    ),
    ClassifierRule(
        RoleCategory.MOBILE,
        (
            "mobile",
            " ios ",
            "android",
            "react native",
            "flutter",
            "swift",
            "kotlin",
        ),
    ),
    ClassifierRule(
        RoleCategory.FRONTEND,
        (
            "frontend",
            "front end",
            "react",
            " vue",
            "angular",
            "svelte",
            "next.js",
            "javascript",
            "typescript",
            " ui engineer",
            "web developer",
        ),
    ),
    ClassifierRule(
        RoleCategory.DATA,
        (
            "data engineer",
            "data scientist",
            "data analyst",
            "data architect",
            "analytics engineer",
            "big data",
            " etl ",
            "business intelligence",
        ),
    ),
    ClassifierRule(
        RoleCategory.ML,
        (
            "machine learning",
            "ml engineer",
            " ml ",
            "mlops",
            " ai ",
            " nlp ",
            "deep learning",
            "computer vision",
            " llm",
        ),
    ),
    ClassifierRule(
        RoleCategory.SECURITY,
        (
            "security",
            "appsec",
            "infosec",
            "cyber",
            "penetration",
        ),
    ),
    ClassifierRule(
        RoleCategory.DEVOPS,
        (
            "devops",
            " sre ",
            "site reliability",
            "cloud",
            "infrastructure",
            "platform engineer",
            "kubernetes",
            "release engineer",
            "build engineer",
        ),
    ),
    ClassifierRule(
        RoleCategory.BACKEND,
        (
            "backend",
            "back end",
            " node",
            "python",
            " java ",
            " go ",
            "golang",
            "ruby",
            "rails",
            " php ",
            ".net",
            "django",
            "spring boot",
            "fastapi",
            "scala",
            "rust",
            " api ",
        ),
    ),
    # Generic seniority and management titles
    ClassifierRule(
        RoleCategory.LEADERSHIP,
        (
            "lead",
            "manager",
            "director",
            " vp ",
            " cto ",
            " ceo ",
            " cfo ",
            " coo ",
            "head of",
            "chief",
            " staff ",
            "principal",
            "executive",
            "founder",
            "supervisor",
        ),
    ),
)


class RoleClassifier:
    """Classifies role descriptions with an ordered rule list."""

    def __init__(
        self,
        rules: Iterable[ClassifierRule] = ROLE_RULES,
        fallback: RoleCategory = FALLBACK_CATEGORY,
    ) -> None:
        self._rules = tuple(rules)
        self._fallback = fallback

    @property
    def rules(self) -> tuple[ClassifierRule, ...]:
        return self._rules

    @property
    def fallback(self) -> RoleCategory:
        return self._fallback

    def classify(self, role_description: Optional[str]) -> RoleCategory:
        """Return the category of the first matching rule, else the fallback."""
        normalized = normalize_role_text(role_description)
        for rule in self._rules:
            if rule.matches(normalized):
                return rule.category
        return self._fallback


_DEFAULT_CLASSIFIER = RoleClassifier()


def classify_role(role_description: Optional[str]) -> RoleCategory:
    """Classify with the default rule set."""
    return _DEFAULT_CLASSIFIER.classify(role_description)
