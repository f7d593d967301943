"""
Ordered recognition rules for business-text extraction.

Every table here is plain data: rules are tried in list order and the first
acceptable match wins per entity.  ``pitchcraft.core.extraction`` owns the
matching logic, so rule order and precedence can be tested on their own.
"""

from __future__ import annotations

import re
from typing import NamedTuple

from pitchcraft.schemas.business import MetricType, SectionKey


# ---------------------------------------------------------------------------
# 1.  Company names
# ---------------------------------------------------------------------------

DEFAULT_COMPANY_NAME = "Your Company"

COMPANY_NAME_STOP_WORDS: frozenset[str] = frozenset({
    "The",
    "This",
    "Our",
    "We",
    "Company",
    "Business",
    "Startup",
    "Executive",
    "Summary",
    "Overview",
    "Introduction",
})

# A capitalized token may carry inner dots/hyphens/apostrophes ("Acme.io").
_NAME_TOKEN = r"[A-Z][A-Za-z0-9&]*(?:[.\-'][A-Za-z0-9&]+)*"
_COMPANY_NAME = rf"{_NAME_TOKEN}(?:[ \t]+(?:&[ \t]+)?{_NAME_TOKEN}){{0,3}}"

_LEGAL_SUFFIX = r"(?:Inc\.?|LLC|Corp\.?|Ltd\.?|Limited|Company|Co\.?|Corporation)(?![A-Za-z])"


class CompanyNameRule(NamedTuple):
    rule_id: str
    pattern: re.Pattern


COMPANY_NAME_RULES: list[CompanyNameRule] = [
    CompanyNameRule(
        "declared",
        re.compile(
            rf"(?i:company|startup|business|firm)(?:\s+(?i:name))?(?:\s+(?i:is))?:[ \t]*"
            rf"(?P<name>{_COMPANY_NAME})"
        ),
    ),
    CompanyNameRule(
        "introduced",
        re.compile(rf"\b(?i:we are|introducing|presenting|about)\s+(?P<name>{_COMPANY_NAME})"),
    ),
    CompanyNameRule(
        "legal_suffix",
        re.compile(rf"\b(?P<name>{_COMPANY_NAME})[ \t]+{_LEGAL_SUFFIX}"),
    ),
    CompanyNameRule(
        "sentence_lead",
        re.compile(
            r"^(?P<name>[A-Z][a-zA-Z0-9]+(?:[ \t]+[A-Z][a-zA-Z0-9]+){0,3})[ \t]+"
            r"(?:is|was|has|will|provides|offers|develops|creates|builds)\b",
            re.MULTILINE,
        ),
    ),
    CompanyNameRule(
        "called",
        re.compile(r"(?i:called|named)\s+[\"'“‘](?P<name>[^\"'”’\n]+)[\"'”’]"),
    ),
    CompanyNameRule(
        "quoted",
        re.compile(r"[\"'“](?P<name>[A-Z][A-Za-z0-9 &.-]+?)[\"'”]"),
    ),
]

COMPANY_NAME_MIN_LENGTH = 3
COMPANY_NAME_MAX_LENGTH = 49

# Fallback scan over the first lines of the text
FALLBACK_LINE_COUNT = 5
FALLBACK_MAX_TOKENS = 3
FALLBACK_MIN_LENGTH = 4
FALLBACK_MAX_LENGTH = 29
FALLBACK_TOKEN = re.compile(r"[A-Z][a-zA-Z0-9]+")


# ---------------------------------------------------------------------------
# 2.  Personnel
# ---------------------------------------------------------------------------

ROLE_VOCABULARY: tuple[str, ...] = (
    "Vice President",
    "Co-Founder",
    "Co-founder",
    "Founder",
    "President",
    "Director",
    "Manager",
    "Chief",
    "Lead",
    "Head",
    "CEO",
    "CTO",
    "CFO",
    "COO",
    "VP",
)

_ROLE_ALTERNATION = "|".join(re.escape(r) for r in ROLE_VOCABULARY)
# Role-first lines ("cto: John Smith") accept any casing.
_ROLE_TERM = f"(?i:{_ROLE_ALTERNATION})"
# After a name the role must be capitalized: "CEO", "Co-founder & CTO", "Head of Sales".
_ROLE_PHRASE = rf"\b(?:{_ROLE_ALTERNATION})\b(?:[ \t]+(?:(?:of|and|&)[ \t]+)?[A-Z][A-Za-z]*)*"
_PERSON_NAME = r"[A-Z][a-z]+(?:[ \t]+[A-Z][a-z]+)+"

PERSON_NAME_MIN_TOKENS = 2
PERSON_NAME_MIN_LENGTH = 6
PERSON_NAME_MAX_LENGTH = 49


class PersonnelRule(NamedTuple):
    rule_id: str
    pattern: re.Pattern
    # Capture-group roles in match order: ("name", "role") or ("role", "name")
    groups: tuple[str, str]


PERSONNEL_RULES: list[PersonnelRule] = [
    PersonnelRule(
        "name_dash_role",
        re.compile(rf"(?P<name>{_PERSON_NAME})[ \t]*[-–—:,][ \t]*(?P<role>{_ROLE_PHRASE})"),
        ("name", "role"),
    ),
    PersonnelRule(
        "role_dash_name",
        re.compile(rf"(?P<role>\b{_ROLE_TERM}\b)[ \t]*[-–—:][ \t]*(?P<name>{_PERSON_NAME})"),
        ("role", "name"),
    ),
    PersonnelRule(
        "name_paren_role",
        re.compile(rf"(?P<name>{_PERSON_NAME})[ \t]*\([ \t]*(?P<role>{_ROLE_PHRASE})[ \t]*\)"),
        ("name", "role"),
    ),
]


# ---------------------------------------------------------------------------
# 3.  Thematic sections
# ---------------------------------------------------------------------------

SECTION_KEYWORDS: dict[SectionKey, tuple[str, ...]] = {
    SectionKey.problem: ("problem", "challenge", "pain point", "issue", "opportunity"),
    SectionKey.solution: ("solution", "product", "service", "offering", "platform", "technology"),
    SectionKey.market: ("market", "industry", "customers", "target", "addressable market", "tam"),
    SectionKey.business_model: ("business model", "revenue", "monetization", "pricing", "model"),
    SectionKey.traction: ("traction", "growth", "users", "customers", "sales", "metrics", "kpi"),
    SectionKey.team: ("team", "founder", "leadership", "management", "experience", "background"),
    SectionKey.financials: ("financial", "revenue", "profit", "funding", "investment", "projections"),
    SectionKey.competition: ("competition", "competitor", "competitive", "advantage", "differentiation"),
    SectionKey.funding: ("funding", "investment", "capital", "raise", "series", "round"),
}

SENTENCE_SPLIT = re.compile(r"[.!?]+")
SENTENCE_MIN_CANDIDATE_LENGTH = 20
SENTENCE_MIN_LENGTH = 16
SENTENCE_MAX_LENGTH = 299
SECTION_MAX_SENTENCES = 6


# ---------------------------------------------------------------------------
# 4.  Numeric metrics
# ---------------------------------------------------------------------------

_AMOUNT = r"(\d+(?:,\d{3})*(?:\.\d+)?)"
_COUNT = r"(\d+(?:,\d{3})*)"


class MetricRule(NamedTuple):
    rule_id: str
    pattern: re.Pattern
    type: MetricType
    multiplier: float


METRIC_RULES: list[MetricRule] = [
    MetricRule("revenue_millions", re.compile(rf"\${_AMOUNT}\s*(?:million|M)\b", re.I), MetricType.revenue, 1e6),
    MetricRule("revenue_billions", re.compile(rf"\${_AMOUNT}\s*(?:billion|B)\b", re.I), MetricType.revenue, 1e9),
    MetricRule("revenue_thousands", re.compile(rf"\${_AMOUNT}\s*(?:K|thousand)\b", re.I), MetricType.revenue, 1e3),
    MetricRule("users", re.compile(rf"{_COUNT}\s*(?:users|customers|clients)\b", re.I), MetricType.users, 1),
    # At most two integer digits: "15% growth" matches, "150%" and "120.5%" do not.
    MetricRule(
        "growth_percent",
        re.compile(r"(?<![\w.])(\d{1,2}(?:\.\d+)?)\s*%\s*(?:growth|increase|cagr)\b", re.I),
        MetricType.growth,
        1,
    ),
    MetricRule("team_size", re.compile(r"(\d+)\s*(?:employees|team members|staff)\b", re.I), MetricType.team, 1),
    MetricRule("revenue_plain", re.compile(rf"\${_AMOUNT}\s*(?:revenue|sales|income)\b", re.I), MetricType.revenue, 1),
    MetricRule("funding_plain", re.compile(rf"\${_AMOUNT}\s*(?:funding|raised|investment)\b", re.I), MetricType.funding, 1),
    MetricRule("traction_count", re.compile(rf"{_COUNT}\s*(?:downloads|installs|visits)\b", re.I), MetricType.traction, 1),
]
