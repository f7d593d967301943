"""
Heuristic extraction of business facts from free-form text.

Extractors
----------
- **extract_section**        – keyword-selected sentences for one business topic
- **extract_company_name**   – best single company name, or a placeholder
- **extract_personnel**      – deduplicated ``name + role`` pairs
- **extract_numbers**        – numeric mentions normalized to base units
- **parse_business_content** – runs all of the above into a ``BusinessContent``

Everything here is synchronous and side-effect free.  A miss is never an
error: it yields an empty list or the default company name.
"""

import logging
import math

from pitchcraft.core.patterns import (
    COMPANY_NAME_MAX_LENGTH,
    COMPANY_NAME_MIN_LENGTH,
    COMPANY_NAME_RULES,
    COMPANY_NAME_STOP_WORDS,
    DEFAULT_COMPANY_NAME,
    FALLBACK_LINE_COUNT,
    FALLBACK_MAX_LENGTH,
    FALLBACK_MAX_TOKENS,
    FALLBACK_MIN_LENGTH,
    FALLBACK_TOKEN,
    METRIC_RULES,
    PERSON_NAME_MAX_LENGTH,
    PERSON_NAME_MIN_LENGTH,
    PERSON_NAME_MIN_TOKENS,
    PERSONNEL_RULES,
    SECTION_KEYWORDS,
    SECTION_MAX_SENTENCES,
    SENTENCE_MAX_LENGTH,
    SENTENCE_MIN_CANDIDATE_LENGTH,
    SENTENCE_MIN_LENGTH,
    SENTENCE_SPLIT,
)
from pitchcraft.schemas.business import (
    BusinessContent,
    BusinessProfile,
    Metric,
    Person,
)

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# 1.  Sections
# ---------------------------------------------------------------------------

def extract_section(text: str, keywords: tuple[str, ...] | list[str]) -> list[str]:
    """Return up to six sentences of *text* that mention any of *keywords*.

    Sentences keep their source order.  Keyword matching is a case-insensitive
    substring test, so ``"tam"`` also hits ``"attained"``.
    """
    selected: list[str] = []
    for candidate in SENTENCE_SPLIT.split(text):
        sentence = candidate.strip()
        if len(sentence) <= SENTENCE_MIN_CANDIDATE_LENGTH:
            continue
        folded = sentence.casefold()
        if not any(keyword in folded for keyword in keywords):
            continue
        if SENTENCE_MIN_LENGTH <= len(sentence) <= SENTENCE_MAX_LENGTH:
            selected.append(sentence)
            if len(selected) == SECTION_MAX_SENTENCES:
                break
    return selected


# ---------------------------------------------------------------------------
# 2.  Entities
# ---------------------------------------------------------------------------

def _is_acceptable_company_name(name: str) -> bool:
    if name in COMPANY_NAME_STOP_WORDS:
        return False
    return COMPANY_NAME_MIN_LENGTH <= len(name) <= COMPANY_NAME_MAX_LENGTH


def _fallback_company_name(text: str) -> str | None:
    """Scan the first non-empty lines for a run of up to three capitalized words."""
    lines = [line.strip() for line in text.splitlines() if line.strip()]
    for line in lines[:FALLBACK_LINE_COUNT]:
        words = line.split()
        window = min(FALLBACK_MAX_TOKENS, len(words))
        for start in range(len(words) - window + 1):
            tokens = words[start:start + window]
            if not all(FALLBACK_TOKEN.fullmatch(token) for token in tokens):
                continue
            if all(token in COMPANY_NAME_STOP_WORDS for token in tokens):
                continue
            candidate = " ".join(tokens)
            if FALLBACK_MIN_LENGTH <= len(candidate) <= FALLBACK_MAX_LENGTH:
                return candidate
    return None


def extract_company_name(text: str) -> str:
    """Return the best-guess company name, or ``DEFAULT_COMPANY_NAME``.

    Rules from ``COMPANY_NAME_RULES`` are tried in priority order; within a
    rule, matches are considered left to right and the first one that is not a
    stop-word and fits the length bounds wins.
    """
    for rule in COMPANY_NAME_RULES:
        for match in rule.pattern.finditer(text):
            name = match.group("name").strip()
            if _is_acceptable_company_name(name):
                logger.debug("Company name %r matched rule %s", name, rule.rule_id)
                return name

    fallback = _fallback_company_name(text)
    if fallback:
        logger.debug("Company name %r taken from leading lines", fallback)
        return fallback
    return DEFAULT_COMPANY_NAME


def _is_valid_person_name(name: str) -> bool:
    return (
        len(name.split()) >= PERSON_NAME_MIN_TOKENS
        and PERSON_NAME_MIN_LENGTH <= len(name) <= PERSON_NAME_MAX_LENGTH
    )


def extract_personnel(text: str) -> list[Person]:
    """Return people mentioned with a role, in order of first match.

    Every rule runs over the whole text; a name already seen (compared
    case-insensitively) keeps the role from its first match.
    """
    personnel: list[Person] = []
    seen: set[str] = set()

    for rule in PERSONNEL_RULES:
        for match in rule.pattern.finditer(text):
            captured = dict(zip(rule.groups, (match.group(g) for g in rule.groups)))
            name = " ".join(captured["name"].split())
            role = " ".join(captured["role"].split())

            if not _is_valid_person_name(name):
                continue
            key = name.casefold()
            if key in seen:
                continue
            seen.add(key)
            personnel.append(Person(name=name, role=role))

    return personnel


# ---------------------------------------------------------------------------
# 3.  Metrics
# ---------------------------------------------------------------------------

def extract_numbers(text: str) -> list[Metric]:
    """Return every numeric mention matched by ``METRIC_RULES``.

    The list is ordered by rule priority, then by position in *text*.  Several
    metrics may share a type; picking one is left to the caller.
    """
    metrics: list[Metric] = []
    for rule in METRIC_RULES:
        for match in rule.pattern.finditer(text):
            raw = match.group(1).replace(",", "")
            try:
                value = float(raw) * rule.multiplier
            except ValueError:
                continue
            if not math.isfinite(value) or value <= 0:
                continue
            metrics.append(
                Metric(
                    context=match.group(0),
                    value=value,
                    type=rule.type,
                    position=match.start(),
                )
            )
    return metrics


# ---------------------------------------------------------------------------
# 4.  Business profile
# ---------------------------------------------------------------------------

def parse_business_content(text: str) -> BusinessContent:
    """Extract the company name, personnel, nine sections, and metrics from *text*."""
    profile = BusinessProfile(
        company_name=extract_company_name(text),
        personnel=extract_personnel(text),
        sections={
            key: extract_section(text, keywords)
            for key, keywords in SECTION_KEYWORDS.items()
        },
    )
    metrics = extract_numbers(text)

    logger.info(
        "Extracted company=%r personnel=%d metrics=%d",
        profile.company_name,
        len(profile.personnel),
        len(metrics),
    )
    return BusinessContent(profile=profile, metrics=metrics)
