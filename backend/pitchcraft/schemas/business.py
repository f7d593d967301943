"""
Pydantic models for the facts extracted from free-form business text.

``parse_business_content`` in ``pitchcraft.core.extraction`` builds a
``BusinessContent`` (profile + metrics) from raw text.  Both models are frozen:
once an extraction run produces them they are only ever read.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


class SectionKey(str, Enum):
    problem = "problem"
    solution = "solution"
    market = "market"
    business_model = "businessModel"
    traction = "traction"
    team = "team"
    financials = "financials"
    competition = "competition"
    funding = "funding"


class MetricType(str, Enum):
    revenue = "revenue"
    users = "users"
    growth = "growth"
    team = "team"
    funding = "funding"
    traction = "traction"


# ---------------------------------------------------------------------------
# Extracted records
# ---------------------------------------------------------------------------

class Person(BaseModel):
    model_config = {"frozen": True}

    name: str
    role: str


class Metric(BaseModel):
    """A numeric mention normalized to base units (``$2M`` -> ``2000000``)."""

    model_config = {"frozen": True}

    context: str
    value: float
    type: MetricType
    # Offset of the match in the source text; not part of the wire shape.
    position: int = Field(default=0, exclude=True)


def format_number(value: float) -> str:
    """Render a metric value for people: ``5000000.0`` -> ``5,000,000``."""
    if float(value).is_integer():
        return f"{int(value):,}"
    return f"{value:,}"


def first_metric(metrics: list[Metric], metric_type: MetricType) -> Metric | None:
    """Return the textually earliest metric of *metric_type*, if any.

    Metric lists are ordered by rule priority first, so the earliest mention is
    not necessarily the first list entry.
    """
    matches = [m for m in metrics if m.type == metric_type]
    if not matches:
        return None
    return min(matches, key=lambda m: m.position)


class BusinessProfile(BaseModel):
    model_config = {"frozen": True}

    company_name: str
    personnel: list[Person] = Field(default_factory=list)
    sections: dict[SectionKey, list[str]] = Field(default_factory=dict)

    def section(self, key: SectionKey) -> list[str]:
        return self.sections.get(key, [])


class BusinessContent(BaseModel):
    """Returned by ``parse_business_content``: the profile plus every metric found."""

    model_config = {"frozen": True}

    profile: BusinessProfile
    metrics: list[Metric] = Field(default_factory=list)

    @property
    def company_name(self) -> str:
        return self.profile.company_name

    def first_metric(self, metric_type: MetricType) -> Metric | None:
        return first_metric(self.metrics, metric_type)

    def to_prompt_context(self) -> str:
        profile = self.profile
        team_lines = "\n".join(f"- {p.name}: {p.role}" for p in profile.personnel)
        section_lines = "\n".join(
            f"- {key.value}: {' '.join(profile.section(key))}" for key in SectionKey
        )
        metric_lines = "\n".join(
            f"- {m.type.value}: {format_number(m.value)} ({m.context})" for m in self.metrics
        )
        return (
            f"Company: {profile.company_name}\n\n"
            f"Personnel/Team:\n{team_lines}\n\n"
            f"Business Information:\n{section_lines}\n\n"
            f"Extracted Numbers/Metrics:\n{metric_lines}"
        )
