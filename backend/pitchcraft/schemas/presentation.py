"""
Pydantic models for the slide deck handed to the rendering layer.

Field names on the wire are the renderer's camelCase names (``bulletPoints``,
``chartData``, ``imageUrl``...), so every model here serializes by alias.  The
presentation agent in ``pitchcraft.core.ai_generators`` outputs
``PresentationContent``; the offline deck builder produces the same
``SlideRecord`` list.
"""

from __future__ import annotations

import datetime
from enum import Enum
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class SlideType(str, Enum):
    intro = "intro"
    title = "title"
    content = "content"
    chart = "chart"
    image = "image"


class ChartKind(str, Enum):
    bar = "bar"
    line = "line"
    area = "area"
    pie = "pie"
    radar = "radar"


class MetricIcon(str, Enum):
    trending_up = "TrendingUp"
    users = "Users"
    shield = "Shield"
    globe = "Globe"
    rocket = "Rocket"
    dollar_sign = "DollarSign"
    target = "Target"
    zap = "Zap"


DEFAULT_METRIC_ICON = MetricIcon.dollar_sign


# ---------------------------------------------------------------------------
# Slide parts
# ---------------------------------------------------------------------------

class ChartPoint(CamelModel):
    name: str
    value: float


class ChartSeries(CamelModel):
    """Chart data as the renderer expects it: ``{"type": ..., "data": [...]}``."""

    chart_kind: ChartKind = Field(alias="type")
    points: list[ChartPoint] = Field(alias="data")

    @property
    def labels(self) -> list[str]:
        return [p.name for p in self.points]

    @property
    def values(self) -> list[float]:
        return [p.value for p in self.points]


class SlideMetric(CamelModel):
    label: str
    value: str
    icon: MetricIcon = DEFAULT_METRIC_ICON

    @field_validator("icon", mode="before")
    @classmethod
    def coerce_unknown_icon(cls, v):
        if isinstance(v, MetricIcon):
            return v
        try:
            return MetricIcon(v)
        except ValueError:
            return DEFAULT_METRIC_ICON


class SlideRecord(CamelModel):
    id: int = Field(ge=0)
    type: SlideType
    title: str
    content: str | None = None
    bullet_points: list[str] | None = None
    chart_data: ChartSeries | None = None
    image_url: str | None = None
    image_prompt: str | None = None
    metrics: list[SlideMetric] | None = None

    def to_wire(self) -> dict:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class PresentationContent(BaseModel):
    slides: list[SlideRecord]


# ---------------------------------------------------------------------------
# Request / response payloads
# ---------------------------------------------------------------------------

class GeneratePresentationRequest(BaseModel):
    text: str = Field(min_length=1)

    @field_validator("text")
    @classmethod
    def text_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Text content is required")
        return v


class GeneratePresentationResponse(CamelModel):
    success: bool = True
    presentation_id: UUID
    company_name: str
    generation_mode: str
    presentation: list[SlideRecord]
    note: str | None = None


class PresentationRead(CamelModel):
    id: UUID
    company_name: str
    generation_mode: str
    note: str | None = None
    slides: list[SlideRecord]
    created_at: datetime.datetime
    updated_at: datetime.datetime | None

    model_config = {"from_attributes": True}


class PresentationSummary(CamelModel):
    id: UUID
    company_name: str
    generation_mode: str
    created_at: datetime.datetime

    model_config = {"from_attributes": True}


class GenerateImagesRequest(BaseModel):
    prompts: list[str] = Field(min_length=1)


class GenerateImagesResponse(BaseModel):
    success: bool = True
    images: list[str]
    note: str | None = None
