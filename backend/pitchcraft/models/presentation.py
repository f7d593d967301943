from sqlalchemy import Column, JSON, String, Text
from sqlmodel import Field

from pitchcraft.models.base import BaseUUIDModel


class Presentation(BaseUUIDModel, table=True):
    __tablename__ = "presentations"

    company_name: str = Field(max_length=255, index=True)
    source_text: str = Field(default="", sa_column=Column(Text, default=""))
    generation_mode: str = Field(default="structured", sa_column=Column(String(20), default="structured"))  # ai, structured
    note: str | None = Field(default=None, sa_column=Column(Text, nullable=True))

    # Slides stored in the renderer's JSON shape (camelCase keys)
    slides: list[dict] = Field(default_factory=list, sa_column=Column(JSON))
