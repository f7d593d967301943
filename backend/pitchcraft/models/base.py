from datetime import datetime, timezone
from uuid import UUID, uuid4

from sqlalchemy import DateTime, func
from sqlmodel import SQLModel, Field


def utc_now() -> datetime:
    """Return current UTC datetime with timezone info."""
    return datetime.now(timezone.utc)


class BaseUUIDModel(SQLModel):
    """Base table model: UUID primary key plus created/updated timestamps.

    The timestamp columns are declared through ``sa_type``/``sa_column_kwargs``
    rather than a shared ``Column`` so every table gets its own column object.
    """

    id: UUID = Field(default_factory=uuid4, primary_key=True, index=True)

    created_at: datetime = Field(
        default_factory=utc_now,
        sa_type=DateTime(timezone=True),
        sa_column_kwargs={"server_default": func.now(), "nullable": False},
    )
    updated_at: datetime | None = Field(
        default=None,
        sa_type=DateTime(timezone=True),
        sa_column_kwargs={"onupdate": func.now(), "nullable": True},
    )
