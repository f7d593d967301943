"""
Shared FastAPI dependencies.

Routers import ``get_db`` from HERE, not from ``db.database``, so tests can
swap the session source with a single ``dependency_overrides`` entry.
"""

from sqlmodel.ext.asyncio.session import AsyncSession

from pitchcraft.db.database import get_db as _get_db

__all__ = ["get_db"]


async def get_db() -> AsyncSession:
    """Yield an async database session."""
    async for session in _get_db():
        yield session
