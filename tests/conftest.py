"""
Shared pytest fixtures and configuration for all tests.

Environment defaults are set before any ``pitchcraft`` import so the settings
object, the module-level engine, and the presentation agent are all built for
an offline SQLite run with AI generation switched off.
"""

import os

os.environ["MODE"] = "testing"
os.environ["ASYNC_DATABASE_URI"] = "sqlite+aiosqlite:///:memory:"
os.environ["OPENAI_API_KEY"] = ""
os.environ["AI_GENERATION_ENABLED"] = "true"

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.pool import StaticPool

from pitchcraft.api import deps
from pitchcraft.core.config import settings
from pitchcraft.db.database import build_sessionmaker, create_tables
from pitchcraft.main import app

pytest_plugins = ("pytest_asyncio",)

E2E_TEXT = (
    "Acme Robotics is solving the problem of warehouse inefficiency. "
    "Jane Doe - CEO. We have 5000 users and $2M revenue."
)

RICH_TEXT = """Acme Robotics is building autonomous picking robots for warehouses.
The problem is that manual picking is slow, expensive and error prone for operators.
Our solution is a robotic platform that learns new items in minutes.
The addressable market for warehouse automation keeps expanding every year.
Our business model is a monthly subscription with usage based pricing.
We grew to 5000 users last year with 15% growth every month.
Our main competitors rely on fixed automation, which is our key advantage.
Jane Doe - CEO
John Smith - CTO
We are raising a $3 million seed round to expand manufacturing.
"""


@pytest.fixture(autouse=True)
def reset_settings():
    """Save and restore the AI-related settings for test isolation."""
    original = {
        "OPENAI_API_KEY": settings.OPENAI_API_KEY,
        "AI_GENERATION_ENABLED": settings.AI_GENERATION_ENABLED,
        "IMAGE_TIMEOUT_SECONDS": settings.IMAGE_TIMEOUT_SECONDS,
    }
    settings.OPENAI_API_KEY = ""
    settings.AI_GENERATION_ENABLED = True

    yield

    for key, value in original.items():
        setattr(settings, key, value)


@pytest.fixture
def ai_enabled():
    """Make AI generation look configured; the collaborators themselves are mocked per test."""
    settings.OPENAI_API_KEY = "sk-test"
    settings.AI_GENERATION_ENABLED = True


@pytest_asyncio.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    await create_tables(engine)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(test_engine):
    async with build_sessionmaker(test_engine)() as session:
        yield session


@pytest_asyncio.fixture
async def client(test_engine):
    """HTTP client bound to the app, with sessions drawn from the test engine."""
    session_factory = build_sessionmaker(test_engine)

    async def override_get_db():
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[deps.get_db] = override_get_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as c:
        yield c
    app.dependency_overrides.clear()
