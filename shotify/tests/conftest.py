"""
Pytest Configuration and Fixtures
"""

import os

# Settings are cached on first use, so the environment is set before importing the app
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("SEED_TEMPLATES_ON_STARTUP", "false")
os.environ.setdefault("ADMIN_API_KEY", "test-admin-key")
os.environ.setdefault("DEBUG", "false")

import copy
from typing import AsyncGenerator

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from shotify.database import Base, get_db
from shotify.main import app
from shotify.models import Template
from shotify.services.access import AccessGate
from shotify.services.projects import ProjectStore
from shotify.services.templates import TemplateCatalog


# Test database URL
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

ADMIN_HEADERS = {"X-Admin-Key": "test-admin-key"}


def user_headers(user_id: str) -> dict[str, str]:
    return {"X-User-Id": user_id}


@pytest.fixture
async def test_engine():
    """Fresh in-memory database per test."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest.fixture
def session_factory(test_engine):
    return async_sessionmaker(test_engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def db_session(session_factory) -> AsyncGenerator[AsyncSession, None]:
    """Get database session for tests."""
    async with session_factory() as session:
        yield session


@pytest.fixture
def catalog(db_session) -> TemplateCatalog:
    return TemplateCatalog(db_session)


@pytest.fixture
def store(db_session) -> ProjectStore:
    return ProjectStore(db_session, gate=AccessGate())


@pytest.fixture
async def async_client(session_factory) -> AsyncGenerator[AsyncClient, None]:
    """Async client bound to the per-test database."""

    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture
def minimal_dark_config() -> dict:
    """Single-slide configuration with one text layer."""
    return {
        "canvas": {"width": 1242, "height": 2688, "backgroundColor": "#101010"},
        "layers": [
            {
                "id": "headline-1",
                "type": "text",
                "name": "Title",
                "x": 621,
                "y": 280,
                "width": 1000,
                "height": 100,
                "rotation": 0,
                "visible": True,
                "locked": False,
                "opacity": 1,
                "zIndex": 10,
                "properties": {
                    "content": "Transform Your App",
                    "fontFamily": "Inter",
                    "fontSize": 20,
                    "fontWeight": "700",
                    "color": "#FFFFFF",
                    "align": "center",
                    "lineHeight": 1.2,
                    "position": "top",
                    "anchorX": "center",
                },
            },
        ],
        "images": [],
        "exports": [
            {"name": 'iPhone 6.7"', "platform": "ios", "width": 1290, "height": 2796},
        ],
    }


@pytest.fixture
def sample_template_data(minimal_dark_config) -> dict:
    """Admin template creation payload."""
    return {
        "name": "minimal-dark",
        "platform": "both",
        "category": "minimal",
        "thumbnail": "/templates/minimal-dark.png",
        "json_config": copy.deepcopy(minimal_dark_config),
    }


@pytest.fixture
async def minimal_dark(catalog, minimal_dark_config) -> Template:
    """Stored active template."""
    return await catalog.create(
        Template(
            name="minimal-dark",
            platform="both",
            category="minimal",
            thumbnail="/templates/minimal-dark.png",
            json_config=copy.deepcopy(minimal_dark_config),
        )
    )
