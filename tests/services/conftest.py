"""Service test fixtures — fresh registries + FastAPI test client.

Invariants:
    - Every test gets empty chat and schedule registries
    - Registry dependencies overridden so routes and tests share the same instances

Design Decisions:
    - httpx ASGITransport does not run the lifespan, so registries are
      created here instead of by init_registries()
"""

import pytest
from httpx import ASGITransport, AsyncClient

from session_titles.api.dependencies import get_chat_registry, get_schedule_registry
from session_titles.main import app
from session_titles.services.chat_registry import ChatRegistry
from session_titles.services.schedule_registry import ScheduleRegistry


@pytest.fixture
def chat_registry():
    return ChatRegistry()


@pytest.fixture
def schedule_registry():
    return ScheduleRegistry()


@pytest.fixture
async def client(chat_registry, schedule_registry):
    """FastAPI test client with registry dependencies overridden."""
    app.dependency_overrides[get_chat_registry] = lambda: chat_registry
    app.dependency_overrides[get_schedule_registry] = lambda: schedule_registry

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
