import sys
from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest
from httpx import ASGITransport, AsyncClient

# Ensure project's `back` package is importable
tests_dir = Path(__file__).resolve().parent
project_back = str(tests_dir.parent)
if project_back not in sys.path:
    sys.path.insert(0, project_back)

from app.core.container import Container
from app.core.settings import Settings
from app.services.ping_store import PingStore

TEST_TOKEN = "secret"


class FakeClock:
    """Часы для тестов: каждый вызов сдвигает время на step."""

    def __init__(self, start: datetime, step: timedelta = timedelta(seconds=1)):
        self.current = start
        self.step = step

    def __call__(self) -> datetime:
        now = self.current
        self.current = self.current + self.step
        return now


@pytest.fixture
def settings():
    return Settings(OPERATOR_TOKEN=TEST_TOKEN, PING_CAPACITY=8)


@pytest.fixture
def clock():
    return FakeClock(datetime(2026, 1, 1, 12, 0, 0, tzinfo=timezone.utc))


@pytest.fixture
def store(clock):
    return PingStore(capacity=8, clock=clock)


@pytest.fixture
def container(settings, store):
    container = Container()
    container.settings.override(settings)
    container.ping_store.override(store)
    yield container
    container.unwire()


@pytest.fixture
async def client(container):
    """Create test client"""
    from main import create_app

    app = create_app(container)
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client


@pytest.fixture
def auth_headers():
    """Return headers with operator token"""
    return {"Authorization": f"Bearer {TEST_TOKEN}"}
