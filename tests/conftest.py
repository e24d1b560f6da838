# File: tests/conftest.py
"""Pytest configuration and fixtures."""

import pytest
import pytest_asyncio
import structlog
from httpx import ASGITransport, AsyncClient
from structlog.testing import LogCapture

from gympilot.api.deps import get_gym
from gympilot.core.logging import configure_logging
from gympilot.core.secretary import Secretary
from gympilot.main import create_app
from gympilot.models import Gender, Instructor
from gympilot.models.gym import Gym
from tests.factories import NOW, InstructorFactory, PersonFactory


@pytest.fixture(scope="session", autouse=True)
def uncached_loggers():
    """Let tests reconfigure structlog after module loggers were first used."""
    configure_logging("DEBUG", cache_loggers=False)


@pytest.fixture
def log_events():
    """Captured structlog events, context vars (request_id) merged in."""
    capture = LogCapture()
    previous = structlog.get_config()
    structlog.configure(processors=[structlog.contextvars.merge_contextvars, capture])
    yield capture.entries
    structlog.configure(**previous)
    structlog.contextvars.clear_contextvars()


@pytest.fixture
def gym() -> Gym:
    """Fresh gym whose clock is frozen at NOW."""
    return Gym(name="Test Gym", clock=lambda: NOW)


@pytest.fixture
def secretary(gym: Gym) -> Secretary:
    """Active secretary appointed to the test gym."""
    person = PersonFactory.create(name="Sara Secretary", balance=0, gender=Gender.FEMALE, age=40)
    return gym.set_secretary(person, 3000)


@pytest.fixture
def instructor(gym: Gym, secretary: Secretary) -> Instructor:
    """Instructor certified for every session type."""
    return InstructorFactory.create(gym, name="Ivan Instructor", balance=0, gender=Gender.MALE)


@pytest_asyncio.fixture
async def client(gym: Gym, secretary: Secretary):
    """Async HTTP client bound to the test gym."""
    app = create_app()

    app.dependency_overrides[get_gym] = lambda: gym

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test"
    ) as ac:
        ac.gym = gym
        yield ac


@pytest_asyncio.fixture
async def unstaffed_client():
    """Async HTTP client for a gym that has no secretary yet."""
    app = create_app(Gym(name="Empty Gym", clock=lambda: NOW))

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test"
    ) as ac:
        yield ac
