"""Shared fixtures."""
import pytest
from httpx import ASGITransport, AsyncClient

from app.config import Settings
from app.main import create_app


@pytest.fixture
def settings() -> Settings:
    """Settings isolated from the developer's environment."""
    return Settings(_env_file=None, log_level="DEBUG")


@pytest.fixture
def app(settings: Settings):
    """A fresh application with an empty store."""
    return create_app(settings)


@pytest.fixture
async def client(app):
    """Create test client."""
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
