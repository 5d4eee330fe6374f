# tests/conftest.py
import pytest
from httpx import AsyncClient, ASGITransport
from mongomock_motor import AsyncMongoMockClient

from careerconnect.core.config import Settings
from careerconnect.main import create_app


@pytest.fixture
def settings(tmp_path):
    return Settings(
        _env_file=None,
        MONGODB_URI="mongodb://localhost:27017/careerConnect",
        UPLOAD_DIR=str(tmp_path / "uploads"),
    )


@pytest.fixture
def app(settings):
    return create_app(settings, client=AsyncMongoMockClient(tz_aware=True))


@pytest.fixture
def store(app):
    return app.state.store


@pytest.fixture
async def client(app):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as ac:
        yield ac
