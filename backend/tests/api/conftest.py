"""Route test fixtures — FastAPI app wired to an in-memory store.

Invariants:
    - Every test gets a fresh app and a fresh FakePredictorStore
    - get_predictor_repository overridden; app.state also holds the fake for probes
    - Lifespan never runs: ASGITransport does not send lifespan events,
      so no connection to a document store is attempted
"""

import pytest
from httpx import ASGITransport, AsyncClient

from predictor_api.api.dependencies import get_predictor_repository
from predictor_api.config import Settings
from predictor_api.main import create_app

from tests.api.fake_store import FakePredictorStore


@pytest.fixture
def fake_store():
    return FakePredictorStore()


@pytest.fixture
def test_app(fake_store):
    app = create_app(Settings(log_format="text"))
    app.dependency_overrides[get_predictor_repository] = lambda: fake_store
    app.state.predictor_store = fake_store
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
async def client(test_app):
    """FastAPI test client with the repository dependency overridden."""
    async with AsyncClient(
        transport=ASGITransport(app=test_app), base_url="http://test",
    ) as c:
        yield c
