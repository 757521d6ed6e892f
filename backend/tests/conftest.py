"""Root conftest — shared settings and an in-process client per test.

Invariants:
    - Every test builds its own app via create_app(); no shared app state
    - Settings never read a developer's .env file
    - Upstream traffic only through respx (real network never reached)
"""

import pytest
from httpx import ASGITransport, AsyncClient

from iqc_proxy.config import Settings
from iqc_proxy.main import create_app

UPSTREAM_URL = "https://script.google.com/macros/s/test-deployment/exec"


def _settings(**overrides) -> Settings:
    values = {"upstream_base_url": UPSTREAM_URL, "log_format": "text"}
    values.update(overrides)
    return Settings(_env_file=None, **values)


@pytest.fixture
def upstream_url():
    return UPSTREAM_URL


@pytest.fixture
def make_client():
    """Build a test client around an app with overridden settings.

    ASGITransport is not intercepted by respx, so only upstream calls are mocked.
    """
    def _make(**overrides) -> AsyncClient:
        app = create_app(_settings(**overrides))
        return AsyncClient(
            transport=ASGITransport(app=app), base_url="http://test",
        )
    return _make


@pytest.fixture
async def client(make_client):
    async with make_client() as c:
        yield c


@pytest.fixture
async def unconfigured_client(make_client):
    """Client whose app has no upstream URL configured."""
    async with make_client(upstream_base_url="") as c:
        yield c
