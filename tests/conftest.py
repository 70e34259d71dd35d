"""Root conftest - shared test configuration.

Invariants:
    - Every route test gets a freshly composed app with zero simulated delay
    - Clients talk to the app in-process through httpx ASGITransport
"""

import pytest
from httpx import ASGITransport, AsyncClient

from monoflux.config import Settings
from monoflux.main import create_app
from monoflux.services.product_service import ProductService
from monoflux.services.user_service import UserService


@pytest.fixture
def settings():
    return Settings(user_fetch_delay_ms=0, _env_file=None)


@pytest.fixture
def user_service():
    return UserService(fetch_delay_seconds=0)


@pytest.fixture
def product_service():
    return ProductService()


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
async def client(app):
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
