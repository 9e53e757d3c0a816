from __future__ import annotations

import os
import sys
import tempfile
from collections.abc import AsyncIterator
from pathlib import Path

import pytest
from httpx import ASGITransport, AsyncClient

# The module-level app in src.interfaces.http.main is built at import time
os.environ.setdefault(
    "LOCAL_STORE_PATH", str(Path(tempfile.mkdtemp(prefix="tanchoice-tests-")) / "store.json")
)
os.environ.setdefault("JWT_SECRET_KEY", "test-secret")

PROJECT_ROOT = Path(__file__).resolve().parents[1]
sys.path.append(str(PROJECT_ROOT))

# ruff: noqa: E402
from src.config.settings import Settings
from src.domain.models.user import User
from src.infrastructure.db.base import Base
from src.infrastructure.db.orm import supplier, trip, trip_animal, user  # noqa: F401
from src.interfaces.http.main import create_app

TEST_PASSWORD = "Secret123!"


def _settings(overrides: dict) -> Settings:
    return Settings.model_validate(
        {
            "jwt_secret_key": "test-secret",
            "log_level": "INFO",
            "environment": "test",
            **overrides,
        }
    )


@pytest.fixture()
def sql_settings(tmp_path) -> Settings:
    db_path = tmp_path / "test.db"
    return _settings(
        {"storage_backend": "sql", "database_url": f"sqlite+aiosqlite:///{db_path}"}
    )


@pytest.fixture()
def local_settings(tmp_path) -> Settings:
    return _settings(
        {"storage_backend": "local", "local_store_path": tmp_path / "store.json"}
    )


@pytest.fixture(params=["sql", "local"])
def backend(request) -> str:
    return request.param


@pytest.fixture()
def test_settings(backend: str, request) -> Settings:
    return request.getfixturevalue(f"{backend}_settings")


@pytest.fixture()
def app(test_settings: Settings):
    return create_app(settings=test_settings)


@pytest.fixture()
async def client(app) -> AsyncIterator[AsyncClient]:
    engine = getattr(app.state, "engine", None)
    if engine is not None:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)
            await conn.run_sync(Base.metadata.create_all)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as client:
        yield client
    if engine is not None:
        await engine.dispose()


async def create_user(app, email: str, password: str = TEST_PASSWORD) -> User:
    hasher = app.state.password_hasher
    async with app.state.uow_factory() as uow:
        created = await uow.users.add(User.create(email, hasher.hash(password)))
        await uow.commit()
    return created


async def sign_in(client: AsyncClient, email: str, password: str = TEST_PASSWORD) -> dict[str, str]:
    response = await client.post(
        "/api/v1/auth/signin", json={"email": email, "password": password}
    )
    assert response.status_code == 200, response.text
    return {"Authorization": f"Bearer {response.json()['access_token']}"}


@pytest.fixture()
async def auth_headers(app, client, test_settings: Settings) -> dict[str, str]:
    email = "clerk@tanchoice.test"
    if not test_settings.uses_local_store:
        await create_user(app, email)
    return await sign_in(client, email)


@pytest.fixture()
async def other_user_headers(app, client, test_settings: Settings) -> dict[str, str]:
    """A second signed-in staff member (SQL backend only)."""
    if test_settings.uses_local_store:
        pytest.skip("the offline session provider has a single demo user")
    email = "other@tanchoice.test"
    await create_user(app, email)
    return await sign_in(client, email)
