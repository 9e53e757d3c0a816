from __future__ import annotations

from types import SimpleNamespace

import pytest

from src.application.errors import AuthError
from src.domain.models.user import User
from src.infrastructure.auth.jwt_service import JWTService
from src.infrastructure.auth.password import PasswordHasher
from src.infrastructure.auth.session_providers import (
    DEFAULT_MOCK_EMAIL,
    MOCK_SESSION_KEY,
    MOCK_USER_ID,
    DatabaseSessionProvider,
    MockSessionProvider,
)
from src.infrastructure.local_store.storage import LocalStorage


def _jwt() -> JWTService:
    return JWTService(secret_key="unit-secret", algorithm="HS256", access_token_expires_minutes=5)


class StubUsers:
    def __init__(self, *users: User) -> None:
        self.by_email = {u.email: u for u in users}
        self.by_id = {u.id: u for u in users}

    async def get_by_email(self, email):
        return self.by_email.get(email.strip().lower())

    async def get(self, user_id):
        return self.by_id.get(user_id)


def _uow_factory(users: StubUsers):
    class StubUow:
        async def __aenter__(self):
            return SimpleNamespace(users=users)

        async def __aexit__(self, exc_type, exc, tb):
            return None

    return StubUow


def test_jwt_round_trip_and_tampering():
    service = _jwt()
    user = User.create("a@b.test", "x")
    token, expires_at = service.create_access_token(subject=user.id, email=user.email)
    claims = service.decode(token)
    assert claims["sub"] == str(user.id)
    assert claims["email"] == "a@b.test"
    assert claims["exp"] == int(expires_at.timestamp())

    with pytest.raises(AuthError):
        service.decode(token + "x")
    with pytest.raises(AuthError):
        JWTService(
            secret_key="other", algorithm="HS256", access_token_expires_minutes=5
        ).decode(token)


@pytest.mark.asyncio
async def test_mock_provider_accepts_anything_and_signs_out(tmp_path):
    storage = LocalStorage(tmp_path / "store.json")
    provider = MockSessionProvider(storage=storage, jwt_service=_jwt())

    session = await provider.sign_in("", "")
    assert session.user.email == DEFAULT_MOCK_EMAIL
    assert session.user.id == MOCK_USER_ID
    assert storage.get_item(MOCK_SESSION_KEY)["access_token"] == session.access_token

    user = await provider.get_current_user(session.access_token)
    assert user is not None and user.email == DEFAULT_MOCK_EMAIL

    await provider.sign_out(session.access_token)
    assert storage.get_item(MOCK_SESSION_KEY) is None
    assert await provider.get_current_session(session.access_token) is None


@pytest.mark.asyncio
async def test_mock_provider_keeps_only_the_latest_session(tmp_path):
    provider = MockSessionProvider(storage=LocalStorage(tmp_path / "s.json"), jwt_service=_jwt())
    first = await provider.sign_in("one@tanchoice.test", "pw")
    second = await provider.sign_in("Two@Tanchoice.test", "pw")
    assert await provider.get_current_session(first.access_token) is None
    current = await provider.get_current_session(second.access_token)
    assert current.user.email == "two@tanchoice.test"


@pytest.mark.asyncio
async def test_database_provider_checks_password_and_revokes_on_sign_out():
    hasher = PasswordHasher()
    user = User.create("Clerk@Tanchoice.test", hasher.hash("pw-123"))
    provider = DatabaseSessionProvider(
        uow_factory=_uow_factory(StubUsers(user)),
        jwt_service=_jwt(),
        password_hasher=hasher,
    )

    with pytest.raises(AuthError):
        await provider.sign_in("clerk@tanchoice.test", "wrong")
    with pytest.raises(AuthError):
        await provider.sign_in("missing@tanchoice.test", "pw-123")

    session = await provider.sign_in("clerk@tanchoice.test", "pw-123")
    assert session.user.id == user.id
    assert (await provider.get_current_user(session.access_token)).email == "clerk@tanchoice.test"

    await provider.sign_out(session.access_token)
    assert await provider.get_current_session(session.access_token) is None


@pytest.mark.asyncio
async def test_database_provider_rejects_inactive_users():
    hasher = PasswordHasher()
    user = User.create("idle@tanchoice.test", hasher.hash("pw"), is_active=False)
    provider = DatabaseSessionProvider(
        uow_factory=_uow_factory(StubUsers(user)),
        jwt_service=_jwt(),
        password_hasher=hasher,
    )
    with pytest.raises(AuthError):
        await provider.sign_in("idle@tanchoice.test", "pw")
