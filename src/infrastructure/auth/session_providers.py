from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any
from uuid import NAMESPACE_URL, UUID, uuid5

from src.application.errors import AuthError
from src.application.interfaces.session_provider import Session, SessionProvider, SessionUser
from src.infrastructure.auth.jwt_service import JWTService
from src.infrastructure.auth.password import PasswordHasher
from src.infrastructure.local_store.storage import LocalStorage

logger = logging.getLogger(__name__)

MOCK_SESSION_KEY = "tanchoice_mock_session"
MOCK_USER_ID = uuid5(NAMESPACE_URL, "tanchoice:mock-user")
DEFAULT_MOCK_EMAIL = "demo@tanchoice.com"


def _session_from_claims(token: str, claims: dict[str, Any]) -> Session:
    return Session(
        access_token=token,
        token_type="bearer",
        user=SessionUser(id=UUID(str(claims["sub"])), email=claims.get("email") or ""),
        expires_at=datetime.fromtimestamp(claims["exp"], tz=timezone.utc),
    )


class DatabaseSessionProvider(SessionProvider):
    """Email/password sign-in against the users table, with signed bearer tokens.

    Signed-out tokens are remembered in-process until the process restarts.
    """

    def __init__(
        self,
        *,
        uow_factory,
        jwt_service: JWTService,
        password_hasher: PasswordHasher,
    ) -> None:
        self._uow_factory = uow_factory
        self._jwt = jwt_service
        self._hasher = password_hasher
        self._revoked: set[str] = set()

    async def sign_in(self, email: str, password: str) -> Session:
        async with self._uow_factory() as uow:
            user = await uow.users.get_by_email(email)
        hashed = user.hashed_password if user and user.is_active else None
        if not self._hasher.verify(password, hashed):
            raise AuthError("Invalid credentials")
        token, expires_at = self._jwt.create_access_token(subject=user.id, email=user.email)
        logger.info("User signed in: %s", user.id)
        return Session(
            access_token=token,
            token_type="bearer",
            user=SessionUser(id=user.id, email=user.email),
            expires_at=expires_at,
        )

    async def sign_out(self, token: str) -> None:
        claims = self._jwt.decode(token)
        self._revoked.add(claims["jti"])
        logger.info("User signed out: %s", claims["sub"])

    async def get_current_session(self, token: str) -> Session | None:
        try:
            claims = self._jwt.decode(token)
        except AuthError:
            return None
        if claims.get("jti") in self._revoked:
            return None
        async with self._uow_factory() as uow:
            user = await uow.users.get(UUID(str(claims["sub"])))
        if user is None or not user.is_active:
            return None
        return _session_from_claims(token, claims)

    async def get_current_user(self, token: str) -> SessionUser | None:
        session = await self.get_current_session(token)
        return session.user if session else None


class MockSessionProvider(SessionProvider):
    """Offline/demo sign-in: any credentials are accepted.

    One session at a time is kept in local storage; signing out clears it and
    invalidates its token.
    """

    def __init__(self, *, storage: LocalStorage, jwt_service: JWTService) -> None:
        self._storage = storage
        self._jwt = jwt_service

    async def sign_in(self, email: str, password: str) -> Session:
        email = (email or "").strip().lower() or DEFAULT_MOCK_EMAIL
        token, expires_at = self._jwt.create_access_token(subject=MOCK_USER_ID, email=email)
        self._storage.set_item(
            MOCK_SESSION_KEY,
            {"user": {"id": str(MOCK_USER_ID), "email": email}, "access_token": token},
        )
        logger.info("Mock session started for %s", email)
        return Session(
            access_token=token,
            token_type="bearer",
            user=SessionUser(id=MOCK_USER_ID, email=email),
            expires_at=expires_at,
        )

    async def sign_out(self, token: str) -> None:
        self._storage.remove_item(MOCK_SESSION_KEY)
        logger.info("Mock session cleared")

    async def get_current_session(self, token: str) -> Session | None:
        stored = self._storage.get_item(MOCK_SESSION_KEY)
        if not isinstance(stored, dict) or stored.get("access_token") != token:
            return None
        try:
            claims = self._jwt.decode(token)
        except AuthError:
            return None
        return _session_from_claims(token, claims)

    async def get_current_user(self, token: str) -> SessionUser | None:
        session = await self.get_current_session(token)
        return session.user if session else None
