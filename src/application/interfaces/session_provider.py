from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Protocol
from uuid import UUID


@dataclass(slots=True, frozen=True)
class SessionUser:
    id: UUID
    email: str


@dataclass(slots=True, frozen=True)
class Session:
    access_token: str
    token_type: str
    user: SessionUser
    expires_at: datetime | None = None


class SessionProvider(Protocol):
    async def sign_in(self, email: str, password: str) -> Session: ...

    async def sign_out(self, token: str) -> None: ...

    async def get_current_session(self, token: str) -> Session | None: ...

    async def get_current_user(self, token: str) -> SessionUser | None: ...
