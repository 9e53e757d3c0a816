from __future__ import annotations

from dataclasses import dataclass
from uuid import UUID

from src.application.interfaces.session_provider import Session


@dataclass(slots=True)
class AuthContext:
    user_id: UUID
    email: str
    access_token: str

    @classmethod
    def from_session(cls, session: Session) -> AuthContext:
        return cls(
            user_id=session.user.id,
            email=session.user.email,
            access_token=session.access_token,
        )
