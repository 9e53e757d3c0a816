from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field


class SignInRequest(BaseModel):
    email: str = Field(default="", max_length=320)
    password: str = ""


class SessionUserResponse(BaseModel):
    id: UUID
    email: str


class SessionResponse(BaseModel):
    access_token: str
    token_type: str
    expires_at: datetime | None = None
    user: SessionUserResponse


class SignOutResponse(BaseModel):
    signed_out: bool = True


class MeResponse(BaseModel):
    user_id: UUID
    email: str
