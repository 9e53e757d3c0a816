from __future__ import annotations

import logging

from fastapi import APIRouter, Depends

from src.application.errors import AuthError
from src.application.interfaces.session_provider import Session, SessionProvider
from src.infrastructure.auth.context import AuthContext
from src.interfaces.http.deps import get_auth_context, get_session_provider
from src.interfaces.http.schemas.auth import (
    MeResponse,
    SessionResponse,
    SessionUserResponse,
    SignInRequest,
    SignOutResponse,
)

router = APIRouter(prefix="", tags=["auth"])
logger = logging.getLogger(__name__)


def _session_response(session: Session) -> SessionResponse:
    return SessionResponse(
        access_token=session.access_token,
        token_type=session.token_type,
        expires_at=session.expires_at,
        user=SessionUserResponse(id=session.user.id, email=session.user.email),
    )


@router.post("/auth/signin", response_model=SessionResponse)
async def sign_in(
    payload: SignInRequest,
    provider: SessionProvider = Depends(get_session_provider),
) -> SessionResponse:
    session = await provider.sign_in(payload.email, payload.password)
    return _session_response(session)


@router.post("/auth/signout", response_model=SignOutResponse)
async def sign_out(
    context: AuthContext = Depends(get_auth_context),
    provider: SessionProvider = Depends(get_session_provider),
) -> SignOutResponse:
    await provider.sign_out(context.access_token)
    return SignOutResponse()


@router.get("/auth/session", response_model=SessionResponse)
async def current_session(
    context: AuthContext = Depends(get_auth_context),
    provider: SessionProvider = Depends(get_session_provider),
) -> SessionResponse:
    session = await provider.get_current_session(context.access_token)
    if session is None:
        raise AuthError("Session expired or signed out")
    return _session_response(session)


@router.get("/me", response_model=MeResponse)
async def read_me(context: AuthContext = Depends(get_auth_context)) -> MeResponse:
    return MeResponse(user_id=context.user_id, email=context.email)
