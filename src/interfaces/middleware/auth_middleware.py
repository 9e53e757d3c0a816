from __future__ import annotations

from typing import Iterable

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import JSONResponse, Response

from src.application.errors import AppError, AuthError
from src.infrastructure.auth.context import AuthContext

PUBLIC_PATHS: Iterable[str] = (
    "/api/v1/health",
    "/api/v1/auth/signin",
    "/docs",
    "/openapi.json",
    "/redoc",
)


def bearer_token(request: Request) -> str:
    authorization = request.headers.get("Authorization")
    if not authorization:
        raise AuthError("Missing Authorization header")
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token:
        raise AuthError("Invalid Authorization header")
    return token


class AuthMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next) -> Response:
        # Let CORS preflight pass without auth checks
        if request.method == "OPTIONS":
            return await call_next(request)
        if any(request.url.path.startswith(path) for path in PUBLIC_PATHS):
            return await call_next(request)

        try:
            token = bearer_token(request)
            provider = getattr(request.app.state, "session_provider", None)
            if provider is None:
                raise RuntimeError("Session provider not configured")
            session = await provider.get_current_session(token)
            if session is None:
                raise AuthError("Session expired or signed out")
            request.state.auth_context = AuthContext.from_session(session)
            return await call_next(request)
        except AppError as exc:
            payload = {"code": exc.code, "message": exc.message}
            if exc.details is not None:
                payload["details"] = exc.details
            return JSONResponse(status_code=exc.status_code, content=payload)
