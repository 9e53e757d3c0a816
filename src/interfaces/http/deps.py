from __future__ import annotations

from collections.abc import AsyncIterator

from fastapi import Request

from src.application.errors import AuthError
from src.application.interfaces.session_provider import SessionProvider
from src.application.interfaces.unit_of_work import UnitOfWork, UnitOfWorkFactory
from src.config.settings import Settings, get_settings
from src.infrastructure.auth.context import AuthContext
from src.infrastructure.reports.report_service import ReportService


async def get_auth_context(request: Request) -> AuthContext:
    context = getattr(request.state, "auth_context", None)
    if context is None:
        raise AuthError("Authentication required")
    return context


def get_uow_factory(request: Request) -> UnitOfWorkFactory:
    factory = getattr(request.app.state, "uow_factory", None)
    if factory is None:
        raise RuntimeError("Unit of work factory not configured")
    return factory


async def get_uow(request: Request) -> AsyncIterator[UnitOfWork]:
    uow = get_uow_factory(request)()
    async with uow:
        yield uow


def get_app_settings(request: Request) -> Settings:
    return getattr(request.app.state, "settings", None) or get_settings()


def get_session_provider(request: Request) -> SessionProvider:
    provider = getattr(request.app.state, "session_provider", None)
    if provider is None:
        raise RuntimeError("Session provider not configured")
    return provider


def get_report_service(request: Request) -> ReportService:
    service = getattr(request.app.state, "report_service", None)
    if service is None:
        raise RuntimeError("Report service not configured")
    return service
