from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from functools import partial

from fastapi import APIRouter, Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.config.settings import Settings, get_settings
from src.infrastructure.auth.jwt_service import JWTService
from src.infrastructure.auth.password import PasswordHasher
from src.infrastructure.auth.session_providers import DatabaseSessionProvider, MockSessionProvider
from src.infrastructure.db.session import (
    SQLAlchemyUnitOfWork,
    create_engine,
    create_session_factory,
)
from src.infrastructure.local_store.snapshot import LocalStore
from src.infrastructure.local_store.storage import LocalStorage
from src.infrastructure.local_store.unit_of_work import LocalUnitOfWork
from src.infrastructure.reports.pdf_generator import PDFGenerator
from src.infrastructure.reports.report_service import ReportService
from src.interfaces.http.deps import get_app_settings
from src.interfaces.http.routers import auth as auth_router
from src.interfaces.http.routers import reports, suppliers, trips
from src.interfaces.middleware.auth_middleware import AuthMiddleware
from src.interfaces.middleware.error_handler import register_error_handlers

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    try:
        yield
    finally:
        engine = getattr(app.state, "engine", None)
        if engine is not None:
            await engine.dispose()


def _configure_logging(level_name: str) -> None:
    level = getattr(logging, level_name.upper(), logging.INFO)
    root = logging.getLogger()
    # Avoid adding duplicate handlers on reload
    if not any(isinstance(h, logging.StreamHandler) for h in root.handlers):
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            fmt="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        )
        handler.setFormatter(formatter)
        root.addHandler(handler)
    root.setLevel(level)
    # Align common libraries
    for name in ("uvicorn", "uvicorn.error", "uvicorn.access", "sqlalchemy.engine"):
        logging.getLogger(name).setLevel(level)


def _configure_storage(
    app: FastAPI,
    settings: Settings,
    jwt_service: JWTService,
    password_hasher: PasswordHasher,
) -> None:
    """Pick the persistence backend and its matching session provider."""
    if settings.uses_local_store:
        storage = LocalStorage(settings.local_store_path)
        store = LocalStore(storage)
        app.state.local_store = store
        app.state.uow_factory = partial(LocalUnitOfWork, store)
        app.state.session_provider = MockSessionProvider(storage=storage, jwt_service=jwt_service)
        logger.info("Using local store at %s", settings.local_store_path)
        return
    app.state.engine = create_engine(settings.database_url)
    app.state.session_factory = create_session_factory(app.state.engine)
    app.state.uow_factory = partial(SQLAlchemyUnitOfWork, app.state.session_factory)
    app.state.session_provider = DatabaseSessionProvider(
        uow_factory=app.state.uow_factory,
        jwt_service=jwt_service,
        password_hasher=password_hasher,
    )
    logger.info("Using SQL store")


def create_app(
    *,
    settings: Settings | None = None,
    password_hasher: PasswordHasher | None = None,
    jwt_service: JWTService | None = None,
) -> FastAPI:
    settings = settings or get_settings()
    _configure_logging(settings.log_level)
    app = FastAPI(
        title="Tanchoice Logistics Backend",
        version="0.1.0",
        description="Supplier, trip and livestock collection reports API",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.password_hasher = password_hasher or PasswordHasher()
    app.state.jwt_service = jwt_service or JWTService(
        secret_key=settings.jwt_secret_key.get_secret_value(),
        algorithm=settings.jwt_algorithm,
        access_token_expires_minutes=settings.jwt_access_token_expires_minutes,
        issuer=settings.jwt_issuer,
        audience=settings.jwt_audience,
    )
    _configure_storage(app, settings, app.state.jwt_service, app.state.password_hasher)
    app.state.report_service = ReportService(
        PDFGenerator(settings.organization_name, settings.organization_tagline)
    )
    register_error_handlers(app)

    # Group all API routes behind a single versioned prefix
    api = APIRouter(prefix="/api/v1")
    api.include_router(auth_router.router)
    api.include_router(suppliers.router)
    api.include_router(trips.router)
    api.include_router(reports.router)

    @api.get("/health", tags=["health"])
    async def health(current: Settings = Depends(get_app_settings)) -> dict[str, str]:
        return {"status": "ok", "storage_backend": current.storage_backend}

    app.include_router(api)

    # Add Auth first, then CORS last so CORS runs outermost and can handle preflight OPTIONS
    app.add_middleware(AuthMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    return app


app = create_app()
