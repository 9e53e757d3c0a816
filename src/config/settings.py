from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import SecretStr, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # sql | local; resolved from database_url when left unset
    storage_backend: Literal["sql", "local"] | None = None
    database_url: str | None = None
    local_store_path: Path = Path("tanchoice_store.json")
    log_level: str = "INFO"
    environment: str = "dev"
    jwt_secret_key: SecretStr = SecretStr("dev-only-secret-change-me")
    jwt_algorithm: str = "HS256"
    jwt_access_token_expires_minutes: int = 60 * 12
    jwt_issuer: str | None = None
    jwt_audience: str | None = None
    # CORS
    cors_allow_origins: str = "*"
    # Letterhead printed on every PDF
    organization_name: str = "TANCHOICE LIMITED"
    organization_tagline: str = "Simply Organic Meat"

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    @field_validator("database_url")
    @classmethod
    def ensure_asyncpg_scheme(cls, value: str | None) -> str | None:
        if not value:
            return None
        if value.startswith("postgres://"):
            return value.replace("postgres://", "postgresql+asyncpg://", 1)
        if value.startswith("postgresql://") and "+" not in value.split("://", 1)[0]:
            return value.replace("postgresql://", "postgresql+asyncpg://", 1)
        return value

    @model_validator(mode="after")
    def resolve_storage_backend(self) -> Settings:
        if self.storage_backend is None:
            self.storage_backend = "sql" if self.database_url else "local"
        if self.storage_backend == "sql" and not self.database_url:
            raise ValueError("DATABASE_URL is required when STORAGE_BACKEND=sql")
        return self

    @property
    def uses_local_store(self) -> bool:
        return self.storage_backend == "local"

    @property
    def cors_allow_origins_list(self) -> list[str]:
        """Convert cors_allow_origins string to list"""
        if isinstance(self.cors_allow_origins, str):
            return [v.strip() for v in self.cors_allow_origins.split(",") if v.strip()]
        return self.cors_allow_origins


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
