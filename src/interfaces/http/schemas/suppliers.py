from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class SupplierCreate(BaseModel):
    name: str = Field(min_length=1, max_length=200)
    phone: str | None = None
    region: str | None = None
    default_mark: str | None = None


class SupplierUpdate(BaseModel):
    name: str | None = Field(default=None, max_length=200)
    phone: str | None = None
    region: str | None = None
    default_mark: str | None = None


class SupplierResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    phone: str | None
    region: str | None
    default_mark: str | None
    user_id: UUID | None = None
    created_at: datetime


class RegionsResponse(BaseModel):
    regions: list[str]
