from __future__ import annotations

from dataclasses import dataclass
from uuid import UUID

from src.application.errors import ValidationError
from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.supplier import Supplier


@dataclass(slots=True)
class CreateSupplierInput:
    name: str
    phone: str | None = None
    region: str | None = None
    default_mark: str | None = None


def _clean(value: str | None) -> str | None:
    if value is None:
        return None
    value = value.strip()
    return value or None


async def execute(
    uow: UnitOfWork,
    actor_user_id: UUID | None,
    payload: CreateSupplierInput,
) -> Supplier:
    name = payload.name.strip() if payload.name else ""
    if not name:
        raise ValidationError("Supplier name is required")
    supplier = Supplier.create(
        name=name,
        phone=_clean(payload.phone),
        region=_clean(payload.region),
        default_mark=_clean(payload.default_mark),
        user_id=actor_user_id,
    )
    created = await uow.suppliers.add(supplier)
    await uow.commit()
    return created
