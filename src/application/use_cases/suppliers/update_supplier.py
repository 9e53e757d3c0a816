from __future__ import annotations

from dataclasses import dataclass
from uuid import UUID

from src.application.errors import NotFound, ValidationError
from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.use_cases.ownership import ensure_owner
from src.domain.models.supplier import Supplier


@dataclass(slots=True)
class UpdateSupplierInput:
    name: str | None = None
    phone: str | None = None
    region: str | None = None
    default_mark: str | None = None


async def execute(
    uow: UnitOfWork,
    actor_user_id: UUID | None,
    supplier_id: UUID,
    payload: UpdateSupplierInput,
) -> Supplier:
    existing = await uow.suppliers.get(supplier_id)
    if not existing:
        raise NotFound("Supplier not found")
    ensure_owner(existing.user_id, actor_user_id, "Supplier")

    data: dict = {}
    if payload.name is not None:
        name = payload.name.strip()
        if not name:
            raise ValidationError("Supplier name is required")
        data["name"] = name
    for field_name in ("phone", "region", "default_mark"):
        value = getattr(payload, field_name)
        if value is not None:
            # An empty string clears the optional field
            data[field_name] = value.strip() or None
    if not data:
        return existing
    updated = await uow.suppliers.update(supplier_id, data)
    if not updated:
        raise NotFound("Supplier not found")
    await uow.commit()
    return updated
