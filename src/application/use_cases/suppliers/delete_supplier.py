from __future__ import annotations

from uuid import UUID

from src.application.errors import NotFound
from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.use_cases.ownership import ensure_owner


async def execute(uow: UnitOfWork, actor_user_id: UUID | None, supplier_id: UUID) -> None:
    """Delete a supplier together with every trip line item that references it."""
    existing = await uow.suppliers.get(supplier_id)
    if not existing:
        raise NotFound("Supplier not found")
    ensure_owner(existing.user_id, actor_user_id, "Supplier")
    deleted = await uow.suppliers.delete(supplier_id)
    if not deleted:
        raise NotFound("Supplier not found")
    await uow.commit()
