from __future__ import annotations

from uuid import UUID

from src.application.errors import NotFound
from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.supplier import Supplier


async def execute(uow: UnitOfWork, supplier_id: UUID) -> Supplier:
    supplier = await uow.suppliers.get(supplier_id)
    if not supplier:
        raise NotFound("Supplier not found")
    return supplier
