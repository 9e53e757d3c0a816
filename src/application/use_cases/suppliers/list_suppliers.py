from __future__ import annotations

from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.supplier import Supplier


async def execute(uow: UnitOfWork) -> list[Supplier]:
    """Suppliers ordered by name."""
    return await uow.suppliers.list()


async def list_regions(uow: UnitOfWork) -> list[str]:
    """Distinct supplier regions, used to populate report filters."""
    return await uow.suppliers.list_regions()
