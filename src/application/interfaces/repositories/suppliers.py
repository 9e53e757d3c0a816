from __future__ import annotations

from typing import Any, Protocol
from uuid import UUID

from src.domain.models.supplier import Supplier


class SuppliersRepository(Protocol):
    async def add(self, supplier: Supplier) -> Supplier: ...

    async def get(self, supplier_id: UUID) -> Supplier | None: ...

    async def list(self) -> list[Supplier]: ...

    async def update(self, supplier_id: UUID, data: dict[str, Any]) -> Supplier | None: ...

    # Also removes every trip line item referencing the supplier
    async def delete(self, supplier_id: UUID) -> bool: ...

    async def list_regions(self) -> list[str]: ...
