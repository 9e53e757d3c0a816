from __future__ import annotations

from typing import Any
from uuid import UUID

from src.application.interfaces.repositories.suppliers import SuppliersRepository
from src.domain.models.supplier import Supplier
from src.infrastructure.local_store.records import supplier_from_record, supplier_to_record

UPDATABLE_FIELDS = ("name", "phone", "region", "default_mark")


class SuppliersLocalRepository(SuppliersRepository):
    def __init__(self, data: dict[str, list[dict[str, Any]]]) -> None:
        self.data = data

    def _find(self, supplier_id: UUID) -> dict[str, Any] | None:
        key = str(supplier_id)
        return next((r for r in self.data["suppliers"] if r["id"] == key), None)

    async def add(self, supplier: Supplier) -> Supplier:
        self.data["suppliers"].append(supplier_to_record(supplier))
        return supplier

    async def get(self, supplier_id: UUID) -> Supplier | None:
        record = self._find(supplier_id)
        return supplier_from_record(record) if record else None

    async def list(self) -> list[Supplier]:
        suppliers = [supplier_from_record(r) for r in self.data["suppliers"]]
        return sorted(suppliers, key=lambda s: (s.name.lower(), s.name))

    async def update(self, supplier_id: UUID, data: dict[str, Any]) -> Supplier | None:
        record = self._find(supplier_id)
        if record is None:
            return None
        for key, value in data.items():
            if key in UPDATABLE_FIELDS:
                record[key] = value
        return supplier_from_record(record)

    async def delete(self, supplier_id: UUID) -> bool:
        key = str(supplier_id)
        before = len(self.data["suppliers"])
        self.data["suppliers"] = [r for r in self.data["suppliers"] if r["id"] != key]
        self.data["tripAnimals"] = [
            r for r in self.data["tripAnimals"] if r["supplier_id"] != key
        ]
        return len(self.data["suppliers"]) < before

    async def list_regions(self) -> list[str]:
        return sorted({r["region"] for r in self.data["suppliers"] if r.get("region")})
