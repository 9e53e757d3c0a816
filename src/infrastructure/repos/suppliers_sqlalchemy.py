from __future__ import annotations

from typing import Any
from uuid import UUID

from sqlalchemy import delete, func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from src.application.errors import StoreError
from src.application.interfaces.repositories.suppliers import SuppliersRepository
from src.domain.models.supplier import Supplier
from src.infrastructure.db.orm.supplier import SupplierORM
from src.infrastructure.db.orm.trip_animal import TripAnimalORM

UPDATABLE_FIELDS = ("name", "phone", "region", "default_mark")


def supplier_to_domain(orm: SupplierORM) -> Supplier:
    return Supplier(
        id=orm.id,
        name=orm.name,
        phone=orm.phone,
        region=orm.region,
        default_mark=orm.default_mark,
        user_id=orm.user_id,
        created_at=orm.created_at,
    )


class SuppliersSQLAlchemyRepository(SuppliersRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def _flush(self) -> None:
        try:
            await self.session.flush()
        except SQLAlchemyError as exc:
            raise StoreError("Failed to write supplier") from exc

    async def _execute(self, stmt):
        try:
            return await self.session.execute(stmt)
        except SQLAlchemyError as exc:
            raise StoreError("Failed to query suppliers") from exc

    async def _get_orm(self, supplier_id: UUID) -> SupplierORM | None:
        stmt = select(SupplierORM).where(SupplierORM.id == supplier_id)
        result = await self._execute(stmt)
        return result.scalar_one_or_none()

    async def add(self, supplier: Supplier) -> Supplier:
        orm = SupplierORM(
            id=supplier.id,
            name=supplier.name,
            phone=supplier.phone,
            region=supplier.region,
            default_mark=supplier.default_mark,
            user_id=supplier.user_id,
            created_at=supplier.created_at,
        )
        self.session.add(orm)
        await self._flush()
        return supplier_to_domain(orm)

    async def get(self, supplier_id: UUID) -> Supplier | None:
        orm = await self._get_orm(supplier_id)
        return supplier_to_domain(orm) if orm else None

    async def list(self) -> list[Supplier]:
        stmt = select(SupplierORM).order_by(func.lower(SupplierORM.name), SupplierORM.name)
        result = await self._execute(stmt)
        return [supplier_to_domain(r) for r in result.scalars().all()]

    async def update(self, supplier_id: UUID, data: dict[str, Any]) -> Supplier | None:
        orm = await self._get_orm(supplier_id)
        if orm is None:
            return None
        for key, value in data.items():
            if key in UPDATABLE_FIELDS:
                setattr(orm, key, value)
        await self._flush()
        return supplier_to_domain(orm)

    async def delete(self, supplier_id: UUID) -> bool:
        await self._execute(
            delete(TripAnimalORM).where(TripAnimalORM.supplier_id == supplier_id)
        )
        result = await self._execute(
            delete(SupplierORM).where(SupplierORM.id == supplier_id)
        )
        await self._flush()
        return bool(result.rowcount)

    async def list_regions(self) -> list[str]:
        stmt = (
            select(SupplierORM.region)
            .where(SupplierORM.region.is_not(None), SupplierORM.region != "")
            .distinct()
            .order_by(SupplierORM.region)
        )
        result = await self._execute(stmt)
        return [r for r in result.scalars().all()]
