from __future__ import annotations

from datetime import date
from typing import Any
from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from src.application.errors import StoreError
from src.application.interfaces.repositories.trips import TripsRepository
from src.domain.models.report import SupplierReportRow
from src.domain.models.trip import Trip
from src.domain.models.trip_animal import TripAnimal
from src.infrastructure.db.orm.supplier import SupplierORM
from src.infrastructure.db.orm.trip import TripORM
from src.infrastructure.db.orm.trip_animal import TripAnimalORM
from src.infrastructure.repos.suppliers_sqlalchemy import supplier_to_domain

UPDATABLE_FIELDS = (
    "date",
    "region",
    "truck_no",
    "form_no",
    "driver_name",
    "escort_name",
    "prepared_by_name",
    "prepared_by_position",
)


class TripsSQLAlchemyRepository(TripsRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: TripORM, animals: list[TripAnimal] | None = None) -> Trip:
        return Trip(
            id=orm.id,
            date=orm.date,
            region=orm.region,
            truck_no=orm.truck_no,
            form_no=orm.form_no,
            driver_name=orm.driver_name,
            escort_name=orm.escort_name,
            prepared_by_name=orm.prepared_by_name,
            prepared_by_position=orm.prepared_by_position,
            user_id=orm.user_id,
            created_at=orm.created_at,
            animals=animals or [],
        )

    @staticmethod
    def _animal_to_domain(orm: TripAnimalORM, supplier: SupplierORM | None) -> TripAnimal:
        return TripAnimal(
            id=orm.id,
            trip_id=orm.trip_id,
            supplier_id=orm.supplier_id,
            mark=orm.mark,
            goats_count=orm.goats_count,
            sheep_count=orm.sheep_count,
            user_id=orm.user_id,
            created_at=orm.created_at,
            supplier=supplier_to_domain(supplier) if supplier else None,
        )

    @staticmethod
    def _animal_to_orm(animal: TripAnimal) -> TripAnimalORM:
        return TripAnimalORM(
            id=animal.id,
            trip_id=animal.trip_id,
            supplier_id=animal.supplier_id,
            mark=animal.mark,
            goats_count=animal.goats_count,
            sheep_count=animal.sheep_count,
            total_animals=animal.total_animals,
            user_id=animal.user_id,
            created_at=animal.created_at,
        )

    async def _flush(self) -> None:
        try:
            await self.session.flush()
        except SQLAlchemyError as exc:
            raise StoreError("Failed to write trip") from exc

    async def _execute(self, stmt):
        try:
            return await self.session.execute(stmt)
        except SQLAlchemyError as exc:
            raise StoreError("Failed to query trips") from exc

    async def _get_orm(self, trip_id: UUID) -> TripORM | None:
        result = await self._execute(select(TripORM).where(TripORM.id == trip_id))
        return result.scalar_one_or_none()

    async def _load_animals(self, trip_id: UUID) -> list[TripAnimal]:
        stmt = (
            select(TripAnimalORM, SupplierORM)
            .outerjoin(SupplierORM, SupplierORM.id == TripAnimalORM.supplier_id)
            .where(TripAnimalORM.trip_id == trip_id)
            .order_by(TripAnimalORM.created_at)
        )
        result = await self._execute(stmt)
        return [self._animal_to_domain(animal, supplier) for animal, supplier in result.all()]

    async def add(self, trip: Trip) -> Trip:
        orm = TripORM(
            id=trip.id,
            date=trip.date,
            region=trip.region,
            truck_no=trip.truck_no,
            form_no=trip.form_no,
            driver_name=trip.driver_name,
            escort_name=trip.escort_name,
            prepared_by_name=trip.prepared_by_name,
            prepared_by_position=trip.prepared_by_position,
            user_id=trip.user_id,
            created_at=trip.created_at,
        )
        self.session.add(orm)
        # Parent first so the foreign key is satisfied on flush
        await self._flush()
        self.session.add_all([self._animal_to_orm(a) for a in trip.animals])
        await self._flush()
        return self._to_domain(orm, await self._load_animals(trip.id))

    async def get(self, trip_id: UUID) -> Trip | None:
        orm = await self._get_orm(trip_id)
        if orm is None:
            return None
        return self._to_domain(orm, await self._load_animals(trip_id))

    async def list(self) -> list[Trip]:
        result = await self._execute(select(TripORM).order_by(TripORM.date.desc()))
        return [self._to_domain(r) for r in result.scalars().all()]

    async def update(
        self,
        trip_id: UUID,
        data: dict[str, Any],
        animals: list[TripAnimal] | None = None,
    ) -> Trip | None:
        orm = await self._get_orm(trip_id)
        if orm is None:
            return None
        for key, value in data.items():
            if key in UPDATABLE_FIELDS:
                setattr(orm, key, value)
        if animals is not None:
            # Both phases run in the unit of work's transaction
            await self._execute(
                delete(TripAnimalORM).where(TripAnimalORM.trip_id == trip_id)
            )
            self.session.add_all([self._animal_to_orm(a) for a in animals])
        await self._flush()
        return self._to_domain(orm, await self._load_animals(trip_id))

    async def delete(self, trip_id: UUID) -> bool:
        await self._execute(delete(TripAnimalORM).where(TripAnimalORM.trip_id == trip_id))
        result = await self._execute(delete(TripORM).where(TripORM.id == trip_id))
        await self._flush()
        return bool(result.rowcount)

    async def list_report_rows(
        self,
        date_from: date,
        date_to: date,
        *,
        region: str | None = None,
        supplier_id: UUID | None = None,
    ) -> list[SupplierReportRow]:
        stmt = (
            select(
                TripAnimalORM.supplier_id,
                TripAnimalORM.goats_count,
                TripAnimalORM.sheep_count,
                SupplierORM.name,
                TripORM.date,
                TripORM.region,
                TripORM.truck_no,
                TripORM.form_no,
            )
            .join(TripORM, TripORM.id == TripAnimalORM.trip_id)
            .outerjoin(SupplierORM, SupplierORM.id == TripAnimalORM.supplier_id)
            .where(TripORM.date >= date_from, TripORM.date <= date_to)
            .order_by(TripORM.date, TripAnimalORM.created_at)
        )
        if region:
            stmt = stmt.where(TripORM.region == region)
        if supplier_id is not None:
            stmt = stmt.where(TripAnimalORM.supplier_id == supplier_id)
        result = await self._execute(stmt)
        return [
            SupplierReportRow(
                supplier_id=row.supplier_id,
                supplier_name=row.name or "Unknown",
                goats_count=row.goats_count,
                sheep_count=row.sheep_count,
                trip_date=row.date,
                trip_region=row.region,
                truck_no=row.truck_no,
                form_no=row.form_no,
            )
            for row in result.all()
        ]
