from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from uuid import UUID

from src.application.interfaces.unit_of_work import UnitOfWork, UnitOfWorkFactory
from src.domain.models.report import ReportTotals
from src.domain.models.trip import Trip

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class TripWithTotals:
    trip: Trip
    totals: ReportTotals


async def execute(uow: UnitOfWork) -> list[Trip]:
    """Trips ordered by date, newest first, without line items."""
    return await uow.trips.list()


async def _load_totals(uow_factory: UnitOfWorkFactory, trip_id: UUID) -> ReportTotals:
    try:
        async with uow_factory() as uow:
            trip = await uow.trips.get(trip_id)
    except Exception as exc:
        logger.warning("Could not load trip %s for list totals: %s", trip_id, exc)
        return ReportTotals()
    if trip is None:
        return ReportTotals()
    return ReportTotals(goats=trip.total_goats, sheep=trip.total_sheep, total=trip.total_animals)


async def execute_with_totals(
    uow: UnitOfWork, uow_factory: UnitOfWorkFactory
) -> list[TripWithTotals]:
    """List trips and compute per-trip totals.

    Each trip's detail is read concurrently in its own unit of work; a failed
    read degrades that trip to zero totals instead of failing the listing.
    """
    trips = await uow.trips.list()
    totals = await asyncio.gather(*(_load_totals(uow_factory, trip.id) for trip in trips))
    return [TripWithTotals(trip=trip, totals=t) for trip, t in zip(trips, totals)]
