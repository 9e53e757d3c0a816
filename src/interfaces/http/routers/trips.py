from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Depends, Response, status

from src.application.interfaces.unit_of_work import UnitOfWorkFactory
from src.application.use_cases.trips import (
    create_trip,
    delete_trip,
    get_trip,
    list_trips,
    update_trip,
)
from src.infrastructure.auth.context import AuthContext
from src.infrastructure.reports.report_service import ReportService, trip_filename
from src.interfaces.http.deps import get_auth_context, get_report_service, get_uow, get_uow_factory
from src.interfaces.http.responses import attachment
from src.interfaces.http.schemas.trips import (
    TripAnimalIn,
    TripCreate,
    TripDetailResponse,
    TripResponse,
    TripTotals,
    TripUpdate,
)

router = APIRouter(prefix="/trips", tags=["trips"])


def _animal_inputs(animals: list[TripAnimalIn]) -> list[create_trip.TripAnimalInput]:
    return [
        create_trip.TripAnimalInput(
            supplier_id=a.supplier_id,
            goats_count=a.goats_count,
            sheep_count=a.sheep_count,
            mark=a.mark,
        )
        for a in animals
    ]


@router.get("/", response_model=list[TripResponse])
async def list_all(
    include_totals: bool = False,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
    uow_factory: UnitOfWorkFactory = Depends(get_uow_factory),
):
    if not include_totals:
        trips = await list_trips.execute(uow)
        return [TripResponse.model_validate(t) for t in trips]
    items = await list_trips.execute_with_totals(uow, uow_factory)
    result = []
    for item in items:
        response = TripResponse.model_validate(item.trip)
        response.totals = TripTotals.model_validate(item.totals)
        result.append(response)
    return result


@router.post("/", response_model=TripDetailResponse, status_code=status.HTTP_201_CREATED)
async def create(
    payload: TripCreate,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
):
    data = payload.model_dump(exclude={"animals"})
    created = await create_trip.execute(
        uow,
        context.user_id,
        create_trip.CreateTripInput(**data, animals=_animal_inputs(payload.animals)),
    )
    return TripDetailResponse.model_validate(created)


@router.get("/{trip_id}", response_model=TripDetailResponse)
async def get_one(
    trip_id: UUID,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
):
    trip = await get_trip.execute(uow, trip_id)
    return TripDetailResponse.model_validate(trip)


@router.get("/{trip_id}/pdf")
async def download_manifest(
    trip_id: UUID,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
    reports: ReportService = Depends(get_report_service),
) -> Response:
    trip = await get_trip.execute(uow, trip_id)
    return attachment(reports.trip_manifest_pdf(trip), trip_filename(trip), "application/pdf")


@router.put("/{trip_id}", response_model=TripDetailResponse)
async def update(
    trip_id: UUID,
    payload: TripUpdate,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
):
    data = payload.model_dump(exclude_unset=True, exclude={"animals"})
    animals = _animal_inputs(payload.animals) if payload.animals is not None else None
    updated = await update_trip.execute(
        uow,
        context.user_id,
        trip_id,
        update_trip.UpdateTripInput(**data, animals=animals),
    )
    return TripDetailResponse.model_validate(updated)


@router.delete("/{trip_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete(
    trip_id: UUID,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
):
    await delete_trip.execute(uow, context.user_id, trip_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
