from __future__ import annotations

import pytest

from src.infrastructure.db.orm.supplier import SupplierORM
from src.infrastructure.db.orm.trip import TripORM
from src.infrastructure.db.orm.trip_animal import TripAnimalORM


@pytest.fixture()
def backend() -> str:
    return "sql"


async def _drop(app, *tables) -> None:
    async with app.state.engine.begin() as conn:
        for table in tables:
            await conn.run_sync(table.drop)


async def test_unreadable_suppliers_table_is_a_store_error(app, client, auth_headers):
    await _drop(app, SupplierORM.__table__)

    response = await client.get("/api/v1/suppliers/", headers=auth_headers)
    assert response.status_code == 503
    assert response.json()["code"] == "store_error"

    regions = await client.get("/api/v1/reports/regions", headers=auth_headers)
    assert regions.status_code == 503


async def test_report_query_failure_is_a_store_error(app, client, auth_headers):
    await _drop(app, TripAnimalORM.__table__, TripORM.__table__)

    response = await client.get(
        "/api/v1/reports/suppliers",
        params={"date_from": "2024-03-01", "date_to": "2024-03-31"},
        headers=auth_headers,
    )
    assert response.status_code == 503
    assert response.json()["code"] == "store_error"

    trips = await client.get("/api/v1/trips/", headers=auth_headers)
    assert trips.status_code == 503
