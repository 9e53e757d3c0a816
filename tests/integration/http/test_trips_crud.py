from __future__ import annotations


async def _supplier(client, headers, name: str, **extra) -> str:
    response = await client.post("/api/v1/suppliers/", json={"name": name, **extra}, headers=headers)
    assert response.status_code == 201
    return response.json()["id"]


def _trip_payload(*animals: dict, **overrides) -> dict:
    payload = {
        "date": "2024-03-05",
        "region": "Manyara",
        "truck_no": "T 123 ABC",
        "form_no": "F-001",
        "driver_name": "Juma",
        "escort_name": "Neema",
        "prepared_by_name": "Asha",
        "prepared_by_position": "Clerk",
        "animals": list(animals),
    }
    payload.update(overrides)
    return payload


async def test_trip_create_fetch_and_totals(client, auth_headers):
    s1 = await _supplier(client, auth_headers, "Mbulu Traders", default_mark="MB")
    s2 = await _supplier(client, auth_headers, "Hanang Goats")

    response = await client.post(
        "/api/v1/trips/",
        json=_trip_payload(
            {"supplier_id": s1, "goats_count": 3, "sheep_count": 2},
            {"supplier_id": s2, "goats_count": 1, "sheep_count": 0, "mark": "HX"},
        ),
        headers=auth_headers,
    )
    assert response.status_code == 201
    trip = response.json()
    assert [a["total_animals"] for a in trip["animals"]] == [5, 1]
    # Missing mark falls back to the supplier default
    assert [a["mark"] for a in trip["animals"]] == ["MB", "HX"]
    assert trip["animals"][0]["supplier"]["name"] == "Mbulu Traders"
    assert (trip["total_goats"], trip["total_sheep"], trip["total_animals"]) == (4, 2, 6)

    fetched = await client.get(f"/api/v1/trips/{trip['id']}", headers=auth_headers)
    assert fetched.status_code == 200
    assert [a["id"] for a in fetched.json()["animals"]] == [a["id"] for a in trip["animals"]]

    listed = await client.get("/api/v1/trips/?include_totals=true", headers=auth_headers)
    assert listed.status_code == 200
    item = next(t for t in listed.json() if t["id"] == trip["id"])
    assert item["totals"] == {"goats": 4, "sheep": 2, "total": 6}

    plain = await client.get("/api/v1/trips/", headers=auth_headers)
    assert plain.json()[0]["totals"] is None


async def test_trip_validation_errors(client, auth_headers):
    s1 = await _supplier(client, auth_headers, "Kiteto Sheep")

    no_rows = await client.post("/api/v1/trips/", json=_trip_payload(), headers=auth_headers)
    assert no_rows.status_code == 422
    assert no_rows.json()["message"] == "At least one supplier line item is required"

    no_supplier = await client.post(
        "/api/v1/trips/",
        json=_trip_payload({"goats_count": 1}),
        headers=auth_headers,
    )
    assert no_supplier.status_code == 422
    assert no_supplier.json()["details"] == {"row": 1}

    blank_driver = await client.post(
        "/api/v1/trips/",
        json=_trip_payload({"supplier_id": s1, "goats_count": 1}, driver_name=" "),
        headers=auth_headers,
    )
    assert blank_driver.status_code == 422
    assert blank_driver.json()["details"] == {"fields": ["driver_name"]}

    negative = await client.post(
        "/api/v1/trips/",
        json=_trip_payload({"supplier_id": s1, "goats_count": -1}),
        headers=auth_headers,
    )
    assert negative.status_code == 422


async def test_trip_update_replaces_line_items(client, auth_headers):
    s1 = await _supplier(client, auth_headers, "Babati Flock")
    s2 = await _supplier(client, auth_headers, "Kondoa Goats")
    created = await client.post(
        "/api/v1/trips/",
        json=_trip_payload(
            {"supplier_id": s1, "goats_count": 3, "sheep_count": 2},
            {"supplier_id": s2, "goats_count": 1},
        ),
        headers=auth_headers,
    )
    trip_id = created.json()["id"]
    old_ids = {a["id"] for a in created.json()["animals"]}

    response = await client.put(
        f"/api/v1/trips/{trip_id}",
        json={"truck_no": "T 999 XYZ", "animals": [{"supplier_id": s1, "sheep_count": 1}]},
        headers=auth_headers,
    )
    assert response.status_code == 200
    assert response.json()["truck_no"] == "T 999 XYZ"

    fetched = (await client.get(f"/api/v1/trips/{trip_id}", headers=auth_headers)).json()
    assert len(fetched["animals"]) == 1
    animal = fetched["animals"][0]
    assert animal["id"] not in old_ids
    assert (animal["goats_count"], animal["sheep_count"], animal["total_animals"]) == (0, 1, 1)
    assert fetched["form_no"] == "F-001"


async def test_trip_delete_and_manifest_pdf(client, auth_headers):
    s1 = await _supplier(client, auth_headers, "Mto wa Mbu Traders")
    created = await client.post(
        "/api/v1/trips/",
        json=_trip_payload({"supplier_id": s1, "goats_count": 7}, form_no="F-042"),
        headers=auth_headers,
    )
    trip_id = created.json()["id"]

    pdf = await client.get(f"/api/v1/trips/{trip_id}/pdf", headers=auth_headers)
    assert pdf.status_code == 200
    assert pdf.headers["content-type"] == "application/pdf"
    assert 'filename="Trip-F-042.pdf"' in pdf.headers["content-disposition"]
    assert pdf.content.startswith(b"%PDF")

    deleted = await client.delete(f"/api/v1/trips/{trip_id}", headers=auth_headers)
    assert deleted.status_code == 204
    missing = await client.get(f"/api/v1/trips/{trip_id}", headers=auth_headers)
    assert missing.status_code == 404
