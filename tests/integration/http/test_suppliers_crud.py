from __future__ import annotations


async def test_suppliers_crud_flow(client, auth_headers):
    payload = {
        "name": "Singida Flock Co",
        "phone": "+255 700 000 001",
        "region": "Singida",
        "default_mark": "SF",
    }
    create_response = await client.post("/api/v1/suppliers/", json=payload, headers=auth_headers)
    assert create_response.status_code == 201
    created = create_response.json()
    supplier_id = created["id"]
    assert created["default_mark"] == "SF"

    list_response = await client.get("/api/v1/suppliers/", headers=auth_headers)
    assert list_response.status_code == 200
    names = [s["name"] for s in list_response.json()]
    assert "Singida Flock Co" in names
    assert names == sorted(names, key=lambda n: (n.lower(), n))

    update_response = await client.put(
        f"/api/v1/suppliers/{supplier_id}",
        json={"phone": "", "region": "Dodoma"},
        headers=auth_headers,
    )
    assert update_response.status_code == 200
    updated = update_response.json()
    assert updated["phone"] is None
    assert updated["region"] == "Dodoma"
    assert updated["name"] == "Singida Flock Co"

    regions = await client.get("/api/v1/reports/regions", headers=auth_headers)
    assert regions.status_code == 200
    assert "Dodoma" in regions.json()["regions"]

    delete_response = await client.delete(f"/api/v1/suppliers/{supplier_id}", headers=auth_headers)
    assert delete_response.status_code == 204

    missing = await client.get(f"/api/v1/suppliers/{supplier_id}", headers=auth_headers)
    assert missing.status_code == 404
    assert missing.json()["code"] == "not_found"


async def test_supplier_name_is_required(client, auth_headers):
    blank = await client.post("/api/v1/suppliers/", json={"name": "   "}, headers=auth_headers)
    assert blank.status_code == 422
    assert blank.json()["message"] == "Supplier name is required"


async def test_suppliers_are_listed_case_insensitively(client, auth_headers):
    for name in ("Zebra Traders", "acacia Herders", "Babati Flock"):
        created = await client.post("/api/v1/suppliers/", json={"name": name}, headers=auth_headers)
        assert created.status_code == 201

    response = await client.get("/api/v1/suppliers/", headers=auth_headers)
    names = [s["name"] for s in response.json()]
    ours = [n for n in names if n in {"Zebra Traders", "acacia Herders", "Babati Flock"}]
    assert ours == ["acacia Herders", "Babati Flock", "Zebra Traders"]
