"""Integration tests for the /api/room router."""

from unittest.mock import AsyncMock, patch

from httpx import AsyncClient

from app.services.database import Database, ExecuteResult

DELUXE = {"RoomNumber": "101", "Type": "Deluxe", "Price": 2500, "Status": "Available"}


async def _create(client: AsyncClient, **overrides) -> dict:
    resp = await client.post("/api/room", json={**DELUXE, **overrides})
    assert resp.status_code == 201
    return resp.json()["data"]


async def test_list_rooms(client):
    created = await _create(client)

    resp = await client.get("/api/room")

    assert resp.status_code == 200
    assert resp.json() == {"message": "All rooms", "data": [created]}


async def test_create_room(client):
    resp = await client.post("/api/room", json=DELUXE)

    assert resp.status_code == 201
    body = resp.json()
    assert body["message"] == "Room created"
    assert body["data"]["RoomID"] > 0
    assert body["data"]["RoomNumber"] == "101"
    assert body["data"]["Price"] == 2500


async def test_create_rejects_string_price(client):
    resp = await client.post("/api/room", json={**DELUXE, "Price": "2500"})

    assert resp.status_code == 400
    assert resp.json()["errors"] == [
        {"path": ["Price"], "message": "Expected number, received string"}
    ]


async def test_create_rejects_empty_room_number(client):
    resp = await client.post("/api/room", json={**DELUXE, "RoomNumber": ""})

    assert resp.status_code == 400
    assert resp.json()["errors"][0]["path"] == ["RoomNumber"]


async def test_get_room(client):
    created = await _create(client)

    resp = await client.get(f"/api/room/{created['RoomID']}")

    assert resp.json() == {"message": f"Room for ID: {created['RoomID']}", "data": created}


async def test_get_missing_room(client):
    resp = await client.get("/api/room/12")

    assert resp.status_code == 404
    assert resp.json() == {"message": "Room not found"}


async def test_update_replaces_room(client):
    created = await _create(client)
    replacement = {"RoomNumber": "102", "Type": "Suite", "Price": 4000, "Status": "Occupied"}

    resp = await client.put(f"/api/room/{created['RoomID']}", json=replacement)

    assert resp.status_code == 200
    assert resp.json() == {
        "message": "Room updated",
        "data": {"RoomID": created["RoomID"], **replacement},
    }


async def test_update_rejects_negative_price(client):
    created = await _create(client)

    resp = await client.put(
        f"/api/room/{created['RoomID']}",
        json={"RoomNumber": "101", "Type": "Deluxe", "Price": -5, "Status": "Available"},
    )

    assert resp.status_code == 400
    assert resp.json()["errors"] == [{"path": ["Price"], "message": "Price must be greater than 0"}]
    stored = await client.get(f"/api/room/{created['RoomID']}")
    assert stored.json()["data"] == created


async def test_update_missing_field_leaves_row(client):
    created = await _create(client)

    resp = await client.put(f"/api/room/{created['RoomID']}", json={"Status": "Cleaning"})

    assert resp.status_code == 400
    stored = await client.get(f"/api/room/{created['RoomID']}")
    assert stored.json()["data"]["Status"] == "Available"


async def test_update_missing_room(client):
    resp = await client.put("/api/room/77", json=DELUXE)

    assert resp.status_code == 404


async def test_ineffective_update_is_server_error(client):
    created = await _create(client)

    ineffective = AsyncMock(return_value=ExecuteResult(rows_affected=0))
    with patch.object(Database, "execute", ineffective):
        resp = await client.put(f"/api/room/{created['RoomID']}", json=DELUXE)

    assert resp.status_code == 500
    assert resp.json() == {"message": "Failed to update room"}


async def test_delete_room(client):
    created = await _create(client)

    resp = await client.delete(f"/api/room/{created['RoomID']}")

    assert resp.status_code == 200
    assert resp.json() == {"message": "Room deleted", "data": created}
    assert (await client.get(f"/api/room/{created['RoomID']}")).status_code == 404


async def test_delete_missing_room(client):
    await _create(client)

    resp = await client.delete("/api/room/55")

    assert resp.status_code == 404
    assert len((await client.get("/api/room")).json()["data"]) == 1


async def test_create_accepts_price_beyond_integer_range(client):
    resp = await client.post("/api/room", json={**DELUXE, "Price": 99999999999999999999999})

    assert resp.status_code == 201
    assert resp.json()["data"]["Price"] == float(99999999999999999999999)


async def test_update_accepts_price_beyond_integer_range(client):
    created = await _create(client)

    resp = await client.put(
        f"/api/room/{created['RoomID']}",
        json={**DELUXE, "Price": 99999999999999999999999},
    )

    assert resp.status_code == 200
    assert resp.json()["data"]["Price"] == float(99999999999999999999999)
