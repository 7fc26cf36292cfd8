"""
HTTP tests for /collections/{collection_id}/members.
"""

import pytest
import pytest_asyncio
import structlog

from encore.shared.services.collection_service import CollectionService


async def _create_collection(client, name="Friday Gig"):
    response = await client.post("/collections", json={"name": name})
    assert response.status_code == 201
    return response.json()["id"]


async def _create_item(client, title):
    response = await client.post("/items", json={"title": title, "body": f"{title} lyrics"})
    assert response.status_code == 201
    return response.json()["id"]


@pytest_asyncio.fixture
async def seeded(client):
    """A collection holding items A, B, C in that order."""
    collection_id = await _create_collection(client)
    item_ids = [await _create_item(client, title) for title in ("A", "B", "C")]
    for item_id in item_ids:
        response = await client.post(
            f"/collections/{collection_id}/members", json={"itemId": item_id}
        )
        assert response.status_code == 201
    return collection_id, item_ids


def _member_ids(response):
    return [member["id"] for member in response.json()]


# ═══════════════════════════════════════════════════════════════════════════════
# LIST / ADD
# ═══════════════════════════════════════════════════════════════════════════════


@pytest.mark.asyncio
async def test_add_member_returns_item_with_position(client):
    collection_id = await _create_collection(client)
    item_id = await _create_item(client, "Wonderwall")

    response = await client.post(f"/collections/{collection_id}/members", json={"itemId": item_id})

    assert response.status_code == 201
    data = response.json()
    assert data["id"] == item_id
    assert data["title"] == "Wonderwall"
    assert data["textAlign"] == "left"
    assert data["fontSize"] == "M"
    assert data["position"] == 0
    assert "addedAt" in data
    assert "createdAt" in data


@pytest.mark.asyncio
async def test_add_member_accepts_snake_case(client):
    collection_id = await _create_collection(client)
    item_id = await _create_item(client, "A")

    response = await client.post(f"/collections/{collection_id}/members", json={"item_id": item_id})

    assert response.status_code == 201


@pytest.mark.asyncio
async def test_list_members_in_order(client, seeded):
    collection_id, item_ids = seeded

    response = await client.get(f"/collections/{collection_id}/members")

    assert response.status_code == 200
    assert _member_ids(response) == item_ids
    assert [m["position"] for m in response.json()] == [0, 1, 2]


@pytest.mark.asyncio
async def test_add_member_twice_conflicts(client, seeded):
    collection_id, item_ids = seeded

    response = await client.post(
        f"/collections/{collection_id}/members", json={"itemId": item_ids[0]}
    )

    assert response.status_code == 409
    assert response.json()["error"]["code"] == "CONFLICT"
    listed = await client.get(f"/collections/{collection_id}/members")
    assert len(listed.json()) == 3


@pytest.mark.asyncio
async def test_add_member_unknown_collection(client):
    item_id = await _create_item(client, "A")

    response = await client.post("/collections/9999/members", json={"itemId": item_id})

    assert response.status_code == 404
    assert response.json()["error"]["code"] == "NOT_FOUND"


@pytest.mark.asyncio
async def test_add_member_unknown_item(client):
    collection_id = await _create_collection(client)

    response = await client.post(f"/collections/{collection_id}/members", json={"itemId": 9999})

    assert response.status_code == 404


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "body",
    [{}, {"itemId": 0}, {"itemId": -3}, {"itemId": "abc"}, {"itemId": 2**31}, {"itemId": 2**64}],
)
async def test_add_member_bad_payload(client, body):
    collection_id = await _create_collection(client)

    response = await client.post(f"/collections/{collection_id}/members", json=body)

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "VALIDATION_ERROR"


@pytest.mark.asyncio
@pytest.mark.parametrize("collection_id", ["abc", "0", "-1", str(2**31), str(2**64)])
async def test_list_members_bad_id(client, collection_id):
    response = await client.get(f"/collections/{collection_id}/members")

    assert response.status_code == 400


@pytest.mark.asyncio
async def test_list_members_unknown_collection(client):
    response = await client.get("/collections/9999/members")

    assert response.status_code == 404


# ═══════════════════════════════════════════════════════════════════════════════
# REMOVE
# ═══════════════════════════════════════════════════════════════════════════════


@pytest.mark.asyncio
async def test_remove_member(client, seeded):
    collection_id, (a, b, c) = seeded

    response = await client.delete(f"/collections/{collection_id}/members/{b}")

    assert response.status_code == 204
    assert response.content == b""
    listed = await client.get(f"/collections/{collection_id}/members")
    assert _member_ids(listed) == [a, c]


@pytest.mark.asyncio
async def test_remove_non_member(client):
    collection_id = await _create_collection(client)
    item_id = await _create_item(client, "A")

    response = await client.delete(f"/collections/{collection_id}/members/{item_id}")

    assert response.status_code == 404


@pytest.mark.asyncio
@pytest.mark.parametrize("item_id", ["0", str(2**31), str(2**64)])
async def test_remove_bad_item_id(client, seeded, item_id):
    collection_id, _ = seeded

    response = await client.delete(f"/collections/{collection_id}/members/{item_id}")

    assert response.status_code == 400


# ═══════════════════════════════════════════════════════════════════════════════
# REORDER
# ═══════════════════════════════════════════════════════════════════════════════


@pytest.mark.asyncio
async def test_reorder(client, seeded):
    collection_id, (a, b, c) = seeded
    payload = {
        "members": [
            {"itemId": c, "position": 0},
            {"itemId": a, "position": 1},
            {"itemId": b, "position": 2},
        ]
    }

    response = await client.put(f"/collections/{collection_id}/members/reorder", json=payload)

    assert response.status_code == 200
    assert _member_ids(response) == [c, a, b]
    assert [m["position"] for m in response.json()] == [0, 1, 2]
    listed = await client.get(f"/collections/{collection_id}/members")
    assert _member_ids(listed) == [c, a, b]


@pytest.mark.asyncio
async def test_reorder_positions_are_sort_keys(client, seeded):
    collection_id, (a, b, c) = seeded
    payload = {
        "members": [
            {"itemId": a, "position": 40},
            {"itemId": b, "position": 5},
            {"itemId": c, "position": 17},
        ]
    }

    response = await client.put(f"/collections/{collection_id}/members/reorder", json=payload)

    assert response.status_code == 200
    assert _member_ids(response) == [b, c, a]
    assert [m["position"] for m in response.json()] == [0, 1, 2]


@pytest.mark.asyncio
async def test_reorder_missing_member_is_422_and_changes_nothing(client, seeded):
    collection_id, (a, b, c) = seeded
    payload = {"members": [{"itemId": c, "position": 0}, {"itemId": a, "position": 1}]}

    response = await client.put(f"/collections/{collection_id}/members/reorder", json=payload)

    assert response.status_code == 422
    error = response.json()["error"]
    assert error["code"] == "ORDERING_MISMATCH"
    assert error["details"]["missing_item_ids"] == [b]
    listed = await client.get(f"/collections/{collection_id}/members")
    assert _member_ids(listed) == [a, b, c]


@pytest.mark.asyncio
async def test_reorder_unknown_item_is_422(client, seeded):
    collection_id, (a, b, c) = seeded
    stranger = await _create_item(client, "Z")
    payload = {
        "members": [
            {"itemId": item_id, "position": index}
            for index, item_id in enumerate([a, b, c, stranger])
        ]
    }

    response = await client.put(f"/collections/{collection_id}/members/reorder", json=payload)

    assert response.status_code == 422
    assert response.json()["error"]["details"]["unknown_item_ids"] == [stranger]


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "payload",
    [
        {},
        {"members": []},
        {"members": "not-a-list"},
        {"members": [{"itemId": 0, "position": 0}]},
        {"members": [{"itemId": 2**64, "position": 0}]},
        {"members": [{"itemId": 1, "position": -1}]},
        {"members": [{"itemId": 1, "position": 0}, {"itemId": 2, "position": 0}]},
    ],
)
async def test_reorder_malformed_payload_is_400(client, seeded, payload):
    collection_id, _ = seeded

    response = await client.put(f"/collections/{collection_id}/members/reorder", json=payload)

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "VALIDATION_ERROR"


@pytest.mark.asyncio
async def test_reorder_unknown_collection(client):
    payload = {"members": [{"itemId": 1, "position": 0}]}

    response = await client.put("/collections/9999/members/reorder", json=payload)

    assert response.status_code == 404


@pytest.mark.asyncio
async def test_response_carries_request_id(client):
    response = await client.get("/collections", headers={"X-Request-ID": "abc-123"})

    assert response.headers["X-Request-ID"] == "abc-123"


class _RecordingLogger:
    """Captures error log calls along with the bound logging context."""

    def __init__(self):
        self.errors = []

    def error(self, event, **kwargs):
        self.errors.append((event, structlog.contextvars.get_contextvars()))


@pytest.mark.asyncio
async def test_unexpected_error_is_500_with_request_id(client, monkeypatch):
    async def explode(self):
        raise RuntimeError("boom")

    recorder = _RecordingLogger()
    monkeypatch.setattr(CollectionService, "list_collections", explode)
    monkeypatch.setattr("encore.api.middleware.error_handler.logger", recorder)

    response = await client.get("/collections", headers={"X-Request-ID": "req-500"})

    assert response.status_code == 500
    assert response.headers["X-Request-ID"] == "req-500"
    assert response.json()["error"]["code"] == "INTERNAL_ERROR"
    assert "boom" not in response.text
    [(event, context)] = recorder.errors
    assert event == "Unexpected error"
    assert context["request_id"] == "req-500"
