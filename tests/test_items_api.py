"""
Item API tests - routes, auth, status codes and error envelopes.
"""

import pytest
from httpx import AsyncClient

from factories import LISTING_JSON


async def _list(client: AsyncClient, headers: dict, **overrides) -> dict:
    response = await client.post("/api/v1/items", headers=headers, json={**LISTING_JSON, **overrides})
    assert response.status_code == 201
    return response.json()


async def _bid(client: AsyncClient, headers: dict, item_id: int, amount: int):
    return await client.post(
        f"/api/v1/items/{item_id}/bids",
        headers=headers,
        json={"amount": amount, "bid_date": 1_800_000_500},
    )


@pytest.mark.asyncio
async def test_get_all_items_empty(client: AsyncClient):
    response = await client.get("/api/v1/items")
    assert response.status_code == 200
    assert response.json() == {}


@pytest.mark.asyncio
async def test_list_item_requires_auth(client: AsyncClient):
    response = await client.post("/api/v1/items", json=LISTING_JSON)
    assert response.status_code == 401


@pytest.mark.asyncio
async def test_list_item_rejects_bad_token(client: AsyncClient):
    response = await client.post(
        "/api/v1/items", headers={"Authorization": "Bearer not-a-jwt"}, json=LISTING_JSON
    )
    assert response.status_code == 401


@pytest.mark.asyncio
async def test_list_item_owned_by_token_subject(client: AsyncClient, seller, seller_headers):
    data = await _list(client, seller_headers)
    assert data["owner"] == seller.id
    assert data["highest_bid"] == 0
    assert data["bid_history"] == []
    assert data["is_active"] is True


@pytest.mark.asyncio
async def test_get_item_and_get_all(client: AsyncClient, seller_headers):
    first = await _list(client, seller_headers, description="first")
    second = await _list(client, seller_headers, description="second")

    response = await client.get(f"/api/v1/items/{second['id']}")
    assert response.status_code == 200
    assert response.json()["description"] == "second"

    all_items = (await client.get("/api/v1/items")).json()
    assert list(all_items) == [str(first["id"]), str(second["id"])]


@pytest.mark.asyncio
async def test_get_missing_item_is_404(client: AsyncClient):
    response = await client.get("/api/v1/items/999")
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_edit_item(client: AsyncClient, seller_headers):
    item = await _list(client, seller_headers)
    response = await client.put(
        f"/api/v1/items/{item['id']}",
        headers=seller_headers,
        json={**LISTING_JSON, "description": "Re-listed", "is_active": False},
    )
    assert response.status_code == 200
    assert response.json()["description"] == "Re-listed"
    assert response.json()["is_active"] is False


@pytest.mark.asyncio
async def test_edit_by_non_owner_is_403(client: AsyncClient, seller_headers, bidder_headers):
    item = await _list(client, seller_headers)
    response = await client.put(
        f"/api/v1/items/{item['id']}",
        headers=bidder_headers,
        json={**LISTING_JSON, "description": "mine now"},
    )
    assert response.status_code == 403
    assert response.json()["error"]["code"] == "UNAUTHORIZED"
    assert (await client.get(f"/api/v1/items/{item['id']}")).json() == item


@pytest.mark.asyncio
async def test_edit_missing_item_is_404(client: AsyncClient, seller_headers):
    response = await client.put("/api/v1/items/5", headers=seller_headers, json=LISTING_JSON)
    assert response.status_code == 404
    assert response.json()["error"]["code"] == "ITEM_NOT_FOUND"


@pytest.mark.asyncio
async def test_stop_listing(client: AsyncClient, seller_headers, bidder_headers):
    item = await _list(client, seller_headers)

    denied = await client.post(f"/api/v1/items/{item['id']}/stop", headers=bidder_headers)
    assert denied.status_code == 403

    response = await client.post(f"/api/v1/items/{item['id']}/stop", headers=seller_headers)
    assert response.status_code == 200
    assert response.json()["is_active"] is False


@pytest.mark.asyncio
async def test_delete_item(client: AsyncClient, seller_headers, bidder_headers):
    item = await _list(client, seller_headers)

    denied = await client.delete(f"/api/v1/items/{item['id']}", headers=bidder_headers)
    assert denied.status_code == 403
    assert (await client.get(f"/api/v1/items/{item['id']}")).status_code == 200

    response = await client.delete(f"/api/v1/items/{item['id']}", headers=seller_headers)
    assert response.status_code == 200
    assert response.json()["id"] == item["id"]
    assert (await client.get(f"/api/v1/items/{item['id']}")).status_code == 404

    again = await client.delete(f"/api/v1/items/{item['id']}", headers=seller_headers)
    assert again.status_code == 404


@pytest.mark.asyncio
async def test_bid_accepted(client: AsyncClient, seller_headers, bidder, bidder_headers):
    item = await _list(client, seller_headers)

    response = await _bid(client, bidder_headers, item["id"], 120)
    assert response.status_code == 200
    assert response.json()["item_id"] == item["id"]

    updated = (await client.get(f"/api/v1/items/{item['id']}")).json()
    assert updated["highest_bid"] == 120
    assert updated["bid_history"] == [
        {"item_id": item["id"], "bidder": bidder.id, "amount": 120, "bid_date": 1_800_000_500}
    ]


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "owner_bids, is_active, amount, status, code",
    [
        (True, True, 50, 403, "SELF_BID"),
        (True, False, 50, 403, "SELF_BID"),
        (False, False, 50, 409, "ITEM_INACTIVE"),
        (False, True, 0, 409, "BID_TOO_LOW"),
    ],
)
async def test_bid_rejections(
    client: AsyncClient, seller_headers, bidder_headers, owner_bids, is_active, amount, status, code
):
    item = await _list(client, seller_headers, is_active=is_active)
    headers = seller_headers if owner_bids else bidder_headers

    response = await _bid(client, headers, item["id"], amount)

    assert response.status_code == status
    assert response.json()["error"]["code"] == code
    assert (await client.get(f"/api/v1/items/{item['id']}")).json()["bid_history"] == []


@pytest.mark.asyncio
async def test_bid_on_missing_item_is_404(client: AsyncClient, bidder_headers):
    response = await _bid(client, bidder_headers, 31, 10)
    assert response.status_code == 404
    assert response.json()["error"]["code"] == "ITEM_NOT_FOUND"


@pytest.mark.asyncio
async def test_negative_amount_is_validation_error(client: AsyncClient, seller_headers, bidder_headers):
    item = await _list(client, seller_headers)
    response = await _bid(client, bidder_headers, item["id"], -5)
    assert response.status_code == 422


@pytest.mark.asyncio
@pytest.mark.parametrize("item_id", [2**63, 2**64 - 1])
async def test_ids_beyond_bigint_are_not_found(client: AsyncClient, seller_headers, item_id):
    assert (await client.get(f"/api/v1/items/{item_id}")).status_code == 404

    requests = [
        ("PUT", f"/api/v1/items/{item_id}", LISTING_JSON),
        ("POST", f"/api/v1/items/{item_id}/stop", None),
        ("DELETE", f"/api/v1/items/{item_id}", None),
        ("POST", f"/api/v1/items/{item_id}/bids", {"amount": 10, "bid_date": 1}),
    ]
    for method, url, body in requests:
        response = await client.request(method, url, headers=seller_headers, json=body)
        assert response.status_code == 404
        assert response.json()["error"]["code"] == "ITEM_NOT_FOUND"
