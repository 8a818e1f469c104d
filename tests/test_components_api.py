"""Tests for the /components endpoints."""

from httpx import AsyncClient

from app.services.catalog_service import seed_catalog

WHOOP = {
    "name": "Test Whoop",
    "category": "drone",
    "price": 99.5,
    "description": "A tiny test drone",
    "weight": 21.5,
    "specifications": {"motors": "19000KV", "cells": 1, "hd": False},
    "compatible_with": ["battery-1s", "radio-elrs"],
}


async def create(client: AsyncClient, payload: dict) -> dict:
    resp = await client.post("/components", json=payload)
    assert resp.status_code == 201, resp.text
    return resp.json()


class TestHealth:
    async def test_health(self, client: AsyncClient):
        resp = await client.get("/health")
        assert resp.status_code == 200
        assert resp.json() == {"status": "ok"}


class TestCreateComponent:
    async def test_create(self, db_client: AsyncClient):
        data = await create(db_client, WHOOP)
        assert data["id"] is not None
        assert data["category"] == "drone"
        assert data["in_stock"] is True
        assert data["specifications"] == {"motors": "19000KV", "cells": 1, "hd": False}
        assert data["compatible_with"] == ["battery-1s", "radio-elrs"]
        assert data["purchase_url"] is None

    async def test_category_is_normalized(self, db_client: AsyncClient):
        data = await create(db_client, {**WHOOP, "category": "Drone"})
        assert data["category"] == "drone"

    async def test_defaults_for_optional_collections(self, db_client: AsyncClient):
        data = await create(db_client, {"name": "Strap", "category": "accessory", "price": 1})
        assert data["specifications"] == {}
        assert data["compatible_with"] == []
        assert data["weight"] is None

    async def test_rejects_negative_price(self, db_client: AsyncClient):
        resp = await db_client.post("/components", json={**WHOOP, "price": -1})
        assert resp.status_code == 422

    async def test_rejects_unknown_category(self, db_client: AsyncClient):
        resp = await db_client.post("/components", json={**WHOOP, "category": "frame"})
        assert resp.status_code == 422

    async def test_rejects_empty_name(self, db_client: AsyncClient):
        resp = await db_client.post("/components", json={**WHOOP, "name": ""})
        assert resp.status_code == 422

    async def test_rejects_bad_purchase_url(self, db_client: AsyncClient):
        resp = await db_client.post("/components", json={**WHOOP, "purchase_url": "not a url"})
        assert resp.status_code == 422

    async def test_rejects_nested_specification_values(self, db_client: AsyncClient):
        resp = await db_client.post(
            "/components", json={**WHOOP, "specifications": {"motors": {"kv": 19000}}}
        )
        assert resp.status_code == 422


class TestListComponents:
    async def test_filter_by_category(self, db_client: AsyncClient, db_session):
        await seed_catalog(db_session)
        resp = await db_client.get("/components", params={"category": "goggles"})
        assert resp.status_code == 200
        names = [c["name"] for c in resp.json()]
        assert names == ["FatShark Recon V3", "DJI FPV Goggles V2"]

    async def test_category_filter_is_case_insensitive(self, db_client: AsyncClient, db_session):
        await seed_catalog(db_session)
        resp = await db_client.get("/components", params={"category": "RADIO"})
        assert len(resp.json()) == 2

    async def test_unknown_category_is_400(self, db_client: AsyncClient):
        resp = await db_client.get("/components", params={"category": "propeller"})
        assert resp.status_code == 400

    async def test_filters_and_sort(self, db_client: AsyncClient, db_session):
        await seed_catalog(db_session)
        resp = await db_client.get(
            "/components",
            params={"max_price": 20, "in_stock_only": "true", "sort": "price-desc"},
        )
        prices = [c["price"] for c in resp.json()]
        assert prices == [19.99, 7.99, 5.99, 3.99]

    async def test_search(self, db_client: AsyncClient, db_session):
        await seed_catalog(db_session)
        resp = await db_client.get("/components", params={"search": "whoop"})
        names = {c["name"] for c in resp.json()}
        assert names == {"HappyModel Mobula 6 1S", "BetaFPV Meteor65", "GNB 300mAh 1S LiPo"}

    async def test_unknown_sort_is_400(self, db_client: AsyncClient):
        resp = await db_client.get("/components", params={"sort": "random"})
        assert resp.status_code == 400


class TestSingleComponent:
    async def test_get(self, db_client: AsyncClient):
        created = await create(db_client, WHOOP)
        resp = await db_client.get(f"/components/{created['id']}")
        assert resp.status_code == 200
        assert resp.json()["name"] == "Test Whoop"

    async def test_get_missing_is_404(self, db_client: AsyncClient):
        resp = await db_client.get("/components/999")
        assert resp.status_code == 404

    async def test_update(self, db_client: AsyncClient):
        created = await create(db_client, WHOOP)
        resp = await db_client.put(
            f"/components/{created['id']}", json={"price": 89.0, "in_stock": False}
        )
        assert resp.status_code == 200
        data = resp.json()
        assert data["price"] == 89.0
        assert data["in_stock"] is False
        assert data["name"] == "Test Whoop"

    async def test_update_cannot_change_category(self, db_client: AsyncClient):
        created = await create(db_client, WHOOP)
        resp = await db_client.put(f"/components/{created['id']}", json={"category": "battery"})
        assert resp.status_code == 400

    async def test_update_missing_is_404(self, db_client: AsyncClient):
        resp = await db_client.put("/components/999", json={"price": 1})
        assert resp.status_code == 404

    async def test_delete(self, db_client: AsyncClient):
        created = await create(db_client, WHOOP)
        resp = await db_client.delete(f"/components/{created['id']}")
        assert resp.status_code == 204
        resp = await db_client.delete(f"/components/{created['id']}")
        assert resp.status_code == 404
