"""Tests for the design endpoints."""

from datetime import datetime, timedelta

import pytest
from httpx import AsyncClient


@pytest.fixture
def design_payload(seed, transforms_payload) -> dict:
    return {
        "product_id": seed.product_id,
        "color": "white",
        "image_url": "https://cdn.example.com/stamp.png",
        "transforms": transforms_payload,
    }


@pytest.fixture
async def design_id(seed, client: AsyncClient, as_user, design_payload) -> int:
    response = await client.post("/api/designs", json=design_payload, headers=as_user(seed.client_id))
    assert response.status_code == 201
    return response.json()["id"]


class TestAuthentication:
    @pytest.mark.asyncio
    async def test_missing_header(self, seed, client: AsyncClient):
        response = await client.get("/api/designs/user/me")

        assert response.status_code == 401

    @pytest.mark.asyncio
    async def test_unknown_user(self, seed, client: AsyncClient, as_user):
        response = await client.get("/api/designs/user/me", headers=as_user(9999))

        assert response.status_code == 401
        assert response.json()["detail"] == "User not found"


class TestCreateDesign:
    @pytest.mark.asyncio
    async def test_create(self, seed, client: AsyncClient, as_user, design_payload):
        response = await client.post(
            "/api/designs", json=design_payload, headers=as_user(seed.client_id)
        )

        assert response.status_code == 201
        body = response.json()
        assert body["status"] == "PENDING"
        assert set(body) == {"id", "status", "created_at"}

    @pytest.mark.asyncio
    async def test_unavailable_color(self, seed, client: AsyncClient, as_user, design_payload):
        design_payload["color"] = "purple"

        response = await client.post(
            "/api/designs", json=design_payload, headers=as_user(seed.client_id)
        )

        assert response.status_code == 400
        body = response.json()
        assert body["error"] == "Color purple is not available for this product"
        assert body["error_type"] == "ValidationError"

    @pytest.mark.asyncio
    async def test_malformed_transforms(self, seed, client: AsyncClient, as_user, design_payload):
        del design_payload["transforms"]["scale"]

        response = await client.post(
            "/api/designs", json=design_payload, headers=as_user(seed.client_id)
        )

        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_non_http_image_url(self, seed, client: AsyncClient, as_user, design_payload):
        design_payload["image_url"] = "ftp://example.com/stamp.png"

        response = await client.post(
            "/api/designs", json=design_payload, headers=as_user(seed.client_id)
        )

        assert response.status_code == 422


class TestReadDesigns:
    @pytest.mark.asyncio
    async def test_my_designs(self, seed, client: AsyncClient, as_user, design_id):
        mine = await client.get("/api/designs/user/me", headers=as_user(seed.client_id))
        theirs = await client.get("/api/designs/user/me", headers=as_user(seed.other_client_id))

        assert mine.json()["total"] == 1
        assert mine.json()["designs"][0]["product"]["name"] == "Basic T-Shirt"
        assert theirs.json() == {"designs": [], "total": 0}

    @pytest.mark.asyncio
    async def test_owner_reads_design(self, seed, client: AsyncClient, as_user, design_id, transforms_payload):
        response = await client.get(f"/api/designs/{design_id}", headers=as_user(seed.client_id))

        assert response.status_code == 200
        body = response.json()
        assert body["transforms"] == transforms_payload
        assert body["user"]["email"] == "client@example.com"

    @pytest.mark.asyncio
    async def test_other_client_forbidden(self, seed, client: AsyncClient, as_user, design_id):
        response = await client.get(
            f"/api/designs/{design_id}", headers=as_user(seed.other_client_id)
        )

        assert response.status_code == 403
        assert response.json()["error"] == "Unauthorized to read this design"

    @pytest.mark.asyncio
    async def test_missing_design(self, seed, client: AsyncClient, as_user):
        response = await client.get("/api/designs/9999", headers=as_user(seed.admin_id))

        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_pending_queue_requires_reviewer(self, seed, client: AsyncClient, as_user, design_id):
        denied = await client.get("/api/designs/pending/all", headers=as_user(seed.client_id))
        allowed = await client.get("/api/designs/pending/all", headers=as_user(seed.designer_id))

        assert denied.status_code == 403
        assert denied.json()["error"] == "Forbidden: Insufficient permissions"
        assert [d["id"] for d in allowed.json()["designs"]] == [design_id]

    @pytest.mark.asyncio
    async def test_list_with_filters(self, seed, client: AsyncClient, as_user, design_id):
        headers = as_user(seed.admin_id)

        pending = await client.get("/api/designs", params={"status": "PENDING"}, headers=headers)
        approved = await client.get("/api/designs", params={"status": "APPROVED"}, headers=headers)
        other = await client.get(
            "/api/designs", params={"user_id": seed.other_client_id}, headers=headers
        )

        assert pending.json()["total"] == 1
        assert approved.json()["total"] == 0
        assert other.json()["total"] == 0


class TestUpdateDesign:
    @pytest.mark.asyncio
    async def test_owner_updates(self, seed, client: AsyncClient, as_user, design_id):
        response = await client.patch(
            f"/api/designs/{design_id}",
            json={"color": "black"},
            headers=as_user(seed.client_id),
        )

        assert response.status_code == 200
        assert response.json()["color"] == "black"

    @pytest.mark.asyncio
    async def test_client_cannot_set_status(self, seed, client: AsyncClient, as_user, design_id):
        response = await client.patch(
            f"/api/designs/{design_id}",
            json={"status": "APPROVED"},
            headers=as_user(seed.client_id),
        )

        assert response.status_code == 403
        assert response.json()["error"] == "Clients cannot change design status"

        check = await client.get(f"/api/designs/{design_id}", headers=as_user(seed.client_id))
        assert check.json()["status"] == "PENDING"

    @pytest.mark.asyncio
    async def test_reviewed_design_cannot_change(self, seed, client: AsyncClient, as_user, design_id):
        await client.post(f"/api/reviews/{design_id}/approve", headers=as_user(seed.designer_id))

        response = await client.patch(
            f"/api/designs/{design_id}",
            json={"color": "black"},
            headers=as_user(seed.client_id),
        )

        assert response.status_code == 409
        assert response.json()["error"] == "Only pending designs can be modified"


class TestDeleteDesign:
    @pytest.mark.asyncio
    async def test_owner_deletes(self, seed, client: AsyncClient, as_user, design_id):
        response = await client.delete(f"/api/designs/{design_id}", headers=as_user(seed.client_id))
        check = await client.get(f"/api/designs/{design_id}", headers=as_user(seed.client_id))

        assert response.status_code == 204
        assert check.status_code == 404

    @pytest.mark.asyncio
    async def test_designer_cannot_delete(self, seed, client: AsyncClient, as_user, design_id):
        response = await client.delete(
            f"/api/designs/{design_id}", headers=as_user(seed.designer_id)
        )

        assert response.status_code == 403


class TestNonFiniteTransforms:
    @pytest.mark.parametrize("literal", ["NaN", "Infinity", "-Infinity"])
    @pytest.mark.asyncio
    async def test_rejected_before_storage(self, seed, client: AsyncClient, as_user, literal):
        body = (
            '{"product_id": %d, "color": "white", "image_url": "https://cdn.example.com/stamp.png",'
            ' "transforms": {"position": {"x": %s, "y": 0, "z": 0},'
            ' "rotation": {"x": 0, "y": 0, "z": 0}, "scale": {"x": 1, "y": 1, "z": 1}}}'
        ) % (seed.product_id, literal)

        response = await client.post(
            "/api/designs",
            content=body,
            headers={**as_user(seed.client_id), "Content-Type": "application/json"},
        )
        mine = await client.get("/api/designs/user/me", headers=as_user(seed.client_id))

        assert response.status_code == 422
        assert mine.json()["total"] == 0


class TestTimestamps:
    @pytest.mark.asyncio
    async def test_read_back_timestamps_are_utc(self, seed, client: AsyncClient, as_user, design_id):
        response = await client.get(f"/api/designs/{design_id}", headers=as_user(seed.client_id))

        for field in ("created_at", "updated_at"):
            value = datetime.fromisoformat(response.json()[field].replace("Z", "+00:00"))
            assert value.utcoffset() == timedelta(0)
