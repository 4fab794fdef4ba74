"""Tests for the SQLAlchemy design store against SQLite."""

from datetime import datetime, timedelta, timezone

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from stamp_studio.domain.lifecycle import DesignStatus, ReviewStatus
from stamp_studio.domain.transforms import Transforms
from stamp_studio.repositories import DesignFilter, SqlDesignStore, SqlReviewStore


async def _create(store: SqlDesignStore, seed, transforms: Transforms, **overrides):
    data = {
        "user_id": seed.client_id,
        "product_id": seed.product_id,
        "color": "white",
        "image_url": "https://cdn.example.com/stamp.png",
        "transforms": transforms,
    }
    data.update(overrides)
    return await store.create(**data)


class TestSqlDesignStore:
    @pytest.mark.asyncio
    async def test_create_starts_pending(self, seed, session: AsyncSession, transforms: Transforms):
        design = await _create(SqlDesignStore(session), seed, transforms)

        assert design.id is not None
        assert design.status == DesignStatus.PENDING
        assert design.created_at is not None

    @pytest.mark.asyncio
    async def test_transforms_round_trip_exactly(
        self,
        seed,
        session_factory: async_sessionmaker[AsyncSession],
    ):
        """Every component reads back bit-identical from a fresh session."""
        original = Transforms.model_validate(
            {
                "position": {"x": 0.1, "y": -2.3, "z": 1e-17},
                "rotation": {"x": 0.0, "y": 179.99999999999997, "z": 1 / 3},
                "scale": {"x": 2.0, "y": 0.30000000000000004, "z": 1.0},
            }
        )
        async with session_factory() as session:
            design = await _create(SqlDesignStore(session), seed, original)
            await session.commit()

        async with session_factory() as session:
            loaded = await SqlDesignStore(session).find_by_id(design.id)

        assert loaded is not None
        assert loaded.transforms == original
        for name in ("position", "rotation", "scale"):
            for axis in ("x", "y", "z"):
                expected = getattr(getattr(original, name), axis)
                actual = getattr(getattr(loaded.transforms, name), axis)
                assert actual.hex() == expected.hex()

    @pytest.mark.asyncio
    async def test_find_by_id_missing(self, session: AsyncSession):
        assert await SqlDesignStore(session).find_by_id(9999) is None

    @pytest.mark.asyncio
    async def test_find_with_relations_loads_owner_and_product(
        self, seed, session: AsyncSession, transforms: Transforms
    ):
        store = SqlDesignStore(session)
        design = await _create(store, seed, transforms)

        loaded = await store.find_by_id_with_relations(design.id)

        assert loaded.user.email == "client@example.com"
        assert loaded.product.name == "Basic T-Shirt"

    @pytest.mark.asyncio
    async def test_find_all_filters(self, seed, session: AsyncSession, transforms: Transforms):
        store = SqlDesignStore(session)
        mine = await _create(store, seed, transforms)
        theirs = await _create(store, seed, transforms, user_id=seed.other_client_id)
        await store.transition_status(theirs.id, DesignStatus.PENDING, DesignStatus.REJECTED)

        by_owner = await store.find_all(DesignFilter(user_id=seed.client_id))
        pending = await store.find_all_with_relations(DesignFilter(status=DesignStatus.PENDING))
        everything = await store.find_all()

        assert [d.id for d in by_owner] == [mine.id]
        assert [d.id for d in pending] == [mine.id]
        assert {d.id for d in everything} == {mine.id, theirs.id}

    @pytest.mark.asyncio
    async def test_find_all_date_range(self, seed, session: AsyncSession, transforms: Transforms):
        store = SqlDesignStore(session)
        design = await _create(store, seed, transforms)
        now = datetime.now(timezone.utc)

        inside = await store.find_all(
            DesignFilter(date_from=now - timedelta(hours=1), date_to=now + timedelta(hours=1))
        )
        future = await store.find_all(DesignFilter(date_from=now + timedelta(days=1)))

        assert [d.id for d in inside] == [design.id]
        assert future == []

    @pytest.mark.asyncio
    async def test_newest_first(self, seed, session: AsyncSession, transforms: Transforms):
        store = SqlDesignStore(session)
        first = await _create(store, seed, transforms)
        second = await _create(store, seed, transforms)

        designs = await store.find_all()

        assert [d.id for d in designs] == [second.id, first.id]

    @pytest.mark.asyncio
    async def test_partial_update(self, seed, session: AsyncSession, transforms: Transforms):
        store = SqlDesignStore(session)
        design = await _create(store, seed, transforms)

        updated = await store.update(design.id, {"color": "black"})

        assert updated.color == "black"
        assert updated.image_url == "https://cdn.example.com/stamp.png"
        assert updated.transforms == transforms

    @pytest.mark.asyncio
    async def test_update_rejects_unknown_fields(
        self, seed, session: AsyncSession, transforms: Transforms
    ):
        store = SqlDesignStore(session)
        design = await _create(store, seed, transforms)

        with pytest.raises(ValueError):
            await store.update(design.id, {"user_id": seed.other_client_id})

    @pytest.mark.asyncio
    async def test_transition_is_guarded(self, seed, session: AsyncSession, transforms: Transforms):
        store = SqlDesignStore(session)
        design = await _create(store, seed, transforms)

        moved = await store.transition_status(design.id, DesignStatus.PENDING, DesignStatus.APPROVED)
        second = await store.transition_status(design.id, DesignStatus.PENDING, DesignStatus.REJECTED)

        assert moved is not None
        assert moved.status == DesignStatus.APPROVED
        assert second is None
        assert (await store.find_by_id(design.id)).status == DesignStatus.APPROVED

    @pytest.mark.asyncio
    async def test_timestamps_read_back_as_utc(
        self,
        seed,
        session_factory: async_sessionmaker[AsyncSession],
        transforms: Transforms,
    ):
        async with session_factory() as session:
            design = await _create(SqlDesignStore(session), seed, transforms)
            await session.commit()

        async with session_factory() as session:
            loaded = await SqlDesignStore(session).find_by_id(design.id)

        assert loaded.created_at.utcoffset() == timedelta(0)
        assert loaded.created_at == design.created_at

    @pytest.mark.asyncio
    async def test_delete(self, seed, session: AsyncSession, transforms: Transforms):
        store = SqlDesignStore(session)
        design = await _create(store, seed, transforms)

        await store.delete(design.id)

        assert await store.find_by_id(design.id) is None

    @pytest.mark.asyncio
    async def test_delete_reviewed_design_removes_its_review(
        self, seed, session: AsyncSession, transforms: Transforms
    ):
        store = SqlDesignStore(session)
        reviews = SqlReviewStore(session)
        design = await _create(store, seed, transforms)
        await store.transition_status(design.id, DesignStatus.PENDING, DesignStatus.APPROVED)
        await reviews.create(design_id=design.id, reviewer_id=seed.designer_id, status=ReviewStatus.APPROVED)

        await store.delete(design.id)

        assert await store.find_by_id(design.id) is None
        assert await reviews.find_by_design_id(design.id) == []
