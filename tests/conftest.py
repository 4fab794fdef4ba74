"""Shared fixtures: in-memory SQLite database, seeded rows, API client."""

import os

# Point settings at SQLite before anything imports stamp_studio.config
os.environ.setdefault("DB_URL", "sqlite+aiosqlite://")
os.environ.setdefault("ENVIRONMENT", "dev")

from dataclasses import dataclass
from decimal import Decimal
from typing import Any, AsyncGenerator

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from stamp_studio.domain.lifecycle import Role
from stamp_studio.domain.transforms import Transforms
from stamp_studio.infra import database
from stamp_studio.models import Base
from stamp_studio.repositories import SqlProductStore, SqlUserStore


@dataclass(frozen=True)
class Seed:
    client_id: int
    other_client_id: int
    designer_id: int
    admin_id: int
    product_id: int
    inactive_product_id: int


@pytest.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    event.listen(engine.sync_engine, "connect", database._enable_sqlite_foreign_keys)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(
    engine: AsyncEngine, monkeypatch: pytest.MonkeyPatch
) -> async_sessionmaker[AsyncSession]:
    """Session factory bound to the test engine, also used by get_db_session()."""
    factory = async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )
    monkeypatch.setattr(database, "_engine", engine)
    monkeypatch.setattr(database, "_session_factory", factory)
    return factory


@pytest.fixture
async def seed(session_factory: async_sessionmaker[AsyncSession]) -> Seed:
    """Commit users for every role and two products."""
    async with session_factory() as session:
        users = SqlUserStore(session)
        client = await users.create(email="client@example.com", name="Client", role=Role.CLIENT)
        other = await users.create(email="other@example.com", name="Other", role=Role.CLIENT)
        designer = await users.create(email="designer@example.com", name="Designer", role=Role.DESIGNER)
        admin = await users.create(email="admin@example.com", name="Admin", role=Role.ADMIN)

        products = SqlProductStore(session)
        tshirt = await products.create(
            {
                "name": "Basic T-Shirt",
                "category": "t-shirts",
                "base_model_url": "/models/tshirt-basic.glb",
                "available_colors": ["white", "black"],
                "price": Decimal("29.99"),
                "thumbnail_url": "/thumbnails/tshirt-basic.jpg",
            }
        )
        retired = await products.create(
            {
                "name": "Retired Hoodie",
                "category": "hoodies",
                "base_model_url": "/models/hoodie.glb",
                "available_colors": ["gray"],
                "price": Decimal("59.99"),
                "active": False,
            }
        )
        await session.commit()

    return Seed(
        client_id=client.id,
        other_client_id=other.id,
        designer_id=designer.id,
        admin_id=admin.id,
        product_id=tshirt.id,
        inactive_product_id=retired.id,
    )


@pytest.fixture
async def session(
    seed: Seed, session_factory: async_sessionmaker[AsyncSession]
) -> AsyncGenerator[AsyncSession, None]:
    async with session_factory() as session:
        yield session


@pytest.fixture
def transforms_payload() -> dict[str, Any]:
    return {
        "position": {"x": 0.0, "y": 0.5, "z": 0.1},
        "rotation": {"x": 0.0, "y": 0.0, "z": 45.0},
        "scale": {"x": 2.0, "y": 1.0, "z": 1.0},
    }


@pytest.fixture
def transforms(transforms_payload: dict[str, Any]) -> Transforms:
    return Transforms.model_validate(transforms_payload)


@pytest.fixture
async def client(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncGenerator[AsyncClient, None]:
    from stamp_studio.main import app

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def as_user():
    """Build headers identifying the caller."""

    def headers(user_id: int) -> dict[str, str]:
        return {"X-User-Id": str(user_id)}

    return headers
