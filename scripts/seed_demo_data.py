#!/usr/bin/env python
"""Seed a local database with demo users, products and designs.

This script:
1. Creates missing tables
2. Optionally wipes existing rows (--reset)
3. Creates a client, a designer and an admin
4. Creates the garment catalog
5. Creates one pending design and one design approved through the review workflow

Usage:
    # Seed a local SQLite database
    DB_URL=sqlite+aiosqlite:///./studio.db python scripts/seed_demo_data.py

    # Wipe and reseed
    python scripts/seed_demo_data.py --reset
"""

import argparse
import asyncio
import sys
from decimal import Decimal
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from sqlalchemy import delete

from stamp_studio.domain.lifecycle import Role
from stamp_studio.domain.transforms import Transforms
from stamp_studio.infra.database import close_db_engine, create_tables, get_db_session
from stamp_studio.infra.logging import get_logger, setup_logging
from stamp_studio.models import Design, Product, Review, User
from stamp_studio.repositories import SqlDesignStore, SqlProductStore, SqlReviewStore, SqlUserStore
from stamp_studio.services import DesignService, ProductService, ReviewService

setup_logging()
logger = get_logger(__name__)


DEMO_USERS = [
    ("client@example.com", "Demo Client", Role.CLIENT),
    ("designer@example.com", "Demo Designer", Role.DESIGNER),
    ("admin@example.com", "Administrator", Role.ADMIN),
]

DEMO_PRODUCTS = [
    {
        "name": "Basic T-Shirt",
        "category": "t-shirts",
        "base_model_url": "/models/tshirt-basic.glb",
        "available_colors": ["white", "black", "navy", "red", "gray"],
        "price": Decimal("29.99"),
        "thumbnail_url": "/thumbnails/tshirt-basic.jpg",
        "description": "100% cotton t-shirt for custom prints",
    },
    {
        "name": "Premium T-Shirt",
        "category": "t-shirts",
        "base_model_url": "/models/tshirt-premium.glb",
        "available_colors": ["white", "black", "navy"],
        "price": Decimal("39.99"),
        "thumbnail_url": "/thumbnails/tshirt-premium.jpg",
        "description": "Premium fabric t-shirt",
    },
    {
        "name": "Classic Hoodie",
        "category": "hoodies",
        "base_model_url": "/models/hoodie-classic.glb",
        "available_colors": ["black", "gray", "navy", "burgundy"],
        "price": Decimal("59.99"),
        "thumbnail_url": "/thumbnails/hoodie-classic.jpg",
        "description": "Hooded sweatshirt with front pocket",
    },
    {
        "name": "Oversize Hoodie",
        "category": "hoodies",
        "base_model_url": "/models/hoodie-oversize.glb",
        "available_colors": ["black", "gray", "white"],
        "price": Decimal("69.99"),
        "thumbnail_url": "/thumbnails/hoodie-oversize.jpg",
        "description": "Modern oversize cut",
    },
    {
        "name": "Sport Polo",
        "category": "polos",
        "base_model_url": "/models/polo-sport.glb",
        "available_colors": ["white", "black", "navy", "red"],
        "price": Decimal("34.99"),
        "thumbnail_url": "/thumbnails/polo-sport.jpg",
        "description": "Buttoned collar polo",
    },
    {
        "name": "Tank Top",
        "category": "tank-tops",
        "base_model_url": "/models/tank-top.glb",
        "available_colors": ["white", "black", "gray"],
        "price": Decimal("24.99"),
        "thumbnail_url": "/thumbnails/tank-top.jpg",
        "description": "Sleeveless top for warm weather",
    },
]


async def reset_database() -> None:
    """Delete all rows, children first."""
    async with get_db_session() as session:
        for model in (Review, Design, Product, User):
            await session.execute(delete(model))
    logger.info("Database cleaned")


async def seed() -> dict[str, int]:
    """Create demo rows in one transaction and return what was created."""
    async with get_db_session() as session:
        users = SqlUserStore(session)
        created_users = {}
        for email, name, role in DEMO_USERS:
            user = await users.find_by_email(email)
            if user is None:
                user = await users.create(email=email, name=name, role=role)
            created_users[role] = user

        products = ProductService(SqlProductStore(session))
        catalog = [await products.create_product(data) for data in DEMO_PRODUCTS]

        designs = DesignService(SqlDesignStore(session), SqlProductStore(session))
        client = created_users[Role.CLIENT]

        await designs.create_design(
            user_id=client.id,
            product_id=catalog[0].id,
            color="white",
            image_url="http://localhost:8000/uploads/sample-design-1.png",
            transforms=Transforms.model_validate(
                {
                    "position": {"x": 0, "y": 0.5, "z": 0.1},
                    "rotation": {"x": 0, "y": 0, "z": 0},
                    "scale": {"x": 1, "y": 1, "z": 1},
                }
            ),
        )
        approved = await designs.create_design(
            user_id=client.id,
            product_id=catalog[2].id,
            color="black",
            image_url="http://localhost:8000/uploads/sample-design-2.png",
            transforms=Transforms.model_validate(
                {
                    "position": {"x": 0, "y": 0.3, "z": 0.1},
                    "rotation": {"x": 0, "y": 0, "z": 45},
                    "scale": {"x": 0.8, "y": 0.8, "z": 0.8},
                }
            ),
        )

        reviews = ReviewService(SqlReviewStore(session), SqlDesignStore(session))
        await reviews.approve_design(
            design_id=approved.id,
            reviewer_id=created_users[Role.DESIGNER].id,
            comment="Approved, looks great on the garment",
        )

    return {"users": len(created_users), "products": len(catalog), "designs": 2}


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Seed Stamp Studio demo data")
    parser.add_argument(
        "--reset",
        action="store_true",
        help="Delete existing rows before seeding",
    )
    return parser.parse_args()


async def main() -> int:
    """Main entry point."""
    args = parse_args()

    try:
        await create_tables()
        if args.reset:
            await reset_database()
        counts = await seed()
    except Exception as e:
        logger.error("Seed failed", error=str(e), error_type=type(e).__name__)
        return 1
    finally:
        await close_db_engine()

    print("\nSeed completed:")
    for name, count in counts.items():
        print(f"  {name}: {count}")
    print("\nCall the API with an X-User-Id header holding a seeded user id.")
    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
