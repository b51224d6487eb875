"""Seed script for the Wayfare development database."""

import asyncio

from passlib.context import CryptContext
from sqlalchemy import select

from wayfare.database import async_session_factory, engine, init_models
from wayfare.models.user import User
from wayfare.services.catalog_store import seed_catalog

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

# ── Users ──────────────────────────────────────────────────────────────────────

USERS = [
    {
        "email": "traveler@wayfare.io",
        "password": "password123",
        "first_name": "Alex",
        "last_name": "Traveler",
        "role": "user",
    },
    {
        "email": "admin@wayfare.io",
        "password": "password123",
        "first_name": "Admin",
        "last_name": "User",
        "role": "admin",
    },
]


async def seed():
    await init_models()

    async with async_session_factory() as db:
        result = await db.execute(select(User).limit(1))
        if result.scalar_one_or_none():
            print("Users already seeded. Skipping.")
        else:
            for u in USERS:
                db.add(User(
                    email=u["email"],
                    password_hash=pwd_context.hash(u["password"]),
                    first_name=u["first_name"],
                    last_name=u["last_name"],
                    role=u["role"],
                ))
            await db.commit()
            print(f"Created {len(USERS)} users")

        count = await seed_catalog(db)
        print(f"Created {count} catalog items" if count else "Catalog already seeded. Skipping.")

    await engine.dispose()
    print("Seed complete.")


if __name__ == "__main__":
    asyncio.run(seed())
