"""
Database initialization script.

Creates tables and seeds the sample courts.
"""

import asyncio
import os
import sys

# Add app to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from sqlalchemy import select

from app.core.config import settings
from app.core.database import Database
from app.models import Court

SAMPLE_COURTS = [
    ("Lapangan 1 Kiri", "Left side camera of Court 1"),
    ("Lapangan 1 Kanan", "Right side camera of Court 1"),
    ("Lapangan 2 Kiri", "Left side camera of Court 2"),
    ("Lapangan 2 Kanan", "Right side camera of Court 2"),
]


async def seed_courts(database: Database) -> int:
    """Insert the sample courts that do not exist yet. Returns how many were added."""
    added = 0
    async with database.session() as db:
        result = await db.execute(select(Court.name))
        existing = set(result.scalars().all())
        for name, description in SAMPLE_COURTS:
            if name in existing:
                print(f"[Init] Court already exists: {name}")
                continue
            db.add(Court(name=name, description=description))
            added += 1
        await db.commit()
    return added


async def main():
    database = Database(settings.database_url)
    try:
        print("[Init] Creating database tables...")
        await database.create_all()
        print("[Init] Tables created successfully!")
        added = await seed_courts(database)
        print(f"[Init] Seeded {added} court(s)")
    finally:
        await database.dispose()


if __name__ == "__main__":
    print("=" * 50)
    print("Court Clip Backend - Database Initialization")
    print("=" * 50)
    print()

    asyncio.run(main())

    print()
    print("[Init] Done!")
