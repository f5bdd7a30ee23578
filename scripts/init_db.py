#!/usr/bin/env python3
"""Database initialization script"""

import asyncio
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from clario.core.database import engine, Base, async_session_maker
from clario.core.scoring import get_taxonomy, sync_learning_types
from clario.models import LearningType, Video, VideoTag  # noqa: F401


async def init_database():
    """Create all tables and the learning types of the active taxonomy"""
    print("Initializing database...")

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    count = await sync_learning_types(async_session_maker, get_taxonomy())

    print("Database initialized successfully!")
    print("\nCreated tables:")
    for table in Base.metadata.tables:
        print(f"  - {table}")
    print(f"\nSynced {count} learning types")


async def verify_connection():
    """Verify database connection"""
    from sqlalchemy import text
    from sqlalchemy.exc import SQLAlchemyError

    print("Verifying database connection...")

    try:
        async with engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
            print("Database connection verified!")
            return True
    except SQLAlchemyError as e:
        print(f"Database connection failed: {e}")
        return False


async def main():
    if not await verify_connection():
        print("\nPlease ensure the database is running and DATABASE_URL is configured correctly.")
        sys.exit(1)

    await init_database()
    await engine.dispose()


if __name__ == "__main__":
    asyncio.run(main())
