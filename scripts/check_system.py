#!/usr/bin/env python3
"""
Quick system verification script for the Clario scoring service.
Run this to check that dependencies, services and the taxonomy are in place.
"""

import sys
import asyncio
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))


def check_python_version():
    version = sys.version_info
    print(f"[OK] Python version: {version.major}.{version.minor}.{version.micro}")

    if version.major != 3 or version.minor < 11:
        print("[WARN] Python 3.11+ required")
        return False
    return True


def check_imports():
    """Check if critical imports work"""
    print("\nChecking dependencies...")
    critical_imports = [
        ("fastapi", "FastAPI"),
        ("celery", "Celery"),
        ("sqlalchemy", "SQLAlchemy"),
        ("redis", "Redis"),
        ("httpx", "HTTPX"),
        ("structlog", "structlog"),
    ]

    failed = []
    for module_name, display_name in critical_imports:
        try:
            __import__(module_name)
            print(f"  [OK] {display_name}")
        except ImportError as e:
            print(f"  [FAIL] {display_name} - {e}")
            failed.append(display_name)

    return len(failed) == 0


def check_env_file():
    if Path(".env").exists():
        print("\n[OK] .env file found")
        return True
    print("\n[WARN] .env file not found - defaults will be used")
    return False


def check_taxonomy():
    """Check the keyword taxonomy loads"""
    print("\nChecking keyword taxonomy...")
    try:
        from clario.core.scoring import get_taxonomy
        taxonomy = get_taxonomy()
        for category in taxonomy:
            print(f"  [OK] {category.name}: {len(taxonomy.keywords_for(category))} keywords")
        return True
    except (OSError, ValueError) as e:
        print(f"  [FAIL] Taxonomy could not be loaded: {e}")
        return False


async def check_database():
    print("\nChecking database connection...")
    from sqlalchemy import text
    from sqlalchemy.exc import SQLAlchemyError
    from clario.core.database import engine

    try:
        async with engine.begin() as conn:
            await conn.execute(text("SELECT 1"))
        print("  [OK] Database connection successful")
        return True
    except (SQLAlchemyError, OSError) as e:
        print(f"  [FAIL] Database connection failed: {e}")
        return False
    finally:
        await engine.dispose()


def check_redis():
    print("\nChecking Redis connection...")
    import redis
    from clario.config import settings

    try:
        redis.from_url(settings.redis_url).ping()
        print("  [OK] Redis connection successful")
        return True
    except redis.RedisError as e:
        print(f"  [FAIL] Redis connection failed: {e}")
        return False


def check_celery():
    print("\nChecking Celery configuration...")
    from workers.celery_app import celery_app

    print("  [OK] Celery app configured")
    print(f"  -> Broker: {celery_app.conf.broker_url}")
    print(f"  -> Backend: {celery_app.conf.result_backend}")
    print(f"  -> Tasks: {sorted(t for t in celery_app.tasks if t.startswith('scoring.'))}")
    return True


async def main():
    print("=" * 60)
    print("Clario Scoring System Verification")
    print("=" * 60)

    results = []

    results.append(("Python Version", check_python_version()))
    results.append(("Dependencies", check_imports()))
    results.append(("Environment File", check_env_file()))
    results.append(("Keyword Taxonomy", check_taxonomy()))

    # Service checks (may fail if services not running)
    results.append(("Database", await check_database()))
    results.append(("Redis", check_redis()))
    results.append(("Celery Config", check_celery()))

    print("\n" + "=" * 60)
    print("Summary")
    print("=" * 60)

    passed = sum(1 for _, result in results if result)
    total = len(results)

    for name, result in results:
        status = "[PASS]" if result else "[FAIL]"
        print(f"{status} - {name}")

    print(f"\n{passed}/{total} checks passed")
    return 0 if passed == total else 1


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
