"""Shared fixtures for the scoring test suite"""

import os

# Must be set before clario.config is imported anywhere
os.environ.setdefault("APP_ENV", "test")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("CELERY_BROKER_URL", "memory://")
os.environ.setdefault("CELERY_RESULT_BACKEND", "cache+memory://")

import pytest
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from clario.core.database import Base
from clario.core.scoring import (
    DEFAULT_TAXONOMY,
    InMemoryScoreStore,
    KeywordTaxonomy,
    LearningCategory,
    SqlAlchemyScoreStore,
    sync_learning_types
)
from clario.models import Video

VISUAL = LearningCategory(id=1, name="Visual")
AUDITORY = LearningCategory(id=2, name="Auditory")
KINESTHETIC = LearningCategory(id=3, name="Kinesthetic")

VISUAL_TRANSCRIPT = (
    "Look at this diagram on the screen, it's very visual and another diagram below"
)
PRACTICE_TRANSCRIPT = "Time to practice! This hands-on exercise: practice, practice."


@pytest.fixture
def taxonomy():
    """Small taxonomy with hand-checkable keyword sets"""
    return KeywordTaxonomy([
        (VISUAL, ["diagram", "screen", "visual"]),
        (AUDITORY, ["listen", "explain", "in other words"]),
        (KINESTHETIC, ["hands-on", "practice", "exercise"]),
    ])


@pytest.fixture
def memory_store():
    return InMemoryScoreStore()


@pytest.fixture
async def db_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False}
    )

    @event.listens_for(engine.sync_engine, "connect")
    def _enable_foreign_keys(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest.fixture
def bare_session_factory(db_engine):
    """Session factory over an empty schema, no learning types"""
    return async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def session_factory(bare_session_factory):
    await sync_learning_types(bare_session_factory, DEFAULT_TAXONOMY)
    return bare_session_factory


@pytest.fixture
def sql_store(session_factory):
    return SqlAlchemyScoreStore(session_factory)


@pytest.fixture
def make_video(session_factory):
    """Insert a video row and return its id"""
    async def _make(transcript=None, title="Test video", external_id=None):
        async with session_factory() as session:
            video = Video(title=title, transcript=transcript, external_id=external_id)
            session.add(video)
            await session.commit()
            return video.id

    return _make
