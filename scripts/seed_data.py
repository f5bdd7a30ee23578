#!/usr/bin/env python3
"""Seed learning categories and sample videos, then score the videos"""

import asyncio
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from sqlalchemy import select

from clario.core.database import async_session_maker, engine
from clario.core.scoring import (
    ScoringOrchestrator,
    SqlAlchemyScoreStore,
    get_taxonomy,
    sync_learning_types
)
from clario.models.video import Video

SAMPLE_VIDEOS = [
    {
        "external_id": "sample-css-grid",
        "title": "CSS Grid Layout - Visual Guide",
        "description": "Master CSS Grid with visual examples and interactive demonstrations.",
        "transcript": (
            "CSS Grid is a powerful layout system. Look at this diagram on the screen: "
            "as you can see, the chart shows how each column lines up. The visual design "
            "makes the layout easy to follow."
        )
    },
    {
        "external_id": "sample-db-design",
        "title": "Database Design Principles Explained",
        "description": "Learn normalization, relationships and design patterns.",
        "transcript": (
            "The concept is simple. In other words, the theory of normalization says "
            "every fact lives in one place. Remember this key point and consider the "
            "principle behind it before you denormalize."
        )
    },
    {
        "external_id": "sample-todo-app",
        "title": "Build a Full-Stack Todo App - Step by Step",
        "description": "Hands-on tutorial building a complete todo application.",
        "transcript": (
            "Let's build a full-stack todo application from scratch. Code along with me, "
            "step-by-step. Try this exercise, then it's your turn to practice: implement "
            "the API, run the tests and debug anything that fails."
        )
    },
    {
        "external_id": "sample-no-transcript",
        "title": "Python Data Analysis Workshop",
        "description": "Transcript not yet available.",
        "transcript": None
    },
]


async def seed_learning_types():
    count = await sync_learning_types(async_session_maker, get_taxonomy())
    print(f"Seeded {count} learning types")


async def seed_videos():
    """Insert sample videos that are not present yet, returning their ids"""
    video_ids = []

    async with async_session_maker() as session:
        for data in SAMPLE_VIDEOS:
            result = await session.execute(
                select(Video).where(Video.external_id == data["external_id"])
            )
            video = result.scalar_one_or_none()
            if not video:
                video = Video(**data)
                session.add(video)
                await session.flush()
            video_ids.append(video.id)
        await session.commit()

    print(f"Seeded {len(video_ids)} sample videos")
    return video_ids


async def score_videos(video_ids):
    orchestrator = ScoringOrchestrator(SqlAlchemyScoreStore(async_session_maker), get_taxonomy())
    report = await orchestrator.recalculate_many(video_ids)

    for video_id in report.succeeded:
        for record in await orchestrator.store.get_scores(video_id):
            category = orchestrator.taxonomy.get_category(record.category_id)
            print(f"  video {video_id} {category.name}: {record.score} ({record.evidence})")

    for video_id, reason in report.failed.items():
        print(f"  video {video_id} failed: {reason}")


async def main():
    print("Seeding data...")

    try:
        await seed_learning_types()
        video_ids = await seed_videos()
        await score_videos(video_ids)
        print("\nData seeded successfully!")
    finally:
        await engine.dispose()


if __name__ == "__main__":
    asyncio.run(main())
