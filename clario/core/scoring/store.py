"""Score store adapters: the storage boundary of the scoring engine."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Tuple
import asyncio

from sqlalchemy import select, delete, insert
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
import structlog

from clario.core.scoring.exceptions import VideoNotFoundError, StorageFailureError
from clario.core.scoring.taxonomy import EVIDENCE_SEPARATOR, KeywordTaxonomy
from clario.models.learning_type import LearningType
from clario.models.video import Video
from clario.models.video_tag import VideoTag

logger = structlog.get_logger()


@dataclass(frozen=True)
class ScoreRecord:
    """One category's score for one video."""
    video_id: int
    category_id: int
    score: int
    matched_keywords: Tuple[str, ...] = ()

    @property
    def evidence(self) -> str:
        return EVIDENCE_SEPARATOR.join(self.matched_keywords)

    @classmethod
    def from_tag(cls, tag: VideoTag) -> "ScoreRecord":
        keywords = tuple(tag.keyword.split(EVIDENCE_SEPARATOR)) if tag.keyword else ()
        return cls(
            video_id=tag.video_id,
            category_id=tag.learning_type_id,
            score=tag.score,
            matched_keywords=keywords
        )

    def to_row(self) -> Dict[str, object]:
        """Column values for a video_tags insert."""
        return {
            "video_id": self.video_id,
            "learning_type_id": self.category_id,
            "score": self.score,
            "keyword": self.evidence
        }


class ScoreStore(ABC):
    """
    Storage interface used by the scoring orchestrator.

    Implementations must make replace_scores atomic: either every old
    record for the video is gone and every new one present, or nothing
    changed.
    """

    @abstractmethod
    async def get_transcript(self, video_id: int) -> Optional[str]:
        """Return the transcript (None if absent). Raises VideoNotFoundError."""

    @abstractmethod
    async def replace_scores(self, video_id: int, records: Sequence[ScoreRecord]) -> None:
        """Atomically delete existing records and insert new ones."""

    @abstractmethod
    async def get_scores(self, video_id: int) -> List[ScoreRecord]:
        """Return the video's records ordered by category id."""


class SqlAlchemyScoreStore(ScoreStore):
    """ScoreStore backed by the videos and video_tags tables."""

    def __init__(self, session_factory: async_sessionmaker):
        self._session_factory = session_factory

    async def get_transcript(self, video_id: int) -> Optional[str]:
        try:
            async with self._session_factory() as session:
                result = await session.execute(
                    select(Video.id, Video.transcript).where(Video.id == video_id)
                )
                row = result.one_or_none()
        except SQLAlchemyError as e:
            logger.error("Transcript read failed", video_id=video_id, error=str(e))
            raise StorageFailureError(video_id, str(e)) from e

        if row is None:
            raise VideoNotFoundError(video_id)
        return row.transcript

    async def replace_scores(self, video_id: int, records: Sequence[ScoreRecord]) -> None:
        async with self._session_factory() as session:
            try:
                async with session.begin():
                    await self._lock_video(session, video_id)
                    await session.execute(
                        delete(VideoTag).where(VideoTag.video_id == video_id)
                    )
                    if records:
                        await session.execute(
                            insert(VideoTag),
                            [record.to_row() for record in records]
                        )
            except SQLAlchemyError as e:
                logger.error(
                    "Score replacement rolled back",
                    video_id=video_id,
                    error=str(e)
                )
                raise StorageFailureError(video_id, str(e)) from e

        logger.debug("Scores replaced", video_id=video_id, count=len(records))

    async def get_scores(self, video_id: int) -> List[ScoreRecord]:
        async with self._session_factory() as session:
            result = await session.execute(
                select(VideoTag)
                .where(VideoTag.video_id == video_id)
                .order_by(VideoTag.learning_type_id)
            )
            return [ScoreRecord.from_tag(tag) for tag in result.scalars().all()]

    @staticmethod
    async def _lock_video(session: AsyncSession, video_id: int) -> None:
        """Row-lock the owning video so concurrent replaces of it serialize."""
        result = await session.execute(
            select(Video.id).where(Video.id == video_id).with_for_update()
        )
        if result.scalar_one_or_none() is None:
            raise VideoNotFoundError(video_id)


class InMemoryScoreStore(ScoreStore):
    """Dictionary-backed ScoreStore for tests and local tooling."""

    def __init__(self, transcripts: Optional[Dict[int, Optional[str]]] = None):
        self._transcripts: Dict[int, Optional[str]] = dict(transcripts or {})
        self._scores: Dict[int, Tuple[ScoreRecord, ...]] = {}
        self._lock = asyncio.Lock()

    def set_transcript(self, video_id: int, transcript: Optional[str]) -> None:
        self._transcripts[video_id] = transcript

    def delete_video(self, video_id: int) -> None:
        self._transcripts.pop(video_id, None)
        self._scores.pop(video_id, None)

    async def get_transcript(self, video_id: int) -> Optional[str]:
        if video_id not in self._transcripts:
            raise VideoNotFoundError(video_id)
        return self._transcripts[video_id]

    async def replace_scores(self, video_id: int, records: Sequence[ScoreRecord]) -> None:
        async with self._lock:
            if video_id not in self._transcripts:
                raise VideoNotFoundError(video_id)
            self._scores[video_id] = tuple(records)

    async def get_scores(self, video_id: int) -> List[ScoreRecord]:
        records = self._scores.get(video_id, ())
        return sorted(records, key=lambda r: r.category_id)


async def sync_learning_types(session_factory: async_sessionmaker, taxonomy: KeywordTaxonomy) -> int:
    """
    Upsert one learning_types row per taxonomy category.

    Score records reference these rows, so this must run after the schema
    is created and before any video is scored. Rows for categories no
    longer in the taxonomy are left alone.
    """
    async with session_factory() as session:
        async with session.begin():
            for category in taxonomy:
                existing = await session.get(LearningType, category.id)
                if existing:
                    existing.type_name = category.name
                    existing.description = category.description
                else:
                    session.add(LearningType(
                        id=category.id,
                        type_name=category.name,
                        description=category.description
                    ))

    logger.info("Learning types synced", count=len(taxonomy))
    return len(taxonomy)
