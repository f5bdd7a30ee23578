"""Scoring Celery tasks for learning-style recalculation."""

from typing import List, Optional
from sqlalchemy import select
import structlog

from workers.celery_app import celery_app
from clario.config import settings
from clario.core.database import async_session_maker
from clario.core.scoring import (
    BatchReport,
    ScoringOrchestrator,
    SqlAlchemyScoreStore,
    StorageFailureError,
    VideoNotFoundError,
    get_taxonomy
)
from clario.models.video import Video
from clario.utils.async_utils import run_async

logger = structlog.get_logger()


def _build_orchestrator() -> ScoringOrchestrator:
    return ScoringOrchestrator(SqlAlchemyScoreStore(async_session_maker), get_taxonomy())


async def _transcribed_video_ids() -> List[int]:
    async with async_session_maker() as session:
        result = await session.execute(
            select(Video.id)
            .where(Video.transcript.is_not(None))
            .order_by(Video.id)
        )
        return list(result.scalars().all())


@celery_app.task(
    bind=True,
    name="scoring.recalculate_video",
    max_retries=3,
    default_retry_delay=30
)
def recalculate_video(self, video_id: int):
    """
    Recalculate learning-style scores for one video.

    Storage failures leave prior scores intact and are retried; a missing
    video is reported without retrying.
    """
    try:
        result = run_async(_build_orchestrator().recalculate(video_id))
    except VideoNotFoundError as e:
        logger.error("Video not found", video_id=video_id)
        return {"error": str(e)}
    except StorageFailureError as e:
        logger.warning("Storage failure, retrying", video_id=video_id, error=str(e))
        raise self.retry(exc=e)

    return result.to_dict()


@celery_app.task(bind=True, name="scoring.recalculate_batch")
def recalculate_batch(self, video_ids: Optional[List[int]] = None):
    """
    Recalculate scores for many videos.

    Each video is an independent unit of work: failures are collected in
    the returned summary and never abort the remaining videos.

    Args:
        video_ids: Videos to rescore; None rescores every transcribed video
    """
    async def _run():
        ids = video_ids if video_ids is not None else await _transcribed_video_ids()
        orchestrator = _build_orchestrator()
        report = BatchReport()

        logger.info("Starting batch recalculation", count=len(ids))

        for start in range(0, len(ids), settings.batch_size):
            chunk = ids[start:start + settings.batch_size]
            chunk_report = await orchestrator.recalculate_many(chunk)
            report.succeeded.extend(chunk_report.succeeded)
            report.failed.update(chunk_report.failed)

            self.update_state(
                state="PROGRESS",
                meta={
                    "current": report.total,
                    "total": len(ids),
                    "failed": len(report.failed)
                }
            )

        return report.to_dict()

    return run_async(_run())
