"""Batch scoring API endpoints"""

from fastapi import APIRouter, status
import structlog

from clario.schemas.video import BatchRecalculateRequest, BatchRecalculateResponse
from clario.tasks.scoring_tasks import recalculate_batch

router = APIRouter()
logger = structlog.get_logger()


@router.post(
    "/recalculate",
    response_model=BatchRecalculateResponse,
    status_code=status.HTTP_202_ACCEPTED
)
async def queue_batch_recalculation(request: BatchRecalculateRequest):
    """Queue a background recalculation for the given videos, or all of them"""
    task = recalculate_batch.delay(request.video_ids)

    logger.info(
        "Batch recalculation queued",
        task_id=task.id,
        video_count=len(request.video_ids) if request.video_ids is not None else "all"
    )

    return BatchRecalculateResponse(
        message="Recalculation queued",
        task_id=task.id,
        video_count=len(request.video_ids) if request.video_ids is not None else None
    )
