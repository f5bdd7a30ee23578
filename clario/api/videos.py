"""Video and learning-style score API endpoints"""

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, delete
from typing import Iterable, List
import structlog

from clario.api.deps import (
    get_orchestrator,
    get_score_store,
    get_taxonomy,
    get_transcript_client
)
from clario.core.database import get_db
from clario.core.scoring import KeywordTaxonomy, ScoreRecord, ScoreStore, ScoringOrchestrator
from clario.models.video import Video
from clario.models.video_tag import VideoTag
from clario.schemas.video import (
    VideoCreate,
    VideoProcessRequest,
    VideoResponse,
    VideoScoreResponse,
    RecalculateResponse
)
from clario.utils.transcript_client import TranscriptClient

router = APIRouter()
logger = structlog.get_logger()


def _rank_scores(
    records: Iterable[ScoreRecord],
    taxonomy: KeywordTaxonomy
) -> List[VideoScoreResponse]:
    """Score records as responses, highest score first."""
    responses = []
    for record in records:
        category = taxonomy.get_category(record.category_id)
        responses.append(VideoScoreResponse(
            category_id=record.category_id,
            category=category.name if category else f"Category {record.category_id}",
            score=record.score,
            matched_keywords=list(record.matched_keywords)
        ))
    return sorted(responses, key=lambda r: (-r.score, r.category_id))


async def _get_video_or_404(db: AsyncSession, video_id: int) -> Video:
    result = await db.execute(select(Video).where(Video.id == video_id))
    video = result.scalar_one_or_none()

    if not video:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Video {video_id} not found"
        )

    return video


def _video_response(video: Video, scores: List[VideoScoreResponse]) -> VideoResponse:
    return VideoResponse(
        id=video.id,
        external_id=video.external_id,
        title=video.title,
        description=video.description,
        transcript=video.transcript,
        created_at=video.created_at,
        scores=scores
    )


@router.post("/", response_model=VideoResponse, status_code=status.HTTP_201_CREATED)
async def create_video(
    video_data: VideoCreate,
    db: AsyncSession = Depends(get_db),
    orchestrator: ScoringOrchestrator = Depends(get_orchestrator)
):
    """Create a video and score its transcript"""
    video = Video(**video_data.model_dump())
    db.add(video)
    await db.commit()
    await db.refresh(video)

    logger.info("Video created", video_id=video.id, has_transcript=bool(video.transcript))

    result = await orchestrator.recalculate(video.id)
    return _video_response(video, _rank_scores(result.records, orchestrator.taxonomy))


@router.post("/process", response_model=VideoResponse)
async def process_video(
    request: VideoProcessRequest,
    db: AsyncSession = Depends(get_db),
    orchestrator: ScoringOrchestrator = Depends(get_orchestrator),
    transcripts: TranscriptClient = Depends(get_transcript_client)
):
    """Ingest a video by external id: fetch its transcript, store it and score it"""
    transcript = await transcripts.fetch_transcript(request.external_id)

    result = await db.execute(
        select(Video).where(Video.external_id == request.external_id)
    )
    video = result.scalar_one_or_none()

    if video:
        video.title = request.title
        video.description = request.description
        video.transcript = transcript
    else:
        video = Video(
            external_id=request.external_id,
            title=request.title,
            description=request.description,
            transcript=transcript
        )
        db.add(video)

    await db.commit()
    await db.refresh(video)

    logger.info(
        "Video processed",
        video_id=video.id,
        external_id=request.external_id,
        has_transcript=transcript is not None
    )

    scoring = await orchestrator.recalculate(video.id)
    return _video_response(video, _rank_scores(scoring.records, orchestrator.taxonomy))


@router.get("/{video_id}", response_model=VideoResponse)
async def get_video(
    video_id: int,
    db: AsyncSession = Depends(get_db),
    store: ScoreStore = Depends(get_score_store),
    taxonomy: KeywordTaxonomy = Depends(get_taxonomy)
):
    """Get video details with transcript and learning-style scores"""
    video = await _get_video_or_404(db, video_id)
    records = await store.get_scores(video_id)
    return _video_response(video, _rank_scores(records, taxonomy))


@router.delete("/{video_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_video(
    video_id: int,
    db: AsyncSession = Depends(get_db)
):
    """Delete a video together with its scores"""
    await _get_video_or_404(db, video_id)

    await db.execute(delete(VideoTag).where(VideoTag.video_id == video_id))
    await db.execute(delete(Video).where(Video.id == video_id))
    await db.commit()

    logger.info("Video deleted", video_id=video_id)


@router.get("/{video_id}/scores", response_model=List[VideoScoreResponse])
async def get_video_scores(
    video_id: int,
    db: AsyncSession = Depends(get_db),
    store: ScoreStore = Depends(get_score_store),
    taxonomy: KeywordTaxonomy = Depends(get_taxonomy)
):
    """Get learning-style scores for a video, highest first"""
    await _get_video_or_404(db, video_id)
    records = await store.get_scores(video_id)
    return _rank_scores(records, taxonomy)


@router.post("/{video_id}/scores/recalculate", response_model=RecalculateResponse)
async def recalculate_video_scores(
    video_id: int,
    orchestrator: ScoringOrchestrator = Depends(get_orchestrator)
):
    """
    Recalculate a video's scores from its current transcript.

    Without a transcript every category reports zero and no records remain.
    """
    result = await orchestrator.recalculate(video_id)
    scores = [
        VideoScoreResponse(
            category_id=category.id,
            category=category.name,
            score=category_score.score,
            matched_keywords=list(category_score.matched_keywords)
        )
        for category, category_score in result.category_scores
    ]

    return RecalculateResponse(
        video_id=video_id,
        transcript_available=result.transcript_available,
        records_written=len(result.records),
        scores=sorted(scores, key=lambda s: (-s.score, s.category_id))
    )
