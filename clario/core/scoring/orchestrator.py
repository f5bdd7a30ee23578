"""Scoring Orchestrator - drives end-to-end score recalculation for videos."""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional, Tuple
import structlog

from clario.core.scoring.exceptions import ScoringError
from clario.core.scoring.normalizer import normalize
from clario.core.scoring.scorer import CategoryScore, score
from clario.core.scoring.store import ScoreRecord, ScoreStore
from clario.core.scoring.taxonomy import DEFAULT_TAXONOMY, KeywordTaxonomy, LearningCategory

logger = structlog.get_logger()


@dataclass
class ScoringResult:
    """Outcome of one recalculation."""
    video_id: int
    transcript_available: bool
    category_scores: List[Tuple[LearningCategory, CategoryScore]] = field(default_factory=list)
    records: Tuple[ScoreRecord, ...] = ()

    @property
    def total_score(self) -> int:
        return sum(s.score for _, s in self.category_scores)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "video_id": self.video_id,
            "transcript_available": self.transcript_available,
            "records_written": len(self.records),
            "scores": [
                {
                    "category_id": category.id,
                    "category": category.name,
                    "score": result.score,
                    "matched_keywords": list(result.matched_keywords)
                }
                for category, result in self.category_scores
            ]
        }


@dataclass
class BatchReport:
    """Summary of a multi-video recalculation."""
    succeeded: List[int] = field(default_factory=list)
    failed: Dict[int, str] = field(default_factory=dict)

    @property
    def total(self) -> int:
        return len(self.succeeded) + len(self.failed)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "processed": self.total,
            "successful": len(self.succeeded),
            "failed": len(self.failed),
            "failures": {str(k): v for k, v in self.failed.items()}
        }


class ScoringOrchestrator:
    """
    Recalculates learning-style scores for videos.

    The store is the only collaborator with side effects; normalization and
    scoring are pure. A recalculation reads the transcript once, scores every
    category of the taxonomy against the same normalized text and hands the
    complete record set to the store for an atomic replace.
    """

    def __init__(self, store: ScoreStore, taxonomy: Optional[KeywordTaxonomy] = None):
        self.store = store
        self.taxonomy = taxonomy or DEFAULT_TAXONOMY

    def score_transcript(
        self,
        transcript: Optional[str]
    ) -> List[Tuple[LearningCategory, CategoryScore]]:
        """Score a transcript against every category, in taxonomy order."""
        normalized = normalize(transcript)
        return [
            (category, score(normalized, self.taxonomy.keywords_for(category)))
            for category in self.taxonomy
        ]

    async def recalculate(self, video_id: int) -> ScoringResult:
        """
        Recompute and persist all category scores for a video.

        Raises:
            VideoNotFoundError: the video does not exist (nothing written)
            StorageFailureError: the replace did not commit (prior records kept)
        """
        transcript = await self.store.get_transcript(video_id)
        category_scores = self.score_transcript(transcript)

        if not transcript or not transcript.strip():
            logger.info("No transcript available, clearing scores", video_id=video_id)
            await self.store.replace_scores(video_id, [])
            return ScoringResult(
                video_id=video_id,
                transcript_available=False,
                category_scores=category_scores
            )

        records = tuple(
            ScoreRecord(
                video_id=video_id,
                category_id=category.id,
                score=result.score,
                matched_keywords=result.matched_keywords
            )
            for category, result in category_scores
        )

        await self.store.replace_scores(video_id, records)

        for category, result in category_scores:
            logger.debug(
                "Category scored",
                video_id=video_id,
                category=category.name,
                score=result.score
            )
        logger.info(
            "Scores recalculated",
            video_id=video_id,
            transcript_length=len(transcript),
            records=len(records)
        )

        return ScoringResult(
            video_id=video_id,
            transcript_available=True,
            category_scores=category_scores,
            records=records
        )

    async def recalculate_many(self, video_ids: Iterable[int]) -> BatchReport:
        """Recalculate several videos; one video's failure never stops the rest."""
        report = BatchReport()

        for video_id in video_ids:
            try:
                await self.recalculate(video_id)
                report.succeeded.append(video_id)
            except ScoringError as e:
                logger.warning("Recalculation failed", video_id=video_id, error=str(e))
                report.failed[video_id] = str(e)

        logger.info(
            "Batch recalculation finished",
            successful=len(report.succeeded),
            failed=len(report.failed)
        )
        return report
