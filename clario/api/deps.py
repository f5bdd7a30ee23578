"""Shared FastAPI dependencies"""

from typing import AsyncGenerator

from fastapi import Depends

from clario.core.database import async_session_maker
from clario.core.scoring import (
    KeywordTaxonomy,
    ScoreStore,
    ScoringOrchestrator,
    SqlAlchemyScoreStore,
    get_taxonomy
)
from clario.utils.transcript_client import TranscriptClient


def get_score_store() -> ScoreStore:
    return SqlAlchemyScoreStore(async_session_maker)


def get_orchestrator(
    store: ScoreStore = Depends(get_score_store),
    taxonomy: KeywordTaxonomy = Depends(get_taxonomy)
) -> ScoringOrchestrator:
    return ScoringOrchestrator(store, taxonomy)


async def get_transcript_client() -> AsyncGenerator[TranscriptClient, None]:
    async with TranscriptClient() as client:
        yield client
