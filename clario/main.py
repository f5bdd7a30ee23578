from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
import logging
import structlog
from typing import AsyncGenerator

from clario.config import settings
from clario.api import categories, scoring, videos
from clario.core.database import engine, Base, async_session_maker
from clario.core.scoring import (
    StorageFailureError,
    VideoNotFoundError,
    get_taxonomy,
    sync_learning_types
)

# Configure structured logging
structlog.configure(
    processors=[
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.format_exc_info,
        structlog.dev.ConsoleRenderer() if settings.is_development else structlog.processors.JSONRenderer(),
    ],
    wrapper_class=structlog.make_filtering_bound_logger(
        logging.getLevelName(settings.log_level.upper())
    ),
    context_class=dict,
    cache_logger_on_first_use=True,
)

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator:
    """Application lifecycle management"""
    logger.info("Starting Clario scoring API", env=settings.app_env)

    # Create database tables
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    taxonomy = get_taxonomy()
    await sync_learning_types(async_session_maker, taxonomy)
    logger.info("Database initialized", categories=len(taxonomy))

    yield

    await engine.dispose()
    logger.info("Shutting down API")


app = FastAPI(
    title="Clario Scoring API",
    description="Learning-style compatibility scoring for video transcripts",
    version="1.0.0",
    lifespan=lifespan,
    debug=settings.debug
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"] if settings.is_development else ["http://localhost:3000"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(VideoNotFoundError)
async def video_not_found_handler(request: Request, exc: VideoNotFoundError):
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={"detail": str(exc)}
    )


@app.exception_handler(StorageFailureError)
async def storage_failure_handler(request: Request, exc: StorageFailureError):
    logger.error("Score storage failure", video_id=exc.video_id, path=request.url.path)
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"detail": f"Scores for video {exc.video_id} could not be saved. Please retry."}
    )


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.error("Unhandled exception", exc_info=exc, path=request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "An internal error occurred. Please try again later."}
    )


@app.get("/health")
async def health_check():
    return {
        "status": "healthy",
        "environment": settings.app_env,
        "version": "1.0.0"
    }


app.include_router(videos.router, prefix="/api/v1/videos", tags=["Videos"])
app.include_router(categories.router, prefix="/api/v1/categories", tags=["Categories"])
app.include_router(scoring.router, prefix="/api/v1/scoring", tags=["Scoring"])


@app.get("/")
async def root():
    return {
        "message": "Clario Scoring API",
        "docs": "/docs",
        "health": "/health"
    }
