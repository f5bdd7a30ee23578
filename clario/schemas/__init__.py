"""Pydantic schemas package"""

from clario.schemas.category import LearningCategoryResponse
from clario.schemas.video import (
    VideoCreate,
    VideoProcessRequest,
    VideoResponse,
    VideoScoreResponse,
    RecalculateResponse,
    BatchRecalculateRequest,
    BatchRecalculateResponse
)

__all__ = [
    "LearningCategoryResponse",
    "VideoCreate",
    "VideoProcessRequest",
    "VideoResponse",
    "VideoScoreResponse",
    "RecalculateResponse",
    "BatchRecalculateRequest",
    "BatchRecalculateResponse"
]
