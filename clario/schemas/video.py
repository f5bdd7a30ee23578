"""Video and score Pydantic schemas"""

from pydantic import BaseModel, Field
from typing import Optional, List
from datetime import datetime


class VideoCreate(BaseModel):
    """Schema for creating a video"""
    title: str = Field(..., min_length=1, max_length=500)
    description: Optional[str] = None
    external_id: Optional[str] = Field(default=None, max_length=255)
    transcript: Optional[str] = None

    class Config:
        json_schema_extra = {
            "example": {
                "title": "CSS Grid Layout - Visual Guide",
                "description": "Master CSS Grid with visual examples.",
                "external_id": "dQw4w9WgXcQ",
                "transcript": "Look at this diagram on the screen..."
            }
        }


class VideoProcessRequest(BaseModel):
    """Schema for ingesting a video by its external source id"""
    external_id: str = Field(..., min_length=1, max_length=255)
    title: str = Field(..., min_length=1, max_length=500)
    description: Optional[str] = None


class VideoScoreResponse(BaseModel):
    """One learning-style score of a video"""
    category_id: int
    category: str
    score: int = Field(..., ge=0)
    matched_keywords: List[str] = []


class VideoResponse(BaseModel):
    """Schema for video response"""
    id: int
    external_id: Optional[str] = None
    title: str
    description: Optional[str] = None
    transcript: Optional[str] = None
    created_at: Optional[datetime] = None
    scores: List[VideoScoreResponse] = []

    class Config:
        from_attributes = True


class RecalculateResponse(BaseModel):
    """Result of a synchronous recalculation"""
    video_id: int
    transcript_available: bool
    records_written: int
    scores: List[VideoScoreResponse]


class BatchRecalculateRequest(BaseModel):
    """Schema for queueing a batch recalculation"""
    video_ids: Optional[List[int]] = Field(
        default=None,
        description="Videos to rescore; omit to rescore every transcribed video"
    )


class BatchRecalculateResponse(BaseModel):
    """Schema for a queued batch recalculation"""
    message: str
    task_id: str
    video_count: Optional[int] = None
