"""Database models package"""

from clario.models.learning_type import LearningType
from clario.models.video import Video
from clario.models.video_tag import VideoTag

__all__ = [
    "LearningType",
    "Video",
    "VideoTag"
]
