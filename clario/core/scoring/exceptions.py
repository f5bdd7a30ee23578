"""Scoring engine errors"""


class ScoringError(Exception):
    """Base class for scoring failures."""


class VideoNotFoundError(ScoringError):
    """The referenced video does not exist; nothing was written."""

    def __init__(self, video_id: int):
        self.video_id = video_id
        super().__init__(f"Video {video_id} not found")


class StorageFailureError(ScoringError):
    """The atomic score replacement did not commit; prior records are intact."""

    def __init__(self, video_id: int, reason: str = ""):
        self.video_id = video_id
        self.reason = reason
        message = f"Failed to persist scores for video {video_id}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
