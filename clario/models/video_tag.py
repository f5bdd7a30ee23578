"""Video tag database model: one learning-style score per video and category"""

from sqlalchemy import Column, Integer, Text, ForeignKey, Index, UniqueConstraint, CheckConstraint
from sqlalchemy.orm import relationship

from clario.core.database import Base


class VideoTag(Base):
    """Persisted ScoreRecord"""
    __tablename__ = "video_tags"

    id = Column(Integer, primary_key=True, autoincrement=True)
    video_id = Column(
        Integer,
        ForeignKey("videos.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )
    learning_type_id = Column(
        Integer,
        ForeignKey("learning_types.id"),
        nullable=False
    )
    score = Column(Integer, nullable=False, default=0)
    keyword = Column(Text, nullable=False, default="")  # matched keywords, ", " joined

    # Relationships
    video = relationship("Video", back_populates="tags")
    learning_type = relationship("LearningType", back_populates="video_tags")

    __table_args__ = (
        UniqueConstraint("video_id", "learning_type_id", name="uq_video_learning_type"),
        CheckConstraint("score >= 0", name="ck_video_tag_score_non_negative"),
        Index("idx_video_tag_score", "video_id", "score"),
    )

    def __repr__(self):
        return f"<VideoTag video={self.video_id} type={self.learning_type_id} score={self.score}>"
