"""Video database model"""

from sqlalchemy import Column, Integer, String, Text, DateTime, Index
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from clario.core.database import Base


class Video(Base):
    """Videos: learning content with an optional transcript"""
    __tablename__ = "videos"

    id = Column(Integer, primary_key=True, autoincrement=True)
    external_id = Column(String(255), nullable=True, unique=True)
    title = Column(Text, nullable=False)
    description = Column(Text, nullable=True)
    transcript = Column(Text, nullable=True)
    created_at = Column(
        DateTime(timezone=True),
        server_default=func.now()
    )
    updated_at = Column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now()
    )

    # Relationships
    tags = relationship(
        "VideoTag",
        back_populates="video",
        cascade="all, delete-orphan",
        passive_deletes=True
    )

    __table_args__ = (
        Index("idx_video_created", "created_at"),
    )

    def __repr__(self):
        return f"<Video {self.id} ({self.title!r})>"
