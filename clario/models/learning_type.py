"""Learning type database model"""

from sqlalchemy import Column, Integer, String, Text
from sqlalchemy.orm import relationship

from clario.core.database import Base


class LearningType(Base):
    """Learning types: reference data seeded at setup, never mutated at runtime"""
    __tablename__ = "learning_types"

    id = Column(Integer, primary_key=True, autoincrement=False)
    type_name = Column(String(100), nullable=False, unique=True)
    description = Column(Text, nullable=True)

    # Relationships
    video_tags = relationship("VideoTag", back_populates="learning_type")

    def __repr__(self):
        return f"<LearningType {self.id}:{self.type_name}>"
