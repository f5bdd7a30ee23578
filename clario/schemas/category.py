"""Learning category Pydantic schemas"""

from pydantic import BaseModel
from typing import List


class LearningCategoryResponse(BaseModel):
    """Schema for a learning category and its keyword vocabulary"""
    id: int
    name: str
    description: str = ""
    keywords: List[str]
