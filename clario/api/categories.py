"""Learning category API endpoints"""

from fastapi import APIRouter, Depends
from typing import List

from clario.api.deps import get_taxonomy
from clario.core.scoring import KeywordTaxonomy
from clario.schemas.category import LearningCategoryResponse

router = APIRouter()


@router.get("/", response_model=List[LearningCategoryResponse])
async def list_categories(taxonomy: KeywordTaxonomy = Depends(get_taxonomy)):
    """List learning categories with the keywords used to score them"""
    return [
        LearningCategoryResponse(
            id=category.id,
            name=category.name,
            description=category.description,
            keywords=list(taxonomy.keywords_for(category))
        )
        for category in taxonomy
    ]
