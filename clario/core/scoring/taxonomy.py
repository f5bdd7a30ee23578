"""Keyword taxonomy: learning-style categories and their keyword vocabularies."""

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Dict, Iterable, Iterator, List, Mapping, Optional, Tuple
import json

from pydantic import BaseModel, Field, field_validator
import structlog

logger = structlog.get_logger()

# Joins matched keywords in the persisted evidence string, so keywords may not contain it
EVIDENCE_SEPARATOR = ", "


@dataclass(frozen=True)
class LearningCategory:
    """A learning-style category as used by the scorer."""
    id: int
    name: str
    description: str = ""


class KeywordTaxonomy:
    """
    Immutable mapping of learning category to an ordered keyword set.

    Keyword order is preserved because matched-keyword evidence is reported
    in taxonomy order. Duplicates within one category are dropped (first
    occurrence wins); overlap between categories is allowed.
    """

    def __init__(self, entries: Iterable[Tuple[LearningCategory, Iterable[str]]]):
        vocab: Dict[LearningCategory, Tuple[str, ...]] = {}
        seen_ids = set()

        for category, keywords in entries:
            if category.id in seen_ids:
                raise ValueError(f"Duplicate learning category id {category.id}")
            seen_ids.add(category.id)
            keywords = [k.strip() for k in keywords if k.strip()]
            for keyword in keywords:
                if "," in keyword:
                    raise ValueError(f"Keyword {keyword!r} of {category.name} contains a comma")
            # dict.fromkeys keeps first-seen order
            vocab[category] = tuple(dict.fromkeys(keywords))

        self._vocab: Mapping[LearningCategory, Tuple[str, ...]] = MappingProxyType(vocab)

    @property
    def categories(self) -> Tuple[LearningCategory, ...]:
        return tuple(self._vocab)

    def keywords_for(self, category: LearningCategory) -> Tuple[str, ...]:
        return self._vocab[category]

    def get_category(self, category_id: int) -> Optional[LearningCategory]:
        for category in self._vocab:
            if category.id == category_id:
                return category
        return None

    def __iter__(self) -> Iterator[LearningCategory]:
        return iter(self._vocab)

    def __len__(self) -> int:
        return len(self._vocab)


VISUAL = LearningCategory(
    id=1,
    name="Visual",
    description=(
        "Learns best through visual aids, diagrams, charts, and written instructions. "
        "Prefers to see information presented graphically."
    )
)
AUDITORY = LearningCategory(
    id=2,
    name="Auditory",
    description=(
        "Learns best through listening, discussions, and verbal explanations. "
        "Prefers audio content and spoken instructions."
    )
)
KINESTHETIC = LearningCategory(
    id=3,
    name="Kinesthetic",
    description=(
        "Learns best through hands-on activities, practice, and physical engagement. "
        "Prefers interactive and practical experiences."
    )
)

DEFAULT_TAXONOMY = KeywordTaxonomy([
    (VISUAL, [
        "look at this diagram", "as you can see", "on the screen", "whiteboard",
        "illustration", "flowchart", "demonstration", "visual", "diagram",
        "chart", "graph", "image", "picture", "show", "display", "interface",
        "layout", "design", "color", "highlight", "arrow", "pointer",
    ]),
    (AUDITORY, [
        "the concept is", "the theory", "in other words", "to explain",
        "listen closely", "the principle is", "imagine that", "understand",
        "concept", "theory", "principle", "idea", "think about", "consider",
        "remember", "important", "key point", "basically", "essentially",
        "fundamentally", "conceptually", "theoretically",
    ]),
    (KINESTHETIC, [
        "let's build", "code along", "step-by-step", "try this", "your turn",
        "project", "exercise", "hands-on", "practice", "implement", "create",
        "build", "make", "do", "action", "execute", "run", "test", "debug",
        "fix", "solve", "work through", "tutorial", "workshop", "lab",
    ]),
])


class TaxonomyCategoryFile(BaseModel):
    """One category entry of a taxonomy JSON file"""
    id: int = Field(..., ge=1)
    name: str = Field(..., min_length=1, max_length=100)
    description: str = ""
    keywords: List[str] = Field(..., min_length=1)

    @field_validator("keywords")
    @classmethod
    def keywords_not_blank(cls, v: List[str]) -> List[str]:
        if not any(k.strip() for k in v):
            raise ValueError("keywords must contain at least one non-blank entry")
        if any("," in k for k in v):
            raise ValueError("keywords must not contain commas")
        return v


class TaxonomyFile(BaseModel):
    """Schema of a taxonomy JSON file"""
    categories: List[TaxonomyCategoryFile] = Field(..., min_length=1)


def load_taxonomy(path: Optional[str] = None) -> KeywordTaxonomy:
    """
    Load the taxonomy from a JSON file, or return the built-in one.

    Args:
        path: JSON file of the form {"categories": [{"id", "name", "keywords"}]}

    Raises:
        pydantic.ValidationError: if the file does not match TaxonomyFile
    """
    if not path:
        return DEFAULT_TAXONOMY

    raw = json.loads(Path(path).read_text(encoding="utf-8"))
    parsed = TaxonomyFile.model_validate(raw)

    taxonomy = KeywordTaxonomy(
        (LearningCategory(id=c.id, name=c.name, description=c.description), c.keywords)
        for c in parsed.categories
    )
    logger.info("Loaded keyword taxonomy", path=path, categories=len(taxonomy))
    return taxonomy


@lru_cache()
def get_taxonomy() -> KeywordTaxonomy:
    """Taxonomy loaded once per process from settings.taxonomy_path"""
    from clario.config import settings
    return load_taxonomy(settings.taxonomy_path)
