"""Video compatibility scoring engine"""

from clario.core.scoring.exceptions import ScoringError, VideoNotFoundError, StorageFailureError
from clario.core.scoring.normalizer import normalize
from clario.core.scoring.orchestrator import ScoringOrchestrator, ScoringResult, BatchReport
from clario.core.scoring.scorer import CategoryScore, score
from clario.core.scoring.store import (
    ScoreRecord,
    ScoreStore,
    SqlAlchemyScoreStore,
    InMemoryScoreStore,
    sync_learning_types
)
from clario.core.scoring.taxonomy import (
    DEFAULT_TAXONOMY,
    KeywordTaxonomy,
    LearningCategory,
    load_taxonomy,
    get_taxonomy
)

__all__ = [
    "ScoringError",
    "VideoNotFoundError",
    "StorageFailureError",
    "normalize",
    "ScoringOrchestrator",
    "ScoringResult",
    "BatchReport",
    "CategoryScore",
    "score",
    "ScoreRecord",
    "ScoreStore",
    "SqlAlchemyScoreStore",
    "InMemoryScoreStore",
    "sync_learning_types",
    "DEFAULT_TAXONOMY",
    "KeywordTaxonomy",
    "LearningCategory",
    "load_taxonomy",
    "get_taxonomy"
]
