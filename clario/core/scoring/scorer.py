"""Per-category keyword scorer."""

from dataclasses import dataclass
from functools import lru_cache
from typing import Iterable, Optional, Pattern, Tuple
import re

from clario.core.scoring.normalizer import normalize
from clario.core.scoring.taxonomy import EVIDENCE_SEPARATOR


@dataclass(frozen=True)
class CategoryScore:
    """Score for one category: raw occurrence count plus the evidence behind it."""
    score: int = 0
    matched_keywords: Tuple[str, ...] = ()

    @property
    def evidence(self) -> str:
        """Matched keywords as the persisted evidence string."""
        return EVIDENCE_SEPARATOR.join(self.matched_keywords)


@lru_cache(maxsize=1024)
def _keyword_pattern(keyword: str) -> Optional[Pattern[str]]:
    """
    Compile a whole-token pattern for a keyword.

    Normalized text only contains word characters separated by single
    spaces, so a token boundary is a space or either end of the string.
    """
    phrase = normalize(keyword)
    if not phrase:
        return None
    return re.compile(r"(?<!\S)" + re.escape(phrase) + r"(?!\S)")


def count_occurrences(normalized_text: str, keyword: str) -> int:
    """Count non-overlapping whole-token occurrences of keyword."""
    if not normalized_text:
        return 0
    pattern = _keyword_pattern(keyword)
    if pattern is None:
        return 0
    return sum(1 for _ in pattern.finditer(normalized_text))


def score(normalized_text: str, keywords: Iterable[str]) -> CategoryScore:
    """
    Score normalized text against one category's keywords.

    Every occurrence of every keyword counts once; there is no per-keyword
    weighting and no cap on repeats. Matched keywords are listed in the
    order given, not transcript order.
    """
    if not normalized_text:
        return CategoryScore()

    total = 0
    matched = []
    for keyword in keywords:
        count = count_occurrences(normalized_text, keyword)
        if count:
            total += count
            matched.append(keyword)

    return CategoryScore(score=total, matched_keywords=tuple(matched))
