"""Tests for the per-category keyword scorer"""

import pytest

from clario.core.scoring.normalizer import normalize
from clario.core.scoring.scorer import CategoryScore, count_occurrences, score
from clario.core.scoring.taxonomy import DEFAULT_TAXONOMY

VISUAL_KEYWORDS = ("diagram", "screen", "visual")
KINESTHETIC_KEYWORDS = ("hands-on", "practice", "exercise")


class TestScore:
    """Test score()"""

    def test_visual_example(self):
        """Test the reference example: diagram x2, screen x1, visual x1"""
        text = normalize(
            "Look at this diagram on the screen, it's very visual and another diagram below"
        )

        result = score(text, VISUAL_KEYWORDS)

        assert result.score == 4
        assert result.matched_keywords == ("diagram", "screen", "visual")

    def test_no_matches_is_zero(self):
        result = score(normalize("We will discuss the theory today"), KINESTHETIC_KEYWORDS)

        assert result == CategoryScore(score=0, matched_keywords=())
        assert result.evidence == ""

    def test_empty_text_is_zero(self):
        assert score("", VISUAL_KEYWORDS) == CategoryScore()

    @pytest.mark.parametrize("raw", ["Diagram", "diagram,", "DIAGRAM!"])
    def test_case_and_punctuation_insensitive(self, raw):
        assert score(normalize(raw), VISUAL_KEYWORDS).score == 1

    def test_word_boundary(self):
        """Test that a longer word containing the keyword does not match"""
        result = score(normalize("A diagrammatic overview of screens"), VISUAL_KEYWORDS)

        assert result.score == 0
        assert result.matched_keywords == ()

    def test_matched_keywords_follow_keyword_order(self):
        """Test evidence order is keyword order, not transcript order"""
        result = score(normalize("visual screen diagram"), VISUAL_KEYWORDS)

        assert result.matched_keywords == ("diagram", "screen", "visual")
        assert result.evidence == "diagram, screen, visual"

    def test_hyphenated_keyword(self):
        text = normalize("A HANDS-ON session. Truly hands on.")

        assert score(text, KINESTHETIC_KEYWORDS).score == 2

    def test_repeats_are_not_capped(self):
        text = normalize("practice " * 25)

        assert score(text, KINESTHETIC_KEYWORDS).score == 25

    def test_deterministic(self):
        text = normalize("Practice the exercise, then practice again. Hands-on!")

        results = {score(text, KINESTHETIC_KEYWORDS) for _ in range(5)}

        assert len(results) == 1


class TestCountOccurrences:
    """Test phrase matching rules"""

    def test_phrase_must_be_contiguous(self):
        assert count_occurrences(normalize("on the screen"), "on the screen") == 1
        assert count_occurrences(normalize("screen the on"), "on the screen") == 0
        assert count_occurrences(normalize("on the big screen"), "on the screen") == 0

    def test_phrase_spanning_punctuation(self):
        assert count_occurrences(normalize("In other words, yes"), "in other words") == 1

    def test_non_overlapping(self):
        assert count_occurrences("ha ha ha", "ha ha") == 1
        assert count_occurrences("ha ha ha ha", "ha ha") == 2

    def test_keyword_at_text_edges(self):
        assert count_occurrences("diagram middle diagram", "diagram") == 2

    def test_blank_keyword_never_matches(self):
        assert count_occurrences("anything at all", "  !! ") == 0


class TestDefaultTaxonomyScoring:
    """Test scoring against the built-in vocabulary"""

    def test_phrase_and_word_keywords_both_count(self):
        """Test 'look at this diagram' and 'diagram' each count once"""
        visual = DEFAULT_TAXONOMY.get_category(1)
        text = normalize("Look at this diagram.")

        result = score(text, DEFAULT_TAXONOMY.keywords_for(visual))

        assert result.score == 2
        assert result.matched_keywords == ("look at this diagram", "diagram")

    @pytest.mark.parametrize("transcript", [
        "",
        "Completely unrelated words here",
        "Look at this diagram, as you can see on the screen!",
        "Let's build it step-by-step. Your turn to practice.",
    ])
    def test_scores_are_non_negative(self, transcript):
        text = normalize(transcript)
        for category in DEFAULT_TAXONOMY:
            assert score(text, DEFAULT_TAXONOMY.keywords_for(category)).score >= 0
