"""Tests for transcript normalization"""

import pytest

from clario.core.scoring.normalizer import normalize


class TestNormalize:
    """Test normalize()"""

    def test_lowercases(self):
        assert normalize("DIAGRAM Screen") == "diagram screen"

    @pytest.mark.parametrize("raw", ["Diagram", "diagram,", "DIAGRAM!", "(diagram)", "diagram..."])
    def test_strips_punctuation(self, raw):
        """Test punctuation variants collapse to the bare word"""
        assert normalize(raw) == "diagram"

    def test_collapses_whitespace(self):
        assert normalize("  look \n at\tthis   diagram  ") == "look at this diagram"

    def test_hyphens_and_apostrophes_split_tokens(self):
        assert normalize("Hands-on, let's build") == "hands on let s build"

    def test_underscore_is_a_separator(self):
        assert normalize("snake_case") == "snake case"

    @pytest.mark.parametrize("raw", [None, "", "   ", "?!,."])
    def test_empty_input_yields_empty_string(self, raw):
        assert normalize(raw) == ""

    def test_non_ascii_letters_preserved(self):
        assert normalize("Café Diagramme") == "café diagramme"

    def test_idempotent(self):
        once = normalize("It's a Step-by-Step DEMO!")
        assert normalize(once) == once
