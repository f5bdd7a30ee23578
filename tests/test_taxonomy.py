"""Tests for the keyword taxonomy"""

import json

import pytest
from pydantic import ValidationError

from clario.core.scoring.taxonomy import (
    DEFAULT_TAXONOMY,
    KeywordTaxonomy,
    LearningCategory,
    load_taxonomy
)


class TestKeywordTaxonomy:
    """Test KeywordTaxonomy"""

    def test_default_categories(self):
        names = [c.name for c in DEFAULT_TAXONOMY]

        assert names == ["Visual", "Auditory", "Kinesthetic"]
        assert [c.id for c in DEFAULT_TAXONOMY.categories] == [1, 2, 3]

    def test_keywords_keep_order(self):
        visual = DEFAULT_TAXONOMY.get_category(1)
        keywords = DEFAULT_TAXONOMY.keywords_for(visual)

        assert keywords[0] == "look at this diagram"
        assert keywords[-1] == "pointer"

    def test_duplicates_within_category_collapsed(self):
        cat = LearningCategory(id=1, name="Visual")
        taxonomy = KeywordTaxonomy([(cat, ["diagram", "chart", "diagram", " ", "chart "])])

        assert taxonomy.keywords_for(cat) == ("diagram", "chart")

    def test_overlap_across_categories_allowed(self):
        a = LearningCategory(id=1, name="A")
        b = LearningCategory(id=2, name="B")
        taxonomy = KeywordTaxonomy([(a, ["build"]), (b, ["build"])])

        assert taxonomy.keywords_for(a) == taxonomy.keywords_for(b) == ("build",)

    def test_duplicate_category_id_rejected(self):
        with pytest.raises(ValueError):
            KeywordTaxonomy([
                (LearningCategory(id=1, name="A"), ["x"]),
                (LearningCategory(id=1, name="B"), ["y"]),
            ])

    def test_immutable(self):
        """Test the vocabulary cannot be modified at runtime"""
        visual = DEFAULT_TAXONOMY.get_category(1)

        with pytest.raises(TypeError):
            DEFAULT_TAXONOMY._vocab[visual] = ("hacked",)
        with pytest.raises(AttributeError):
            DEFAULT_TAXONOMY.keywords_for(visual).append("hacked")

    def test_keyword_with_comma_rejected(self):
        """Test keywords cannot collide with the evidence separator"""
        with pytest.raises(ValueError, match="comma"):
            KeywordTaxonomy([(LearningCategory(id=1, name="A"), ["diagram", "a, b"])])

    def test_unknown_category_id(self):
        assert DEFAULT_TAXONOMY.get_category(42) is None


class TestLoadTaxonomy:
    """Test loading a taxonomy from JSON"""

    def test_no_path_returns_default(self):
        assert load_taxonomy(None) is DEFAULT_TAXONOMY

    def test_load_from_file(self, tmp_path):
        path = tmp_path / "taxonomy.json"
        path.write_text(json.dumps({
            "categories": [
                {"id": 1, "name": "Visual", "keywords": ["diagram", "chart"]},
                {"id": 4, "name": "Reading", "description": "Text", "keywords": ["read"]},
            ]
        }))

        taxonomy = load_taxonomy(str(path))

        assert len(taxonomy) == 2
        reading = taxonomy.get_category(4)
        assert reading.description == "Text"
        assert taxonomy.keywords_for(reading) == ("read",)

    def test_invalid_file_rejected(self, tmp_path):
        path = tmp_path / "taxonomy.json"
        path.write_text(json.dumps({
            "categories": [{"id": 1, "name": "Visual", "keywords": []}]
        }))

        with pytest.raises(ValidationError):
            load_taxonomy(str(path))

    def test_comma_keyword_in_file_rejected(self, tmp_path):
        path = tmp_path / "taxonomy.json"
        path.write_text(json.dumps({
            "categories": [{"id": 1, "name": "Visual", "keywords": ["diagram", "charts, graphs"]}]
        }))

        with pytest.raises(ValidationError, match="commas"):
            load_taxonomy(str(path))
