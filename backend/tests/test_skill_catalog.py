"""Tests for the skill catalog and shared numeric helpers."""

import json

import pytest
from pydantic import ValidationError

from services.numeric import clamp_score, round_half_up
from services.skill_catalog import SkillCatalog, get_default_catalog, load_catalog


class TestSkillCatalog:
    def setup_method(self):
        self.catalog = SkillCatalog()

    def test_importance_weights(self):
        assert self.catalog.importance_weight("required") == 10
        assert self.catalog.importance_weight("preferred") == 7
        assert self.catalog.importance_weight("nice-to-have") == 4
        assert self.catalog.importance_weight("whatever") == 5

    def test_categorize(self):
        assert self.catalog.categorize("AWS") == "Cloud"
        assert self.catalog.categorize("Leadership") == "Soft Skills"
        assert self.catalog.categorize("Rust") == "Technical"

    def test_frozen(self):
        with pytest.raises(ValidationError):
            self.catalog.default_category = "Other"

    def test_default_catalog_is_shared(self):
        assert get_default_catalog() is get_default_catalog()

    def test_load_catalog_from_json(self, tmp_path):
        path = tmp_path / "catalog.json"
        path.write_text(json.dumps({"skills": ["Python", "Cobalt"]}), encoding="utf-8")

        catalog = load_catalog(path)

        assert catalog.skills == ("Python", "Cobalt")
        assert catalog.importance_weight("required") == 10
        assert "Coursera" in catalog.learning_platforms


class TestNumeric:
    def test_round_half_up(self):
        assert round_half_up(2.5) == 3
        assert round_half_up(0.5) == 1
        assert round_half_up(2.4) == 2
        assert round_half_up(1.25, 1) == 1.3
        assert isinstance(round_half_up(7.0), int)

    def test_clamp_score(self):
        assert clamp_score(-5) == 0
        assert clamp_score(104.6) == 100
        assert clamp_score(49.5) == 50
