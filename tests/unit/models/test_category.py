"""Unit tests for Category and CategoryRegistry."""

import pytest
from pydantic import ValidationError

from models import Category, CategoryRegistry, DEFAULT_DESCRIPTION, slugify


class TestSlugify:
    """Test label -> id slugs."""

    def test_lowercases_and_dashes(self):
        assert slugify("Side Projects") == "side-projects"

    def test_collapses_symbols(self):
        assert slugify("Health & Energy") == "health-energy"

    def test_strips_edges(self):
        assert slugify("  !!Music!! ") == "music"

    def test_symbols_only_is_empty(self):
        assert slugify("???") == ""


class TestCategory:
    """Test Category record."""

    def test_description_defaults_empty(self):
        category = Category(id="x", label="X")
        assert category.description == ""

    def test_frozen(self):
        category = Category(id="x", label="X")
        with pytest.raises(ValidationError):
            category.label = "Y"


class TestCategoryRegistry:
    """Test the ordered registry."""

    def test_defaults(self):
        registry = CategoryRegistry()
        ids = [c.id for c in registry.categories]
        assert ids == [
            "health", "career", "relationships", "finance",
            "growth", "fun", "environment", "spirituality",
        ]
        assert registry.labels[0] == "Health & Energy"

    def test_defaults_not_shared(self):
        first = CategoryRegistry()
        second = CategoryRegistry()
        first.add("Music")
        assert "Music" not in second.labels

    def test_add_appends(self):
        registry = CategoryRegistry()
        category = registry.add("  Creativity  ")
        assert category.label == "Creativity"
        assert category.id == "creativity"
        assert registry.categories[-1] == category

    def test_add_default_description(self):
        registry = CategoryRegistry()
        category = registry.add("Creativity")
        assert category.description == DEFAULT_DESCRIPTION

    def test_add_keeps_description(self):
        registry = CategoryRegistry()
        category = registry.add("Creativity", "Making things")
        assert category.description == "Making things"

    def test_add_blank_is_noop(self):
        registry = CategoryRegistry()
        assert registry.add("   ") is None
        assert len(registry.categories) == 8

    def test_add_duplicate_is_noop(self):
        registry = CategoryRegistry()
        assert registry.add("relationships") is None
        assert len(registry.categories) == 8

    def test_add_id_collision_gets_suffix(self):
        registry = CategoryRegistry(categories=[Category(id="fun", label="Fun & Recreation")])
        category = registry.add("Fun")
        assert category.id == "fun-2"

    def test_add_symbol_label_gets_generated_id(self):
        registry = CategoryRegistry()
        category = registry.add("???")
        assert category.id.startswith("custom-")

    def test_get_and_find_label(self):
        registry = CategoryRegistry()
        assert registry.get("finance").label == "Finances"
        assert registry.get("missing") is None
        assert registry.find_label("finances").id == "finance"

    def test_remove(self):
        registry = CategoryRegistry()
        removed = registry.remove("fun")
        assert removed.id == "fun"
        assert "Fun & Recreation" not in registry.labels

    def test_remove_unknown(self):
        registry = CategoryRegistry()
        assert registry.remove("missing") is None
        assert len(registry.categories) == 8

    def test_can_remove_above_floor(self):
        registry = CategoryRegistry()
        assert registry.can_remove()

    def test_can_remove_at_floor(self):
        registry = CategoryRegistry()
        for category_id in ["growth", "fun", "environment", "spirituality"]:
            registry.remove(category_id)
        assert len(registry.categories) == 4
        assert not registry.can_remove()

    def test_add_side_projects_slug(self):
        registry = CategoryRegistry()
        assert registry.add("Side Projects!!").id == "side-projects"
