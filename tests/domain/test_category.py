"""Unit tests for the Category aggregate."""

from datetime import datetime, timedelta, timezone

import pytest

from catalog.domain.exceptions import ValidationError
from catalog.domain.model import category as category_module
from catalog.domain.model.category import Category
from catalog.domain.model.value_objects import CategoryName


def _freeze_clock(monkeypatch, moment):
    monkeypatch.setattr(category_module, "_now", lambda: moment)


class TestCategoryCreate:

    def test_create_with_valid_data(self):
        category = Category.create("  Electronics ", "Gadgets and devices")
        assert category.name.value == "Electronics"
        assert category.description == "Gadgets and devices"
        assert category.is_active is True
        assert category.created_at == category.updated_at

    def test_generates_id(self):
        category = Category.create("Electronics", "")
        assert category.id.startswith("category_")

    def test_ids_are_unique(self):
        assert Category.create("A", "").id != Category.create("A", "").id

    def test_keeps_supplied_id(self):
        category = Category.create("Books", "Paper", id="cat-custom")
        assert category.id == "cat-custom"

    @pytest.mark.parametrize("name", ["", "   "])
    def test_blank_name_rejected(self, name):
        with pytest.raises(ValidationError, match="Category name cannot be empty"):
            Category.create(name, "desc")

    def test_long_name_rejected(self):
        with pytest.raises(ValidationError, match="cannot exceed 255"):
            Category.create("n" * 256, "desc")

    def test_description_is_not_validated(self):
        assert Category.create("Books", "").description == ""
        assert len(Category.create("Books", "d" * 5000).description) == 5000

    def test_updated_before_created_rejected(self):
        category = Category.create("Books", "")
        with pytest.raises(ValidationError, match="precedes"):
            Category(
                name=CategoryName("Books"),
                created_at=category.created_at,
                updated_at=category.created_at - timedelta(seconds=1),
            )


class TestCategoryMutations:

    def test_update_name(self, monkeypatch):
        category = Category.create("Books", "")
        later = category.created_at + timedelta(minutes=5)
        _freeze_clock(monkeypatch, later)

        category.update_name("  Novels ")

        assert category.name.value == "Novels"
        assert category.updated_at == later
        assert category.created_at < category.updated_at

    def test_update_name_to_empty_rejected(self):
        category = Category.create("Books", "")
        with pytest.raises(ValidationError, match="Category name cannot be empty"):
            category.update_name(" ")
        assert category.name.value == "Books"

    def test_update_description(self, monkeypatch):
        category = Category.create("Books", "old")
        later = category.created_at + timedelta(seconds=1)
        _freeze_clock(monkeypatch, later)

        category.update_description("new")

        assert category.description == "new"
        assert category.updated_at == later

    def test_activate_and_deactivate(self):
        category = Category.create("Books", "")
        category.deactivate()
        assert category.is_active is False
        category.activate()
        assert category.is_active is True

    def test_activate_is_idempotent_and_refreshes_timestamp(self, monkeypatch):
        category = Category.create("Books", "")
        later = category.created_at + timedelta(hours=1)
        _freeze_clock(monkeypatch, later)

        category.activate()

        assert category.is_active is True
        assert category.updated_at == later

    def test_deactivate_twice_is_not_an_error(self):
        category = Category.create("Books", "")
        category.deactivate()
        category.deactivate()
        assert category.is_active is False

    def test_updated_at_never_precedes_created_at(self, monkeypatch):
        category = Category.create("Books", "")
        _freeze_clock(monkeypatch, category.created_at - timedelta(days=1))

        category.update_description("clock went backwards")

        assert category.updated_at == category.created_at

    def test_id_and_created_at_unchanged_by_mutations(self):
        category = Category.create("Books", "")
        original_id, original_created = category.id, category.created_at
        category.update_name("Novels")
        category.deactivate()
        assert category.id == original_id
        assert category.created_at == original_created


class TestCategoryNaiveTimestamps:

    def test_naive_timestamps_are_read_as_utc(self):
        category = Category(
            name=CategoryName("Books"), id="c1", created_at=datetime(2020, 1, 1)
        )
        assert category.created_at == datetime(2020, 1, 1, tzinfo=timezone.utc)
        assert category.updated_at == category.created_at

    def test_mutation_after_rebuild_from_naive_record(self):
        category = Category(
            name=CategoryName("Books"),
            id="c1",
            created_at=datetime.fromisoformat("2020-01-01T00:00:00"),
            updated_at=datetime.fromisoformat("2020-01-02T00:00:00"),
        )

        category.update_description("x")

        assert category.description == "x"
        assert category.updated_at > category.created_at
