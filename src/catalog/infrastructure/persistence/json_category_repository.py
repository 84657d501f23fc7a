"""JSON-file-backed implementation of CategoryRepository."""

from __future__ import annotations

import json
import logging
from datetime import datetime
from pathlib import Path

from catalog.domain.model.category import Category
from catalog.domain.model.ids import new_id
from catalog.domain.model.value_objects import CategoryName
from catalog.domain.repository.category_repository import CategoryRepository

logger = logging.getLogger(__name__)


class JsonCategoryRepository(CategoryRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- CategoryRepository interface -----------------------------------------

    def save(self, category: Category) -> Category:
        if category.id is None:
            category.id = new_id("category")

        records = self._load_raw()
        replaced = False
        for i, raw in enumerate(records):
            if raw["id"] == category.id:
                records[i] = self._to_raw(category)
                replaced = True
                break
        if not replaced:
            records.append(self._to_raw(category))
        self._persist_raw(records)
        return category

    def find_by_id(self, category_id: str) -> Category | None:
        for raw in self._load_raw():
            if raw["id"] == category_id:
                return self._to_domain(raw)
        return None

    def find_all(self) -> list[Category]:
        return [self._to_domain(raw) for raw in self._load_raw()]

    def delete(self, category_id: str) -> bool:
        records = self._load_raw()
        remaining = [raw for raw in records if raw["id"] != category_id]
        if len(remaining) == len(records):
            return False
        self._persist_raw(remaining)
        return True

    def find_active(self) -> list[Category]:
        return [self._to_domain(raw) for raw in self._load_raw() if raw["is_active"]]

    def find_by_name(self, name: str) -> Category | None:
        for raw in self._load_raw():
            if raw["name"] == name:
                return self._to_domain(raw)
        return None

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(category: Category) -> dict:
        return {
            "id": category.id,
            "name": category.name.value,
            "description": category.description,
            "is_active": category.is_active,
            "created_at": category.created_at.isoformat(),
            "updated_at": category.updated_at.isoformat(),
        }

    @staticmethod
    def _to_domain(raw: dict) -> Category:
        return Category(
            id=raw["id"],
            name=CategoryName(raw["name"]),
            description=raw.get("description", ""),
            is_active=raw.get("is_active", True),
            created_at=datetime.fromisoformat(raw["created_at"]),
            updated_at=datetime.fromisoformat(raw["updated_at"]),
        )

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> list[dict]:
        return json.loads(self._file_path.read_text(encoding="utf-8"))

    def _persist_raw(self, records: list[dict]) -> None:
        logger.debug("Writing %d categories to %s", len(records), self._file_path)
        self._file_path.write_text(
            json.dumps(records, indent=2) + "\n", encoding="utf-8"
        )

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
