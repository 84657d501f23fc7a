"""In-memory implementation of CategoryRepository.

Keeps everything in a dict keyed by id. No file I/O, no locking:
concurrent mutation from several callers is outside its contract.
"""

from __future__ import annotations

from catalog.domain.model.category import Category
from catalog.domain.model.ids import new_id
from catalog.domain.repository.category_repository import CategoryRepository


class InMemoryCategoryRepository(CategoryRepository):

    def __init__(self, categories: list[Category] | None = None) -> None:
        self._store: dict[str, Category] = {}
        for category in categories or []:
            self.save(category)

    def save(self, category: Category) -> Category:
        if category.id is None:
            category.id = new_id("category")
        self._store[category.id] = category
        return category

    def find_by_id(self, category_id: str) -> Category | None:
        return self._store.get(category_id)

    def find_all(self) -> list[Category]:
        return list(self._store.values())

    def delete(self, category_id: str) -> bool:
        return self._store.pop(category_id, None) is not None

    def find_active(self) -> list[Category]:
        return [c for c in self._store.values() if c.is_active]

    def find_by_name(self, name: str) -> Category | None:
        for category in self._store.values():
            if category.name.value == name:
                return category
        return None
