"""Abstract repository for Category aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (JSON, in-memory) live in the
infrastructure layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from catalog.domain.model.category import Category


class CategoryRepository(ABC):

    @abstractmethod
    def save(self, category: Category) -> Category:
        """Persist a new or updated category and return it.

        Assigns a generated id when the category has none.
        """

    @abstractmethod
    def find_by_id(self, category_id: str) -> Category | None:
        """Return a category by its ID, or None if not found."""

    @abstractmethod
    def find_all(self) -> list[Category]:
        """Return every category, in no particular order."""

    @abstractmethod
    def delete(self, category_id: str) -> bool:
        """Remove a category. Returns False if the id is unknown."""

    @abstractmethod
    def find_active(self) -> list[Category]:
        """Return every category whose ``is_active`` flag is set."""

    @abstractmethod
    def find_by_name(self, name: str) -> Category | None:
        """Return the category with exactly this name, or None."""
