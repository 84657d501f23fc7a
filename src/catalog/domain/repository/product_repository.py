"""Abstract repository for Product aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from catalog.domain.model.product import Product
from catalog.domain.model.value_objects import CategoryId


class ProductRepository(ABC):

    @abstractmethod
    def save(self, product: Product) -> Product:
        """Persist a new or updated product.

        When ``product.id`` is None a fresh id is generated; the returned
        entity always carries the id it was stored under.
        """

    @abstractmethod
    def find_by_id(self, product_id: str) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    def find_all(self) -> list[Product]:
        """Return every product in the catalog."""

    @abstractmethod
    def delete(self, product_id: str) -> bool:
        """Remove a product. Returns False if the id is unknown."""

    @abstractmethod
    def find_by_category_id(self, category_id: CategoryId | str) -> list[Product]:
        """Return the products whose category id matches exactly."""
