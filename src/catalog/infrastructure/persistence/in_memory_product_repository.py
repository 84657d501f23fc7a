"""In-memory implementation of ProductRepository."""

from __future__ import annotations

from catalog.domain.model.ids import new_id
from catalog.domain.model.product import Product
from catalog.domain.model.value_objects import CategoryId
from catalog.domain.repository.product_repository import ProductRepository


class InMemoryProductRepository(ProductRepository):

    def __init__(self, products: list[Product] | None = None) -> None:
        self._store: dict[str, Product] = {}
        for product in products or []:
            self.save(product)

    def save(self, product: Product) -> Product:
        if product.id is None:
            product.id = new_id("product")
        self._store[product.id] = product
        return product

    def find_by_id(self, product_id: str) -> Product | None:
        return self._store.get(product_id)

    def find_all(self) -> list[Product]:
        return list(self._store.values())

    def delete(self, product_id: str) -> bool:
        return self._store.pop(product_id, None) is not None

    def find_by_category_id(self, category_id: CategoryId | str) -> list[Product]:
        wanted = str(category_id)
        return [p for p in self._store.values() if p.category_id.value == wanted]
