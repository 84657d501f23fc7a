"""JSON-file-backed implementation of ProductRepository."""

from __future__ import annotations

import json
import logging
from datetime import datetime
from pathlib import Path

from catalog.domain.model.ids import new_id
from catalog.domain.model.product import Product
from catalog.domain.model.value_objects import CategoryId, Price, ProductName
from catalog.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class JsonProductRepository(ProductRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- ProductRepository interface ------------------------------------------

    def save(self, product: Product) -> Product:
        if product.id is None:
            product.id = new_id("product")
        products = self._load()
        products[product.id] = product
        self._persist(products)
        return product

    def find_by_id(self, product_id: str) -> Product | None:
        return self._load().get(product_id)

    def find_all(self) -> list[Product]:
        return list(self._load().values())

    def delete(self, product_id: str) -> bool:
        products = self._load()
        if products.pop(product_id, None) is None:
            return False
        self._persist(products)
        return True

    def find_by_category_id(self, category_id: CategoryId | str) -> list[Product]:
        wanted = str(category_id)
        return [p for p in self._load().values() if p.category_id.value == wanted]

    # --- Serialization helpers ------------------------------------------------

    def _load(self) -> dict[str, Product]:
        raw = json.loads(self._file_path.read_text(encoding="utf-8"))
        return {
            item["id"]: Product(
                id=item["id"],
                name=ProductName(item["name"]),
                price=Price(float(item["price"])),
                category_id=CategoryId(item["category_id"]),
                description=item.get("description", ""),
                created_at=datetime.fromisoformat(item["created_at"]),
                updated_at=datetime.fromisoformat(item["updated_at"]),
            )
            for item in raw
        }

    def _persist(self, products: dict[str, Product]) -> None:
        raw = [
            {
                "id": p.id,
                "name": p.name.value,
                "price": p.price.value,
                "category_id": p.category_id.value,
                "description": p.description,
                "created_at": p.created_at.isoformat(),
                "updated_at": p.updated_at.isoformat(),
            }
            for p in products.values()
        ]
        logger.debug("Writing %d products to %s", len(raw), self._file_path)
        self._file_path.write_text(
            json.dumps(raw, indent=2) + "\n", encoding="utf-8"
        )

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
