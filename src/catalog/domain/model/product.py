"""Product aggregate.

Products live in a category but do not own it: ``category_id`` is a
typed soft reference.  Whether that category exists or is active is
checked explicitly through ProductDomainService, never by the entity.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal

from catalog.domain.exceptions import ValidationError
from catalog.domain.model.ids import new_id
from catalog.domain.model.value_objects import CategoryId, Price, ProductName


def _now() -> datetime:
    return datetime.now(timezone.utc)


def _as_utc(moment: datetime) -> datetime:
    # Naive timestamps from older records are taken to be UTC.
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment


@dataclass
class Product:
    """A product in the catalog.

    Kept as a mutable dataclass because renames, price changes and
    re-categorisation are legitimate mutations on the aggregate.  Every
    validated field is a value object that is replaced, never edited.
    """

    name: ProductName
    price: Price
    category_id: CategoryId
    description: str = ""
    id: str | None = None
    created_at: datetime = field(default_factory=_now)
    updated_at: datetime | None = None

    def __post_init__(self) -> None:
        self.created_at = _as_utc(self.created_at)
        if self.updated_at is None:
            self.updated_at = self.created_at
        self.updated_at = _as_utc(self.updated_at)
        if self.updated_at < self.created_at:
            raise ValidationError(
                f"Product {self.id} updated_at precedes created_at"
            )

    @staticmethod
    def create(
        name: str,
        price: float | int | Decimal,
        category_id: str,
        description: str = "",
        id: str | None = None,
    ) -> Product:
        """Create a new product, validating name, price and category id."""
        product_name = ProductName(name)
        product_price = Price(price)
        product_category = CategoryId(category_id)
        if id is None or not id.strip():
            id = new_id("product")
        return Product(
            name=product_name,
            price=product_price,
            category_id=product_category,
            description=description,
            id=id,
        )

    # --- Mutations ------------------------------------------------------------

    def update_name(self, name: str) -> None:
        self.name = ProductName(name)
        self._touch()

    def update_price(self, price: float | int | Decimal) -> None:
        self.price = Price(price)
        self._touch()

    def update_category(self, category_id: str) -> None:
        """Point the product at another category.

        Only the id's shape is validated here; the category's existence
        is the domain service's concern.
        """
        self.category_id = CategoryId(category_id)
        self._touch()

    def update_description(self, description: str) -> None:
        self.description = description
        self._touch()

    def _touch(self) -> None:
        self.updated_at = max(_now(), self.created_at)
