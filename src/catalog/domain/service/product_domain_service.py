"""Domain service: product rules.

Coordinates the checks that span products and categories: is the
target category active, is the name free within that category, does
the price fit the category's band, and how does a price compare with
the category's current average.

All checks return booleans.  ``can_create_product`` evaluates its
checks in a fixed order and stops at the first failure; callers (and
tests) rely on later checks not being run.
"""

from __future__ import annotations

import logging
from decimal import Decimal

from catalog.domain.repository.category_repository import CategoryRepository
from catalog.domain.repository.product_repository import ProductRepository
from catalog.domain.service.pricing_policy import (
    DEFAULT_PRICE_BANDS,
    PriceBand,
    PriceBands,
)

logger = logging.getLogger(__name__)

# A price is competitive within +/- 20% of the category average.
COMPETITIVE_TOLERANCE = Decimal("0.2")


class ProductDomainService:

    def __init__(
        self,
        product_repo: ProductRepository,
        category_repo: CategoryRepository,
        price_bands: PriceBands | None = None,
    ) -> None:
        self._product_repo = product_repo
        self._category_repo = category_repo
        self._price_bands = price_bands if price_bands is not None else DEFAULT_PRICE_BANDS

    def is_category_active(self, category_id: str) -> bool:
        category = self._category_repo.find_by_id(category_id)
        if category is None:
            return False
        return category.is_active

    def is_product_name_unique(self, name: str, category_id: str) -> bool:
        """False only if the same name already exists in the same category.

        The same name in a different category is allowed.
        """
        for product in self._product_repo.find_all():
            if product.name.value == name and product.category_id.value == category_id:
                return False
        return True

    def is_price_within_acceptable_range(self, price: float, category_id: str) -> bool:
        category = self._category_repo.find_by_id(category_id)
        if category is None:
            return False
        return self._price_bands.band_for(category_id).contains(price)

    def can_create_product(self, name: str, price: float, category_id: str) -> bool:
        if not self.is_category_active(category_id):
            logger.debug("Category %s is missing or inactive", category_id)
            return False

        if not self.is_product_name_unique(name, category_id):
            logger.debug("Product name %r already exists in %s", name, category_id)
            return False

        if not self.is_price_within_acceptable_range(price, category_id):
            logger.debug("Price %s outside band for %s", price, category_id)
            return False

        return True

    def get_price_range_for_category(self, category_id: str) -> PriceBand:
        return self._price_bands.band_for(category_id)

    def get_average_price_for_category(self, category_id: str) -> float | None:
        """Mean price of the category's products, or None if it has none."""
        products = self._product_repo.find_by_category_id(category_id)
        if not products:
            return None
        total = sum(product.price.value for product in products)
        return total / len(products)

    def is_price_competitive(self, price: float, category_id: str) -> bool:
        """True if ``price`` is within 20% of the category average, inclusive.

        A category with no products has no average, so any price counts
        as competitive.
        """
        average = self.get_average_price_for_category(category_id)
        if average is None:
            return True
        # 120% of 33.30 must equal 39.96 exactly.
        centre = Decimal(str(average))
        tolerance = centre * COMPETITIVE_TOLERANCE
        return centre - tolerance <= Decimal(str(price)) <= centre + tolerance
