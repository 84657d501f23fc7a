"""Domain service: category rules.

Rules that need more than one category (name uniqueness, statistics) or
that need the repository to answer (activation and deletion eligibility)
live here rather than on the Category aggregate.

Every check is a predicate: an ineligible request yields ``False``, never
an exception.  Nothing is cached; each call reads the repository afresh.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from catalog.domain.repository.category_repository import CategoryRepository
from catalog.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CategoryStatistics:
    total: int
    active: int
    inactive: int

    def as_dict(self) -> dict[str, int]:
        return {"total": self.total, "active": self.active, "inactive": self.inactive}


class CategoryDomainService:

    def __init__(
        self,
        category_repo: CategoryRepository,
        product_repo: ProductRepository | None = None,
    ) -> None:
        self._category_repo = category_repo
        self._product_repo = product_repo

    def is_category_name_unique(
        self, name: str, exclude_id: str | None = None
    ) -> bool:
        """True if no other category already uses exactly this name.

        ``exclude_id`` lets a category keep its own name during an update.
        Comparison is case-sensitive.
        """
        existing = self._category_repo.find_by_name(name)
        if existing is None:
            return True
        if exclude_id is not None and existing.id == exclude_id:
            return True
        logger.debug("Category name %r already used by %s", name, existing.id)
        return False

    def can_create_category(self, name: str, exclude_id: str | None = None) -> bool:
        # Uniqueness is currently the only creation rule.
        return self.is_category_name_unique(name, exclude_id)

    def can_activate_category(self, category_id: str) -> bool:
        category = self._category_repo.find_by_id(category_id)
        if category is None:
            return False
        return not category.is_active

    def can_deactivate_category(self, category_id: str) -> bool:
        category = self._category_repo.find_by_id(category_id)
        if category is None:
            return False
        return category.is_active

    def get_category_statistics(self) -> CategoryStatistics:
        total = len(self._category_repo.find_all())
        active = len(self._category_repo.find_active())
        return CategoryStatistics(total=total, active=active, inactive=total - active)

    def has_products(self, category_id: str) -> bool:
        """True if any product points at this category.

        Without a product repository the answer is always ``False``, which
        means deletion is never blocked by products.
        """
        if self._product_repo is None or not category_id.strip():
            return False
        return bool(self._product_repo.find_by_category_id(category_id))

    def can_delete_category(self, category_id: str) -> bool:
        category = self._category_repo.find_by_id(category_id)
        if category is None:
            return False
        if self.has_products(category_id):
            logger.debug("Category %s still has products", category_id)
            return False
        return True
