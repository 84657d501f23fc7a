"""Application service: Activate / Deactivate Category use cases.

The domain service decides whether the transition is allowed; the
Category aggregate performs it.
"""

from __future__ import annotations

import logging

from catalog.domain.exceptions import BusinessRuleViolation, NotFoundError
from catalog.domain.model.category import Category
from catalog.domain.repository.category_repository import CategoryRepository
from catalog.domain.service.category_domain_service import CategoryDomainService

logger = logging.getLogger(__name__)


class ChangeCategoryStatusHandler:

    def __init__(
        self,
        category_repo: CategoryRepository,
        domain_service: CategoryDomainService,
    ) -> None:
        self._category_repo = category_repo
        self._domain_service = domain_service

    def activate(self, category_id: str) -> Category:
        category = self._load(category_id)
        if not self._domain_service.can_activate_category(category_id):
            raise BusinessRuleViolation(f"Category '{category_id}' is already active")
        category.activate()
        logger.info("Activated category %s", category_id)
        return self._category_repo.save(category)

    def deactivate(self, category_id: str) -> Category:
        category = self._load(category_id)
        if not self._domain_service.can_deactivate_category(category_id):
            raise BusinessRuleViolation(f"Category '{category_id}' is already inactive")
        category.deactivate()
        logger.info("Deactivated category %s", category_id)
        return self._category_repo.save(category)

    def _load(self, category_id: str) -> Category:
        category = self._category_repo.find_by_id(category_id)
        if category is None:
            raise NotFoundError(f"Category '{category_id}' not found")
        return category
