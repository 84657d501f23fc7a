"""Application service: Delete Category use case."""

from __future__ import annotations

import logging

from catalog.domain.exceptions import BusinessRuleViolation, NotFoundError
from catalog.domain.repository.category_repository import CategoryRepository
from catalog.domain.service.category_domain_service import CategoryDomainService

logger = logging.getLogger(__name__)


class DeleteCategoryHandler:

    def __init__(
        self,
        category_repo: CategoryRepository,
        domain_service: CategoryDomainService,
    ) -> None:
        self._category_repo = category_repo
        self._domain_service = domain_service

    def handle(self, category_id: str) -> bool:
        if self._category_repo.find_by_id(category_id) is None:
            raise NotFoundError(f"Category '{category_id}' not found")

        if not self._domain_service.can_delete_category(category_id):
            raise BusinessRuleViolation(
                f"Category '{category_id}' still has products and cannot be deleted"
            )

        deleted = self._category_repo.delete(category_id)
        logger.info("Deleted category %s", category_id)
        return deleted
