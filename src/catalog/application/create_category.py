"""Application service: Create Category use case."""

from __future__ import annotations

import logging

from catalog.application.dto import CreateCategoryDTO
from catalog.domain.exceptions import BusinessRuleViolation
from catalog.domain.model.category import Category
from catalog.domain.repository.category_repository import CategoryRepository
from catalog.domain.service.category_domain_service import CategoryDomainService

logger = logging.getLogger(__name__)


class CreateCategoryHandler:

    def __init__(
        self,
        category_repo: CategoryRepository,
        domain_service: CategoryDomainService | None = None,
    ) -> None:
        self._category_repo = category_repo
        self._domain_service = domain_service

    def handle(self, dto: CreateCategoryDTO) -> Category:
        """Create and persist a new, active category.

        Name validation happens in the entity.  When a domain service is
        wired in, the name must also be unique.
        """
        category = Category.create(dto.name, dto.description)

        if self._domain_service is not None and not self._domain_service.can_create_category(
            category.name.value
        ):
            raise BusinessRuleViolation(
                f"Category '{category.name}' already exists"
            )

        saved = self._category_repo.save(category)
        logger.info("Created category %s (%s)", saved.id, saved.name)
        return saved
