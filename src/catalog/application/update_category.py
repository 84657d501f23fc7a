"""Application service: Update Category use case."""

from __future__ import annotations

import logging

from catalog.application.dto import UpdateCategoryDTO
from catalog.domain.exceptions import BusinessRuleViolation, NotFoundError
from catalog.domain.model.category import Category
from catalog.domain.model.value_objects import CategoryName
from catalog.domain.repository.category_repository import CategoryRepository
from catalog.domain.service.category_domain_service import CategoryDomainService

logger = logging.getLogger(__name__)


class UpdateCategoryHandler:

    def __init__(
        self,
        category_repo: CategoryRepository,
        domain_service: CategoryDomainService | None = None,
    ) -> None:
        self._category_repo = category_repo
        self._domain_service = domain_service

    def handle(self, dto: UpdateCategoryDTO) -> Category:
        """Rename a category and replace its description.

        Keeping the current name is always allowed.
        """
        category = self._category_repo.find_by_id(dto.id)
        if category is None:
            raise NotFoundError(f"Category '{dto.id}' not found")

        new_name = CategoryName(dto.name)
        if self._domain_service is not None and not self._domain_service.is_category_name_unique(
            new_name.value, exclude_id=category.id
        ):
            raise BusinessRuleViolation(f"Category '{new_name}' already exists")

        category.update_name(new_name.value)
        category.update_description(dto.description)
        saved = self._category_repo.save(category)
        logger.info("Updated category %s", saved.id)
        return saved
