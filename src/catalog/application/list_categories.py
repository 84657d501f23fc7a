"""Application service: List Categories and Category Statistics (queries)."""

from __future__ import annotations

from catalog.domain.model.category import Category
from catalog.domain.repository.category_repository import CategoryRepository
from catalog.domain.service.category_domain_service import (
    CategoryDomainService,
    CategoryStatistics,
)


class ListCategoriesHandler:

    def __init__(self, category_repo: CategoryRepository) -> None:
        self._category_repo = category_repo

    def handle(self, active_only: bool = False) -> list[Category]:
        if active_only:
            return self._category_repo.find_active()
        return self._category_repo.find_all()


class CategoryStatisticsHandler:

    def __init__(self, domain_service: CategoryDomainService) -> None:
        self._domain_service = domain_service

    def handle(self) -> CategoryStatistics:
        return self._domain_service.get_category_statistics()
