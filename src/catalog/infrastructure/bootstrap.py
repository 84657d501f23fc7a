"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from catalog.domain.service.category_domain_service import CategoryDomainService
from catalog.domain.service.pricing_policy import (
    DEFAULT_PRICE_BANDS,
    PriceBands,
    load_price_bands,
)
from catalog.domain.service.product_domain_service import ProductDomainService
from catalog.infrastructure.config import CatalogSettings
from catalog.infrastructure.persistence.json_category_repository import (
    JsonCategoryRepository,
)
from catalog.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)


def settings() -> CatalogSettings:
    return CatalogSettings.from_env()


def category_repository() -> JsonCategoryRepository:
    return JsonCategoryRepository(settings().categories_file)


def product_repository() -> JsonProductRepository:
    return JsonProductRepository(settings().products_file)


def price_bands() -> PriceBands:
    path = settings().price_bands_file
    if path is None:
        return DEFAULT_PRICE_BANDS
    return load_price_bands(path)


def category_domain_service() -> CategoryDomainService:
    return CategoryDomainService(category_repository(), product_repository())


def product_domain_service() -> ProductDomainService:
    return ProductDomainService(
        product_repository(), category_repository(), price_bands()
    )
