"""Application service: Create Product use case."""

from __future__ import annotations

import logging

from catalog.application.dto import CreateProductDTO
from catalog.domain.exceptions import BusinessRuleViolation
from catalog.domain.model.product import Product
from catalog.domain.repository.product_repository import ProductRepository
from catalog.domain.service.product_domain_service import ProductDomainService

logger = logging.getLogger(__name__)


class CreateProductHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        domain_service: ProductDomainService | None = None,
    ) -> None:
        self._product_repo = product_repo
        self._domain_service = domain_service

    def handle(self, dto: CreateProductDTO) -> Product:
        """Add a new product to the catalog.

        Steps:
        1. Build the Product (value objects validate name, price, category id).
        2. If a domain service is wired in, require ``can_create_product``.
        3. Persist and return the saved entity, which carries its id.
        """
        product = Product.create(
            name=dto.name,
            price=dto.price,
            category_id=dto.category_id,
            description=dto.description,
        )

        if self._domain_service is not None and not self._domain_service.can_create_product(
            product.name.value, product.price.value, product.category_id.value
        ):
            raise BusinessRuleViolation(
                f"Product '{product.name}' cannot be created in category "
                f"'{product.category_id}'"
            )

        saved = self._product_repo.save(product)
        logger.info("Created product %s (%s)", saved.id, saved.name)
        return saved
