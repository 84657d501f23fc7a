"""Application service: Update Product use case."""

from __future__ import annotations

import logging

from catalog.application.dto import UpdateProductDTO
from catalog.domain.exceptions import NotFoundError
from catalog.domain.model.product import Product
from catalog.domain.model.value_objects import CategoryId, Price, ProductName
from catalog.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class UpdateProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, dto: UpdateProductDTO) -> Product:
        """Replace a product's name, price, category and description.

        All fields are validated before the first mutation, so a bad field
        raises ValidationError and leaves the product untouched.
        """
        product = self._product_repo.find_by_id(dto.id)
        if product is None:
            raise NotFoundError(f"Product with ID '{dto.id}' not found")

        name = ProductName(dto.name)
        price = Price(dto.price)
        category_id = CategoryId(dto.category_id)

        product.update_name(name.value)
        product.update_price(price.value)
        product.update_category(category_id.value)
        product.update_description(dto.description)

        saved = self._product_repo.save(product)
        logger.info("Updated product %s", saved.id)
        return saved
