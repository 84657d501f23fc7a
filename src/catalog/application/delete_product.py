"""Application service: Delete Product use case."""

from __future__ import annotations

import logging

from catalog.domain.exceptions import NotFoundError
from catalog.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class DeleteProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: str) -> bool:
        if self._product_repo.find_by_id(product_id) is None:
            raise NotFoundError(f"Product with ID '{product_id}' not found")

        deleted = self._product_repo.delete(product_id)
        logger.info("Deleted product %s", product_id)
        return deleted
