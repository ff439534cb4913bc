from __future__ import annotations

import logging

from shophub.application.ports.product_port import ProductPort
from shophub.domain.exceptions import ProductNotFoundError


logger = logging.getLogger(__name__)


class DeleteProductUseCase:
    def __init__(self, *, product_port: ProductPort):
        self._product_port = product_port

    def execute(self, *, product_id: str, requested_by: str) -> None:
        if not self._product_port.delete_product(product_id=product_id):
            raise ProductNotFoundError("Product not found")
        logger.info(
            "delete_product: deleted product_id=%s requested_by=%s",
            product_id,
            requested_by,
        )
