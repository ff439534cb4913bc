from __future__ import annotations

from shophub.application.ports.product_port import ProductPort
from shophub.domain.entities.product import Product
from shophub.domain.exceptions import ProductNotFoundError


class GetProductUseCase:
    def __init__(self, *, product_port: ProductPort):
        self._product_port = product_port

    def execute(self, *, product_id: str) -> Product:
        product = self._product_port.get_product_by_id(product_id=product_id)
        if product is None:
            raise ProductNotFoundError("Product not found")
        return product
