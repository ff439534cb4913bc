from __future__ import annotations

from shophub.application.dto.products import ListProductsInput
from shophub.application.ports.product_port import ProductPort
from shophub.domain.entities.product import Product
from shophub.domain.exceptions import ProductInputError


class ListProductsUseCase:
    def __init__(self, *, product_port: ProductPort):
        self._product_port = product_port

    def execute(self, command: ListProductsInput) -> list[Product]:
        if command.limit is not None and command.limit <= 0:
            raise ProductInputError("limit must be a positive integer.")
        if command.sort not in ("asc", "desc"):
            raise ProductInputError("sort must be 'asc' or 'desc'.")

        category = command.category.strip() if command.category else None
        return self._product_port.list_products(
            limit=command.limit,
            descending=command.sort == "desc",
            category=category or None,
        )


class ListCategoriesUseCase:
    def __init__(self, *, product_port: ProductPort):
        self._product_port = product_port

    def execute(self) -> list[str]:
        return self._product_port.list_categories()
