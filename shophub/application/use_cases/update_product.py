from __future__ import annotations

from typing import Any

from shophub.application.dto.products import PatchProductInput, UpdateProductInput
from shophub.application.ports.product_port import ProductPort
from shophub.domain.entities.product import DEFAULT_PRODUCT_IMAGE, Product
from shophub.domain.exceptions import ProductInputError, ProductNotFoundError

from .auth_common import utcnow
from .product_common import check_price, clean_category, clean_title


class UpdateProductUseCase:
    """Full replacement of the editable product fields (PUT semantics)."""

    def __init__(self, *, product_port: ProductPort):
        self._product_port = product_port

    def execute(self, command: UpdateProductInput) -> Product:
        changes: dict[str, Any] = {
            "title": clean_title(command.title),
            "price": check_price(command.price),
            "category": clean_category(command.category),
            "description": command.description or "",
            "image": command.image or DEFAULT_PRODUCT_IMAGE,
        }

        product = self._product_port.update_product(
            product_id=command.product_id,
            changes=changes,
            updated_at=utcnow(),
        )
        if product is None:
            raise ProductNotFoundError("Product not found")
        return product


class PatchProductUseCase:
    def __init__(self, *, product_port: ProductPort):
        self._product_port = product_port

    def execute(self, command: PatchProductInput) -> Product:
        changes: dict[str, Any] = {}
        if command.title is not None:
            changes["title"] = clean_title(command.title)
        if command.price is not None:
            changes["price"] = check_price(command.price)
        if command.category is not None:
            changes["category"] = clean_category(command.category)
        if command.description is not None:
            changes["description"] = command.description
        if command.image is not None:
            changes["image"] = command.image
        if not changes:
            raise ProductInputError("No fields to update.")

        product = self._product_port.update_product(
            product_id=command.product_id,
            changes=changes,
            updated_at=utcnow(),
        )
        if product is None:
            raise ProductNotFoundError("Product not found")
        return product
