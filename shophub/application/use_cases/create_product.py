from __future__ import annotations

import logging
from uuid import uuid4

from shophub.application.dto.products import CreateProductInput
from shophub.application.ports.product_port import ProductPort
from shophub.domain.entities.product import DEFAULT_PRODUCT_IMAGE, Product

from .auth_common import utcnow
from .product_common import check_price, clean_category, clean_title


logger = logging.getLogger(__name__)


class CreateProductUseCase:
    def __init__(self, *, product_port: ProductPort):
        self._product_port = product_port

    def execute(self, command: CreateProductInput) -> Product:
        title = clean_title(command.title)
        price = check_price(command.price)
        category = clean_category(command.category)

        now = utcnow()
        product = self._product_port.create_product(
            product_id=str(uuid4()),
            title=title,
            price=price,
            description=command.description or "",
            category=category,
            image=command.image or DEFAULT_PRODUCT_IMAGE,
            created_by=command.created_by,
            created_at=now,
            updated_at=now,
        )
        logger.info(
            "create_product: created product_id=%s created_by=%s",
            product.id,
            command.created_by,
        )
        return product
