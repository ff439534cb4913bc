from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Any, Protocol

from shophub.domain.entities.product import Product


class ProductPort(Protocol):
    def list_products(
        self,
        *,
        limit: int | None,
        descending: bool,
        category: str | None,
    ) -> list[Product]:
        ...

    def list_categories(self) -> list[str]:
        ...

    def get_product_by_id(self, *, product_id: str) -> Product | None:
        ...

    def create_product(
        self,
        *,
        product_id: str,
        title: str,
        price: Decimal,
        description: str,
        category: str,
        image: str,
        created_by: str,
        created_at: datetime,
        updated_at: datetime,
    ) -> Product:
        ...

    def update_product(
        self,
        *,
        product_id: str,
        changes: dict[str, Any],
        updated_at: datetime,
    ) -> Product | None:
        ...

    def delete_product(self, *, product_id: str) -> bool:
        ...
