from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Any

from sqlalchemy import delete, insert, select, update

from shophub.application.ports.product_port import ProductPort
from shophub.domain.entities.product import Product
from shophub.infrastructure.db.mappers.products_mapper import map_row_to_product
from shophub.infrastructure.db.models.products import ProductModel


products = ProductModel.__table__

UPDATABLE_COLUMNS = frozenset({"title", "price", "description", "category", "image"})


class SqlProductsRepository(ProductPort):
    def __init__(self, engine):
        self._engine = engine

    def list_products(
        self,
        *,
        limit: int | None,
        descending: bool,
        category: str | None,
    ) -> list[Product]:
        stmt = select(products)
        if category is not None:
            stmt = stmt.where(products.c.category == category)
        if descending:
            stmt = stmt.order_by(products.c.created_at.desc(), products.c.id.desc())
        else:
            stmt = stmt.order_by(products.c.created_at.asc(), products.c.id.asc())
        if limit is not None:
            stmt = stmt.limit(limit)
        with self._engine.connect() as conn:
            rows = conn.execute(stmt).mappings().all()
        return [map_row_to_product(row) for row in rows]

    def list_categories(self) -> list[str]:
        stmt = select(products.c.category).distinct().order_by(products.c.category)
        with self._engine.connect() as conn:
            return [row[0] for row in conn.execute(stmt)]

    def get_product_by_id(self, *, product_id: str) -> Product | None:
        stmt = select(products).where(products.c.id == product_id).limit(1)
        with self._engine.connect() as conn:
            row = conn.execute(stmt).mappings().first()
        if row is None:
            return None
        return map_row_to_product(row)

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
        params = {
            "id": product_id,
            "title": title,
            "price": price,
            "description": description,
            "category": category,
            "image": image,
            "rating_rate": Decimal("0"),
            "rating_count": 0,
            "created_by": created_by,
            "created_at": created_at,
            "updated_at": updated_at,
        }
        with self._engine.begin() as conn:
            conn.execute(insert(products).values(**params))
            row = conn.execute(select(products).where(products.c.id == product_id)).mappings().one()
        return map_row_to_product(row)

    def update_product(
        self,
        *,
        product_id: str,
        changes: dict[str, Any],
        updated_at: datetime,
    ) -> Product | None:
        unknown = set(changes) - UPDATABLE_COLUMNS
        if unknown:
            raise ValueError(f"Unsupported product columns: {sorted(unknown)}")

        stmt = (
            update(products)
            .where(products.c.id == product_id)
            .values(**changes, updated_at=updated_at)
        )
        with self._engine.begin() as conn:
            result = conn.execute(stmt)
            if result.rowcount == 0:
                return None
            row = conn.execute(select(products).where(products.c.id == product_id)).mappings().one()
        return map_row_to_product(row)

    def delete_product(self, *, product_id: str) -> bool:
        with self._engine.begin() as conn:
            result = conn.execute(delete(products).where(products.c.id == product_id))
        return result.rowcount > 0
