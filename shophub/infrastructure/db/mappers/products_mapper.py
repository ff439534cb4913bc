from __future__ import annotations

from decimal import Decimal
from typing import Any, Mapping

from shophub.domain.entities.product import Product, ProductRating
from shophub.infrastructure.db.mappers.accounts_mapper import as_utc


def _as_decimal(value: Any) -> Decimal:
    if value is None:
        return Decimal("0")
    return value if isinstance(value, Decimal) else Decimal(str(value))


def map_row_to_product(row: Mapping[str, Any]) -> Product:
    created_by = row.get("created_by")
    return Product(
        id=str(row["id"]),
        title=row["title"],
        price=_as_decimal(row["price"]),
        description=row.get("description") or "",
        category=row["category"],
        image=row["image"],
        rating=ProductRating(
            rate=_as_decimal(row.get("rating_rate")),
            count=int(row.get("rating_count") or 0),
        ),
        created_by=str(created_by) if created_by is not None else None,
        created_at=as_utc(row["created_at"]),
        updated_at=as_utc(row["updated_at"]),
    )
