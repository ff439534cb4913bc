from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal


PRODUCT_CATEGORIES = (
    "electronics",
    "jewelery",
    "men's clothing",
    "women's clothing",
)

DEFAULT_PRODUCT_IMAGE = "https://via.placeholder.com/300"


@dataclass(frozen=True)
class ProductRating:
    rate: Decimal
    count: int


@dataclass(frozen=True)
class Product:
    id: str
    title: str
    price: Decimal
    description: str
    category: str
    image: str
    rating: ProductRating
    created_by: str | None
    created_at: datetime
    updated_at: datetime
