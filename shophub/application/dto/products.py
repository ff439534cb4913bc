from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Literal


SortOrder = Literal["asc", "desc"]


@dataclass(frozen=True)
class ListProductsInput:
    limit: int | None = None
    sort: SortOrder = "asc"
    category: str | None = None


@dataclass(frozen=True)
class CreateProductInput:
    title: str
    price: Decimal
    category: str
    created_by: str
    description: str | None = None
    image: str | None = None


@dataclass(frozen=True)
class UpdateProductInput:
    product_id: str
    title: str
    price: Decimal
    category: str
    description: str | None = None
    image: str | None = None


@dataclass(frozen=True)
class PatchProductInput:
    product_id: str
    title: str | None = None
    price: Decimal | None = None
    category: str | None = None
    description: str | None = None
    image: str | None = None
