from __future__ import annotations

from decimal import Decimal

from shophub.domain.entities.product import PRODUCT_CATEGORIES
from shophub.domain.exceptions import ProductInputError


def clean_title(title: str) -> str:
    value = title.strip()
    if not value:
        raise ProductInputError("Product title is required")
    return value


def check_price(price: Decimal) -> Decimal:
    if price < 0:
        raise ProductInputError("Price must be a positive number")
    return price


def clean_category(category: str) -> str:
    value = category.strip()
    if not value:
        raise ProductInputError("Category is required")
    if value not in PRODUCT_CATEGORIES:
        raise ProductInputError(
            f"Category must be one of: {', '.join(PRODUCT_CATEGORIES)}"
        )
    return value
