from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field


class ProductCreateRequest(BaseModel):
    title: str = Field(..., max_length=300)
    price: Decimal
    category: str = Field(..., max_length=64)
    description: str | None = None
    image: str | None = None


class ProductUpdateRequest(ProductCreateRequest):
    pass


class ProductPatchRequest(BaseModel):
    title: str | None = Field(default=None, max_length=300)
    price: Decimal | None = None
    category: str | None = Field(default=None, max_length=64)
    description: str | None = None
    image: str | None = None


class ProductRatingResponse(BaseModel):
    rate: float
    count: int


class ProductResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    title: str
    price: float
    description: str
    category: str
    image: str
    rating: ProductRatingResponse
    created_by: str | None = Field(default=None, alias="createdBy")
    created_at: datetime = Field(alias="createdAt")
    updated_at: datetime = Field(alias="updatedAt")


class ProductDeletedResponse(BaseModel):
    message: str
