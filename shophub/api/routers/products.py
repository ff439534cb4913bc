from __future__ import annotations

from typing import Literal

from fastapi import APIRouter, Depends, HTTPException

from shophub.api.deps import (
    get_create_product_use_case,
    get_current_user,
    get_delete_product_use_case,
    get_get_product_use_case,
    get_list_categories_use_case,
    get_list_products_use_case,
    get_patch_product_use_case,
    get_update_product_use_case,
)
from shophub.api.schemas.products import (
    ProductCreateRequest,
    ProductDeletedResponse,
    ProductPatchRequest,
    ProductRatingResponse,
    ProductResponse,
    ProductUpdateRequest,
)
from shophub.application.dto.products import (
    CreateProductInput,
    ListProductsInput,
    PatchProductInput,
    UpdateProductInput,
)
from shophub.application.use_cases.create_product import CreateProductUseCase
from shophub.application.use_cases.delete_product import DeleteProductUseCase
from shophub.application.use_cases.get_product import GetProductUseCase
from shophub.application.use_cases.list_products import ListCategoriesUseCase, ListProductsUseCase
from shophub.application.use_cases.update_product import PatchProductUseCase, UpdateProductUseCase
from shophub.domain.entities.product import Product
from shophub.domain.entities.user import User
from shophub.domain.exceptions import ProductInputError, ProductNotFoundError


router = APIRouter(prefix="/products", tags=["products"])


def _to_response(product: Product) -> ProductResponse:
    return ProductResponse(
        id=product.id,
        title=product.title,
        price=float(product.price),
        description=product.description,
        category=product.category,
        image=product.image,
        rating=ProductRatingResponse(
            rate=float(product.rating.rate),
            count=product.rating.count,
        ),
        created_by=product.created_by,
        created_at=product.created_at,
        updated_at=product.updated_at,
    )


@router.get("/categories", response_model=list[str])
def list_categories(
    use_case: ListCategoriesUseCase = Depends(get_list_categories_use_case),
):
    return use_case.execute()


@router.get("/category/{category}", response_model=list[ProductResponse])
def list_products_by_category(
    category: str,
    use_case: ListProductsUseCase = Depends(get_list_products_use_case),
):
    try:
        rows = use_case.execute(ListProductsInput(category=category))
    except ProductInputError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return [_to_response(row) for row in rows]


@router.get("", response_model=list[ProductResponse])
def list_products(
    limit: int | None = None,
    sort: Literal["asc", "desc"] = "asc",
    use_case: ListProductsUseCase = Depends(get_list_products_use_case),
):
    try:
        rows = use_case.execute(ListProductsInput(limit=limit, sort=sort))
    except ProductInputError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return [_to_response(row) for row in rows]


@router.get("/{product_id}", response_model=ProductResponse)
def get_product(
    product_id: str,
    use_case: GetProductUseCase = Depends(get_get_product_use_case),
):
    try:
        product = use_case.execute(product_id=product_id)
    except ProductNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    return _to_response(product)


@router.post("", response_model=ProductResponse, status_code=201)
def create_product(
    req: ProductCreateRequest,
    current_user: User = Depends(get_current_user),
    use_case: CreateProductUseCase = Depends(get_create_product_use_case),
):
    try:
        product = use_case.execute(
            CreateProductInput(
                title=req.title,
                price=req.price,
                category=req.category,
                description=req.description,
                image=req.image,
                created_by=current_user.id,
            )
        )
    except ProductInputError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return _to_response(product)


@router.put("/{product_id}", response_model=ProductResponse)
def update_product(
    product_id: str,
    req: ProductUpdateRequest,
    _current_user: User = Depends(get_current_user),
    use_case: UpdateProductUseCase = Depends(get_update_product_use_case),
):
    try:
        product = use_case.execute(
            UpdateProductInput(
                product_id=product_id,
                title=req.title,
                price=req.price,
                category=req.category,
                description=req.description,
                image=req.image,
            )
        )
    except ProductNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except ProductInputError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return _to_response(product)


@router.patch("/{product_id}", response_model=ProductResponse)
def patch_product(
    product_id: str,
    req: ProductPatchRequest,
    _current_user: User = Depends(get_current_user),
    use_case: PatchProductUseCase = Depends(get_patch_product_use_case),
):
    try:
        product = use_case.execute(
            PatchProductInput(
                product_id=product_id,
                title=req.title,
                price=req.price,
                category=req.category,
                description=req.description,
                image=req.image,
            )
        )
    except ProductNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except ProductInputError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return _to_response(product)


@router.delete("/{product_id}", response_model=ProductDeletedResponse)
def delete_product(
    product_id: str,
    current_user: User = Depends(get_current_user),
    use_case: DeleteProductUseCase = Depends(get_delete_product_use_case),
):
    try:
        use_case.execute(product_id=product_id, requested_by=current_user.id)
    except ProductNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    return ProductDeletedResponse(message="Product deleted successfully")
