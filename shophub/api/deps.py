from __future__ import annotations

from functools import lru_cache
import logging

from fastapi import Depends, Header, HTTPException

from shophub.api.errors import SERVER_ERROR_MESSAGE
from shophub.application.ports.auth_port import AuthPort
from shophub.application.ports.object_storage_port import ObjectStoragePort
from shophub.application.ports.password_hasher_port import PasswordHasherPort
from shophub.application.ports.product_port import ProductPort
from shophub.application.ports.token_port import TokenPort
from shophub.application.use_cases.authenticate_user import AuthenticateUserUseCase
from shophub.application.use_cases.create_product import CreateProductUseCase
from shophub.application.use_cases.delete_product import DeleteProductUseCase
from shophub.application.use_cases.get_product import GetProductUseCase
from shophub.application.use_cases.get_profile import GetProfileUseCase
from shophub.application.use_cases.list_products import ListCategoriesUseCase, ListProductsUseCase
from shophub.application.use_cases.login_local import LoginLocalUseCase
from shophub.application.use_cases.signup_user import SignupUserUseCase
from shophub.application.use_cases.update_product import PatchProductUseCase, UpdateProductUseCase
from shophub.application.use_cases.upload_image import UploadImageUseCase
from shophub.domain.entities.user import User
from shophub.domain.exceptions import TokenInvalidError, UserNotFoundError
from shophub.infrastructure.db.engine import get_engine
from shophub.infrastructure.db.repositories.accounts_repository import SqlAccountsRepository
from shophub.infrastructure.db.repositories.products_repository import SqlProductsRepository
from shophub.shared.config import get_settings


logger = logging.getLogger(__name__)

NOT_AUTHORIZED_MESSAGE = "Not authorized"


def _misconfigured(detail: str) -> HTTPException:
    logger.error("deps: misconfigured detail=%s", detail)
    return HTTPException(status_code=500, detail=SERVER_ERROR_MESSAGE)


def _get_db_engine():
    settings = get_settings()
    if not settings.database_url:
        raise _misconfigured("DATABASE_URL is required.")
    return get_engine(settings.database_url)


@lru_cache(maxsize=1)
def _get_password_hasher() -> PasswordHasherPort:
    from shophub.infrastructure.security.password_hasher import PasswordHasher

    return PasswordHasher()


@lru_cache(maxsize=1)
def _get_token_service() -> TokenPort:
    from shophub.infrastructure.security.token_service import JwtTokenService

    settings = get_settings()
    if not settings.jwt_secret:
        raise _misconfigured("JWT_SECRET is required.")
    return JwtTokenService(
        jwt_secret=settings.jwt_secret,
        ttl_days=settings.jwt_ttl_days,
    )


@lru_cache(maxsize=1)
def _get_cloudinary_client() -> ObjectStoragePort:
    from shophub.infrastructure.clients.cloudinary_client import (
        CloudinaryClient,
        CloudinaryClientSettings,
    )

    settings = get_settings()
    if not settings.cloudinary_cloud_name or not settings.cloudinary_api_key:
        raise _misconfigured("CLOUDINARY_CLOUD_NAME and CLOUDINARY_API_KEY are required.")
    if not settings.cloudinary_api_secret:
        raise _misconfigured("CLOUDINARY_API_SECRET is required.")
    return CloudinaryClient(
        CloudinaryClientSettings(
            cloud_name=settings.cloudinary_cloud_name,
            api_key=settings.cloudinary_api_key,
            api_secret=settings.cloudinary_api_secret,
            folder=settings.cloudinary_upload_folder,
            timeout_seconds=settings.cloudinary_timeout_seconds,
        )
    )


def get_accounts_repository() -> AuthPort:
    return SqlAccountsRepository(_get_db_engine())


def get_products_repository() -> ProductPort:
    return SqlProductsRepository(_get_db_engine())


def get_password_hasher() -> PasswordHasherPort:
    return _get_password_hasher()


def get_token_service() -> TokenPort:
    return _get_token_service()


def get_object_storage() -> ObjectStoragePort:
    return _get_cloudinary_client()


def get_signup_user_use_case(
    auth_port: AuthPort = Depends(get_accounts_repository),
    password_hasher: PasswordHasherPort = Depends(get_password_hasher),
    token_port: TokenPort = Depends(get_token_service),
) -> SignupUserUseCase:
    return SignupUserUseCase(
        auth_port=auth_port,
        password_hasher=password_hasher,
        token_port=token_port,
    )


def get_login_local_use_case(
    auth_port: AuthPort = Depends(get_accounts_repository),
    password_hasher: PasswordHasherPort = Depends(get_password_hasher),
    token_port: TokenPort = Depends(get_token_service),
) -> LoginLocalUseCase:
    return LoginLocalUseCase(
        auth_port=auth_port,
        password_hasher=password_hasher,
        token_port=token_port,
    )


def get_authenticate_user_use_case(
    auth_port: AuthPort = Depends(get_accounts_repository),
    token_port: TokenPort = Depends(get_token_service),
) -> AuthenticateUserUseCase:
    return AuthenticateUserUseCase(auth_port=auth_port, token_port=token_port)


def get_get_profile_use_case(
    auth_port: AuthPort = Depends(get_accounts_repository),
) -> GetProfileUseCase:
    return GetProfileUseCase(auth_port=auth_port)


def get_list_products_use_case(
    product_port: ProductPort = Depends(get_products_repository),
) -> ListProductsUseCase:
    return ListProductsUseCase(product_port=product_port)


def get_list_categories_use_case(
    product_port: ProductPort = Depends(get_products_repository),
) -> ListCategoriesUseCase:
    return ListCategoriesUseCase(product_port=product_port)


def get_get_product_use_case(
    product_port: ProductPort = Depends(get_products_repository),
) -> GetProductUseCase:
    return GetProductUseCase(product_port=product_port)


def get_create_product_use_case(
    product_port: ProductPort = Depends(get_products_repository),
) -> CreateProductUseCase:
    return CreateProductUseCase(product_port=product_port)


def get_update_product_use_case(
    product_port: ProductPort = Depends(get_products_repository),
) -> UpdateProductUseCase:
    return UpdateProductUseCase(product_port=product_port)


def get_patch_product_use_case(
    product_port: ProductPort = Depends(get_products_repository),
) -> PatchProductUseCase:
    return PatchProductUseCase(product_port=product_port)


def get_delete_product_use_case(
    product_port: ProductPort = Depends(get_products_repository),
) -> DeleteProductUseCase:
    return DeleteProductUseCase(product_port=product_port)


def get_upload_image_use_case(
    object_storage: ObjectStoragePort = Depends(get_object_storage),
) -> UploadImageUseCase:
    return UploadImageUseCase(object_storage=object_storage)


def _unauthorized() -> HTTPException:
    return HTTPException(
        status_code=401,
        detail=NOT_AUTHORIZED_MESSAGE,
        headers={"WWW-Authenticate": "Bearer"},
    )


def get_current_user(
    authorization: str | None = Header(default=None),
    use_case: AuthenticateUserUseCase = Depends(get_authenticate_user_use_case),
) -> User:
    if not authorization:
        logger.info("auth: rejected reason=missing_header")
        raise _unauthorized()

    scheme, _, token = authorization.partition(" ")
    token = token.strip()
    if scheme.lower() != "bearer" or not token:
        logger.info("auth: rejected reason=malformed_header")
        raise _unauthorized()

    try:
        return use_case.execute(token=token)
    except (TokenInvalidError, UserNotFoundError) as exc:
        raise _unauthorized() from exc
