from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv


load_dotenv()


def _env(name: str, default: str | None = None) -> str | None:
    return os.getenv(name, default)


def _csv(name: str, default: str) -> tuple[str, ...]:
    value = _env(name, default) or ""
    return tuple(item.strip() for item in value.split(",") if item.strip())


@dataclass(frozen=True)
class Settings:
    database_url: str
    jwt_secret: str
    jwt_ttl_days: int
    cors_origins: tuple[str, ...]
    cloudinary_cloud_name: str
    cloudinary_api_key: str
    cloudinary_api_secret: str
    cloudinary_upload_folder: str
    cloudinary_timeout_seconds: float
    log_level: str
    port: int


def get_settings() -> Settings:
    return Settings(
        database_url=_env("DATABASE_URL", "sqlite:///./shophub.db"),
        jwt_secret=_env("JWT_SECRET", ""),
        jwt_ttl_days=int(_env("JWT_TTL_DAYS", "30")),
        cors_origins=_csv(
            "CORS_ORIGINS",
            "http://localhost:3000,http://localhost:3001,http://localhost:5173",
        ),
        cloudinary_cloud_name=_env("CLOUDINARY_CLOUD_NAME", ""),
        cloudinary_api_key=_env("CLOUDINARY_API_KEY", ""),
        cloudinary_api_secret=_env("CLOUDINARY_API_SECRET", ""),
        cloudinary_upload_folder=_env("CLOUDINARY_UPLOAD_FOLDER", "shophub-products"),
        cloudinary_timeout_seconds=float(_env("CLOUDINARY_TIMEOUT_SECONDS", "30")),
        log_level=_env("LOG_LEVEL", "INFO").upper(),
        port=int(_env("PORT", "5000")),
    )
