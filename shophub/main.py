from __future__ import annotations

from contextlib import asynccontextmanager
import logging
import sys
import time

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from shophub.api.errors import register_exception_handlers
from shophub.api.routers import auth, products, upload
from shophub.infrastructure.db.engine import create_schema, get_engine
from shophub.shared.config import get_settings


settings = get_settings()

logging.basicConfig(
    level=getattr(logging, settings.log_level, logging.INFO),
    format="%(asctime)s  %(levelname)-8s  %(name)s - %(message)s",
    stream=sys.stdout,
)
for _noisy in ("urllib3", "passlib"):
    logging.getLogger(_noisy).setLevel(logging.WARNING)
logger = logging.getLogger(__name__)

ROUTERS = (auth.router, products.router, upload.router)


@asynccontextmanager
async def lifespan(_app: FastAPI):
    current = get_settings()
    if not current.jwt_secret:
        raise RuntimeError("JWT_SECRET is required.")
    engine = get_engine(current.database_url)
    create_schema(engine)
    logger.info("main: ready database=%s", engine.url.render_as_string(hide_password=True))
    yield


def create_app() -> FastAPI:
    app = FastAPI(title="ShopHub API", version="1.0.0", lifespan=lifespan)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_origins),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        start = time.perf_counter()
        response = await call_next(request)
        logger.info(
            "request: method=%s path=%s status=%s elapsed=%.3fs",
            request.method,
            request.url.path,
            response.status_code,
            time.perf_counter() - start,
        )
        return response

    register_exception_handlers(app)

    # the SPA client talks to /api; the bare paths serve non-browser callers
    for router in ROUTERS:
        app.include_router(router, prefix="/api")
        app.include_router(router, include_in_schema=False)

    @app.get("/")
    def index():
        return {
            "message": "ShopHub API",
            "version": app.version,
            "endpoints": {
                "auth": {
                    "signup": "POST /api/auth/signup",
                    "login": "POST /api/auth/login",
                    "profile": "GET /api/auth/profile (Protected)",
                },
                "products": {
                    "getAll": "GET /api/products",
                    "getById": "GET /api/products/:id",
                    "getByCategory": "GET /api/products/category/:category",
                    "getCategories": "GET /api/products/categories",
                    "create": "POST /api/products (Protected)",
                    "update": "PUT /api/products/:id (Protected)",
                    "patch": "PATCH /api/products/:id (Protected)",
                    "delete": "DELETE /api/products/:id (Protected)",
                },
                "upload": {
                    "image": "POST /api/upload/upload (Protected)",
                },
            },
        }

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("shophub.main:app", host="0.0.0.0", port=settings.port, log_level=settings.log_level.lower())
