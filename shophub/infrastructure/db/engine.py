from __future__ import annotations

from functools import lru_cache

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    pass


@lru_cache(maxsize=4)
def get_engine(dsn: str) -> Engine:
    connect_args = {}
    if dsn.startswith("sqlite"):
        connect_args["check_same_thread"] = False
    return create_engine(dsn, future=True, pool_pre_ping=True, connect_args=connect_args)


def create_schema(engine: Engine) -> None:
    # models register themselves on Base.metadata at import time
    from shophub.infrastructure.db.models import products, users  # noqa: F401

    Base.metadata.create_all(engine)
