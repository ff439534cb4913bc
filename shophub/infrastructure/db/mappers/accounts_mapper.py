from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Mapping

from shophub.domain.entities.user import User


def as_utc(value: datetime) -> datetime:
    # sqlite drops the offset on DateTime(timezone=True)
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def map_row_to_user(row: Mapping[str, Any]) -> User:
    return User(
        id=str(row["id"]),
        email=row["email"],
        username=row["username"],
        password_hash=row["password_hash"],
        firstname=row["firstname"],
        lastname=row["lastname"],
        phone=row.get("phone") or "",
        address=row.get("address"),
        created_at=as_utc(row["created_at"]),
        updated_at=as_utc(row["updated_at"]),
    )
