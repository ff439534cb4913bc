from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any


@dataclass(frozen=True)
class User:
    id: str
    email: str
    username: str
    password_hash: str
    firstname: str
    lastname: str
    phone: str
    address: dict[str, Any] | None
    created_at: datetime
    updated_at: datetime
