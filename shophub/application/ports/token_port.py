from __future__ import annotations

from datetime import datetime
from typing import Protocol

from shophub.application.dto.auth import AccessTokenPayload


class TokenPort(Protocol):
    def create_access_token(self, *, user_id: str, now: datetime) -> tuple[str, datetime]:
        ...

    def decode_access_token(self, *, token: str, now: datetime) -> AccessTokenPayload:
        ...
