from __future__ import annotations

from datetime import datetime
from typing import Protocol

from shophub.domain.entities.user import User


class AuthPort(Protocol):
    def get_user_by_id(self, *, user_id: str) -> User | None:
        ...

    def get_user_by_email(self, *, email: str) -> User | None:
        ...

    def find_user_by_email_or_username(self, *, email: str, username: str) -> User | None:
        """Return a user matching either field, preferring an email match."""
        ...

    def create_user(
        self,
        *,
        user_id: str,
        email: str,
        username: str,
        password_hash: str,
        firstname: str,
        lastname: str,
        phone: str,
        created_at: datetime,
        updated_at: datetime,
    ) -> User:
        """Insert a user; raises a ``UserConflictError`` subclass on duplicate email/username."""
        ...
