from __future__ import annotations

import logging
from datetime import datetime

from sqlalchemy import case, insert, or_, select
from sqlalchemy.exc import IntegrityError

from shophub.application.ports.auth_port import AuthPort
from shophub.domain.entities.user import User
from shophub.domain.exceptions import EmailAlreadyRegisteredError, UsernameAlreadyTakenError
from shophub.infrastructure.db.mappers.accounts_mapper import map_row_to_user
from shophub.infrastructure.db.models.users import UserModel


logger = logging.getLogger(__name__)

users = UserModel.__table__


class SqlAccountsRepository(AuthPort):
    def __init__(self, engine):
        self._engine = engine

    def get_user_by_id(self, *, user_id: str) -> User | None:
        stmt = select(users).where(users.c.id == user_id).limit(1)
        with self._engine.connect() as conn:
            row = conn.execute(stmt).mappings().first()
        if row is None:
            return None
        return map_row_to_user(row)

    def get_user_by_email(self, *, email: str) -> User | None:
        stmt = select(users).where(users.c.email == email.lower()).limit(1)
        with self._engine.connect() as conn:
            row = conn.execute(stmt).mappings().first()
        if row is None:
            return None
        return map_row_to_user(row)

    def find_user_by_email_or_username(self, *, email: str, username: str) -> User | None:
        email = email.lower()
        stmt = (
            select(users)
            .where(or_(users.c.email == email, users.c.username == username))
            .order_by(case((users.c.email == email, 0), else_=1))
            .limit(1)
        )
        with self._engine.connect() as conn:
            row = conn.execute(stmt).mappings().first()
        if row is None:
            return None
        return map_row_to_user(row)

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
        params = {
            "id": user_id,
            "email": email.lower(),
            "username": username,
            "password_hash": password_hash,
            "firstname": firstname,
            "lastname": lastname,
            "phone": phone,
            "address": None,
            "created_at": created_at,
            "updated_at": updated_at,
        }
        try:
            with self._engine.begin() as conn:
                conn.execute(insert(users).values(**params))
                row = conn.execute(select(users).where(users.c.id == user_id)).mappings().one()
        except IntegrityError as exc:
            logger.info("accounts_repository: unique_violation user_id=%s", user_id)
            if self.get_user_by_email(email=email) is not None:
                raise EmailAlreadyRegisteredError("Email already registered") from exc
            raise UsernameAlreadyTakenError("Username already taken") from exc
        return map_row_to_user(row)
