from __future__ import annotations

import secrets

from passlib.context import CryptContext

from shophub.application.ports.password_hasher_port import PasswordHasherPort
from shophub.domain.exceptions import MalformedCredentialError


class PasswordHasher(PasswordHasherPort):
    def __init__(self):
        self._ctx = CryptContext(
            schemes=["argon2"],
            deprecated="auto",
        )
        # same scheme and parameters as stored digests
        self._dummy_hash = self._ctx.hash(secrets.token_urlsafe(16))

    def hash(self, plain_password: str) -> str:
        return self._ctx.hash(plain_password)

    def verify(self, plain_password: str, password_hash: str) -> bool:
        if not password_hash:
            return False
        try:
            return self._ctx.verify(plain_password, password_hash)
        except ValueError as exc:
            # unknown scheme or corrupt parameters in the stored digest
            raise MalformedCredentialError("Stored password hash is malformed.") from exc
        except TypeError:
            return False

    def verify_dummy(self, plain_password: str) -> None:
        self._ctx.verify(plain_password, self._dummy_hash)
