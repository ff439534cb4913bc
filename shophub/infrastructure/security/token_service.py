from __future__ import annotations

from datetime import datetime, timedelta, timezone

import jwt

from shophub.application.dto.auth import AccessTokenPayload
from shophub.application.ports.token_port import TokenPort
from shophub.domain.exceptions import (
    TokenExpiredError,
    TokenMalformedError,
    TokenSignatureError,
)


ALGORITHM = "HS256"
TOKEN_TYPE = "access"


class JwtTokenService(TokenPort):
    """Stateless HS256 access tokens.

    Expiry is checked against the caller-supplied ``now`` rather than PyJWT's wall
    clock, so verification is deterministic for a given instant.
    """

    def __init__(self, *, jwt_secret: str, ttl_days: int = 30):
        if not jwt_secret:
            raise ValueError("jwt_secret is required.")
        if ttl_days <= 0:
            raise ValueError("ttl_days must be a positive integer.")
        self._jwt_secret = jwt_secret
        self._ttl = timedelta(days=ttl_days)

    def create_access_token(self, *, user_id: str, now: datetime) -> tuple[str, datetime]:
        iat = int(now.timestamp())
        exp = int((now + self._ttl).timestamp())
        payload = {
            "sub": user_id,
            "type": TOKEN_TYPE,
            "iat": iat,
            "exp": exp,
        }
        token = jwt.encode(payload, self._jwt_secret, algorithm=ALGORITHM)
        return token, datetime.fromtimestamp(exp, tz=timezone.utc)

    def decode_access_token(self, *, token: str, now: datetime) -> AccessTokenPayload:
        try:
            payload = jwt.decode(
                token,
                self._jwt_secret,
                algorithms=[ALGORITHM],
                options={
                    "verify_exp": False,
                    "verify_iat": False,
                    "require": ["sub", "iat", "exp"],
                },
            )
        except jwt.InvalidSignatureError as exc:
            raise TokenSignatureError("Invalid token signature.") from exc
        except jwt.PyJWTError as exc:
            raise TokenMalformedError("Malformed access token.") from exc

        if payload.get("type") != TOKEN_TYPE:
            raise TokenMalformedError("Invalid token type.")

        user_id = payload.get("sub")
        if not user_id or not isinstance(user_id, str):
            raise TokenMalformedError("Invalid token subject.")

        iat = payload.get("iat")
        exp = payload.get("exp")
        if not isinstance(iat, (int, float)) or not isinstance(exp, (int, float)):
            raise TokenMalformedError("Invalid token timestamps.")
        if exp <= now.timestamp():
            raise TokenExpiredError("Access token expired.")

        return AccessTokenPayload(
            user_id=user_id,
            issued_at=datetime.fromtimestamp(iat, tz=timezone.utc),
            expires_at=datetime.fromtimestamp(exp, tz=timezone.utc),
        )
