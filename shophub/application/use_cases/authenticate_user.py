from __future__ import annotations

import logging

from shophub.application.ports.auth_port import AuthPort
from shophub.application.ports.token_port import TokenPort
from shophub.domain.entities.user import User
from shophub.domain.exceptions import TokenInvalidError, UserNotFoundError

from .auth_common import utcnow


logger = logging.getLogger(__name__)


class AuthenticateUserUseCase:
    """Resolve a bearer token to a live user.

    The token subject is looked up again on every call; a valid token for a user
    that no longer exists is rejected with ``UserNotFoundError``.
    """

    def __init__(self, *, auth_port: AuthPort, token_port: TokenPort):
        self._auth_port = auth_port
        self._token_port = token_port

    def execute(self, *, token: str) -> User:
        try:
            payload = self._token_port.decode_access_token(token=token, now=utcnow())
        except TokenInvalidError as exc:
            logger.info("authenticate_user: token_rejected reason=%s", type(exc).__name__)
            raise

        user = self._auth_port.get_user_by_id(user_id=payload.user_id)
        if user is None:
            logger.info("authenticate_user: subject_missing user_id=%s", payload.user_id)
            raise UserNotFoundError("User not found.")
        return user
