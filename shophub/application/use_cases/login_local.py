from __future__ import annotations

import logging

from shophub.application.dto.auth import AuthTokenOutput, LoginLocalInput
from shophub.application.ports.auth_port import AuthPort
from shophub.application.ports.password_hasher_port import PasswordHasherPort
from shophub.application.ports.token_port import TokenPort
from shophub.domain.exceptions import FieldError, InvalidCredentialsError, ValidationError

from .auth_common import check_email, issue_token, normalize_email


logger = logging.getLogger(__name__)

INVALID_CREDENTIALS_MESSAGE = "Invalid email or password"


class LoginLocalUseCase:
    def __init__(
        self,
        *,
        auth_port: AuthPort,
        password_hasher: PasswordHasherPort,
        token_port: TokenPort,
    ):
        self._auth_port = auth_port
        self._password_hasher = password_hasher
        self._token_port = token_port

    def execute(self, command: LoginLocalInput) -> AuthTokenOutput:
        email = normalize_email(command.email)

        errors: list[FieldError] = []
        email_error = check_email(email)
        if email_error is not None:
            errors.append(email_error)
        if not command.password:
            errors.append(FieldError(field="password", message="Password is required"))
        if errors:
            raise ValidationError(errors)

        user = self._auth_port.get_user_by_email(email=email)
        if user is None:
            self._password_hasher.verify_dummy(command.password)
            logger.info("login_local: rejected reason=unknown_email")
            raise InvalidCredentialsError(INVALID_CREDENTIALS_MESSAGE)

        if not self._password_hasher.verify(command.password, user.password_hash):
            logger.info("login_local: rejected reason=password_mismatch user_id=%s", user.id)
            raise InvalidCredentialsError(INVALID_CREDENTIALS_MESSAGE)

        return issue_token(user=user, token_port=self._token_port)
