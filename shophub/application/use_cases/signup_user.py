from __future__ import annotations

import logging
from uuid import uuid4

from shophub.application.dto.auth import AuthTokenOutput, SignupUserInput
from shophub.application.ports.auth_port import AuthPort
from shophub.application.ports.password_hasher_port import PasswordHasherPort
from shophub.application.ports.token_port import TokenPort
from shophub.domain.exceptions import (
    EmailAlreadyRegisteredError,
    FieldError,
    UsernameAlreadyTakenError,
    ValidationError,
)

from .auth_common import (
    MIN_PASSWORD_LENGTH,
    MIN_USERNAME_LENGTH,
    check_email,
    issue_token,
    normalize_email,
    utcnow,
)


logger = logging.getLogger(__name__)


class SignupUserUseCase:
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

    def execute(self, command: SignupUserInput) -> AuthTokenOutput:
        email = normalize_email(command.email)
        username = command.username.strip()
        firstname = command.firstname.strip()
        lastname = command.lastname.strip()
        phone = (command.phone or "").strip()

        errors: list[FieldError] = []
        email_error = check_email(email)
        if email_error is not None:
            errors.append(email_error)
        if len(username) < MIN_USERNAME_LENGTH:
            errors.append(
                FieldError(
                    field="username",
                    message=f"Username must be at least {MIN_USERNAME_LENGTH} characters",
                )
            )
        if len(command.password) < MIN_PASSWORD_LENGTH:
            errors.append(
                FieldError(
                    field="password",
                    message=f"Password must be at least {MIN_PASSWORD_LENGTH} characters",
                )
            )
        if not firstname:
            errors.append(FieldError(field="firstname", message="First name is required"))
        if not lastname:
            errors.append(FieldError(field="lastname", message="Last name is required"))
        if errors:
            raise ValidationError(errors)

        existing = self._auth_port.find_user_by_email_or_username(email=email, username=username)
        if existing is not None:
            if existing.email == email:
                raise EmailAlreadyRegisteredError("Email already registered")
            raise UsernameAlreadyTakenError("Username already taken")

        password_hash = self._password_hasher.hash(command.password)
        now = utcnow()
        user = self._auth_port.create_user(
            user_id=str(uuid4()),
            email=email,
            username=username,
            password_hash=password_hash,
            firstname=firstname,
            lastname=lastname,
            phone=phone,
            created_at=now,
            updated_at=now,
        )
        logger.info("signup_user: created user_id=%s", user.id)
        return issue_token(user=user, token_port=self._token_port)
