from __future__ import annotations

from datetime import datetime, timezone

from email_validator import EmailNotValidError, validate_email

from shophub.application.dto.auth import AuthTokenOutput, AuthUserOutput
from shophub.application.ports.token_port import TokenPort
from shophub.domain.entities.user import User
from shophub.domain.exceptions import FieldError


MIN_USERNAME_LENGTH = 3
MIN_PASSWORD_LENGTH = 6


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def normalize_email(email: str) -> str:
    return email.strip().lower()


def check_email(email: str) -> FieldError | None:
    try:
        validate_email(email, check_deliverability=False)
    except EmailNotValidError:
        return FieldError(field="email", message="Please enter a valid email")
    return None


def build_auth_user_output(user: User) -> AuthUserOutput:
    return AuthUserOutput(
        id=user.id,
        email=user.email,
        username=user.username,
        firstname=user.firstname,
        lastname=user.lastname,
        phone=user.phone,
    )


def issue_token(*, user: User, token_port: TokenPort) -> AuthTokenOutput:
    access_token, access_expires_at = token_port.create_access_token(user_id=user.id, now=utcnow())
    return AuthTokenOutput(
        user=build_auth_user_output(user),
        access_token=access_token,
        access_expires_at=access_expires_at,
    )
