from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any


@dataclass(frozen=True)
class AuthUserOutput:
    id: str
    email: str
    username: str
    firstname: str
    lastname: str
    phone: str


@dataclass(frozen=True)
class SignupUserInput:
    email: str
    username: str
    password: str
    firstname: str
    lastname: str
    phone: str | None = None


@dataclass(frozen=True)
class LoginLocalInput:
    email: str
    password: str


@dataclass(frozen=True)
class AuthTokenOutput:
    user: AuthUserOutput
    access_token: str
    access_expires_at: datetime


@dataclass(frozen=True)
class AccessTokenPayload:
    user_id: str
    issued_at: datetime
    expires_at: datetime


@dataclass(frozen=True)
class ProfileOutput:
    id: str
    email: str
    username: str
    firstname: str
    lastname: str
    phone: str
    address: dict[str, Any] | None
