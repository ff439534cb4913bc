from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class SignupRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    email: str = Field(..., max_length=255)
    username: str = Field(..., max_length=255)
    password: str = Field(..., max_length=256)
    firstname: str = Field(..., max_length=120)
    lastname: str = Field(..., max_length=120)
    phone: str | None = Field(default=None, max_length=40)


class LoginRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    email: str = Field(..., max_length=255)
    password: str = Field(..., max_length=256)


class SignupResponse(BaseModel):
    id: str
    email: str
    username: str
    firstname: str
    lastname: str
    token: str


class LoginResponse(BaseModel):
    id: str
    email: str
    username: str
    firstname: str
    lastname: str
    phone: str
    token: str


class ProfileNameResponse(BaseModel):
    firstname: str
    lastname: str


class ProfileResponse(BaseModel):
    id: str
    email: str
    username: str
    name: ProfileNameResponse
    phone: str
    address: dict[str, Any] | None = None
