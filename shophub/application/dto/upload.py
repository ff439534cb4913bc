from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UploadImageInput:
    filename: str | None
    content_type: str | None
    content: bytes


@dataclass(frozen=True)
class UploadImageOutput:
    url: str
    public_id: str
