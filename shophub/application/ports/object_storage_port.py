from __future__ import annotations

from typing import Protocol

from shophub.application.dto.upload import UploadImageOutput


class ObjectStoragePort(Protocol):
    def upload_image(
        self,
        *,
        content: bytes,
        filename: str | None,
        content_type: str | None,
    ) -> UploadImageOutput:
        ...
