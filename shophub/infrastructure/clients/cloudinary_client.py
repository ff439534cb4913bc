from __future__ import annotations

from dataclasses import dataclass
import io
import logging

import cloudinary
import cloudinary.uploader
from cloudinary.exceptions import Error as CloudinaryError

from shophub.application.dto.upload import UploadImageOutput
from shophub.application.ports.object_storage_port import ObjectStoragePort
from shophub.domain.exceptions import ObjectStorageError


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CloudinaryClientSettings:
    cloud_name: str
    api_key: str
    api_secret: str
    folder: str
    timeout_seconds: float


class CloudinaryClient(ObjectStoragePort):
    def __init__(self, settings: CloudinaryClientSettings):
        cloudinary.config(
            cloud_name=settings.cloud_name,
            api_key=settings.api_key,
            api_secret=settings.api_secret,
            secure=True,
        )
        self._settings = settings

    def upload_image(
        self,
        *,
        content: bytes,
        filename: str | None,
        content_type: str | None,
    ) -> UploadImageOutput:
        stream = io.BytesIO(content)
        if filename:
            stream.name = filename

        try:
            result = cloudinary.uploader.upload(
                stream,
                folder=self._settings.folder,
                resource_type="auto",
                timeout=self._settings.timeout_seconds,
            )
        except CloudinaryError as exc:
            logger.warning(
                "cloudinary_client: upload_failed filename=%s content_type=%s error=%s",
                filename,
                content_type,
                exc,
            )
            raise ObjectStorageError("Object storage rejected upload.") from exc

        url = result.get("secure_url") or result.get("url")
        public_id = result.get("public_id")
        if not url or not public_id:
            raise ObjectStorageError("Object storage response is incomplete.")

        logger.info(
            "cloudinary_client: uploaded public_id=%s bytes=%s",
            public_id,
            len(content),
        )
        return UploadImageOutput(url=str(url), public_id=str(public_id))
