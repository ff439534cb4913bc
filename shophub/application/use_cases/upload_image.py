from __future__ import annotations

import logging

from shophub.application.dto.upload import UploadImageInput, UploadImageOutput
from shophub.application.ports.object_storage_port import ObjectStoragePort
from shophub.domain.exceptions import UploadInputError


logger = logging.getLogger(__name__)


class UploadImageUseCase:
    def __init__(self, *, object_storage: ObjectStoragePort):
        self._object_storage = object_storage

    def execute(self, command: UploadImageInput, *, uploaded_by: str) -> UploadImageOutput:
        if not command.content:
            raise UploadInputError("No file uploaded")

        output = self._object_storage.upload_image(
            content=command.content,
            filename=command.filename,
            content_type=command.content_type,
        )
        logger.info(
            "upload_image: stored public_id=%s bytes=%s uploaded_by=%s",
            output.public_id,
            len(command.content),
            uploaded_by,
        )
        return output
