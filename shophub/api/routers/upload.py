from __future__ import annotations

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile

from shophub.api.deps import get_current_user, get_upload_image_use_case
from shophub.api.schemas.upload import UploadResponse
from shophub.application.dto.upload import UploadImageInput
from shophub.application.use_cases.upload_image import UploadImageUseCase
from shophub.domain.entities.user import User
from shophub.domain.exceptions import ObjectStorageError, UploadInputError


router = APIRouter(prefix="/upload", tags=["upload"])


@router.post("/upload", response_model=UploadResponse)
def upload_image(
    image: UploadFile | None = File(default=None),
    current_user: User = Depends(get_current_user),
    use_case: UploadImageUseCase = Depends(get_upload_image_use_case),
):
    content = image.file.read() if image is not None else b""
    try:
        output = use_case.execute(
            UploadImageInput(
                filename=image.filename if image is not None else None,
                content_type=image.content_type if image is not None else None,
                content=content,
            ),
            uploaded_by=current_user.id,
        )
    except UploadInputError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except ObjectStorageError as exc:
        raise HTTPException(status_code=502, detail="Error uploading image") from exc

    return UploadResponse(success=True, url=output.url, public_id=output.public_id)
