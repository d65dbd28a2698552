from typing import List, Optional

from fastapi import APIRouter, Depends, File, UploadFile

from config.settings import Settings
from routers.dependencies import get_image_storage, get_settings
from schemas import UploadResponse
from services.errors import ValidationError
from services.file.image_storage_service import ImageStorageService, IncomingImage

router = APIRouter()

UPLOAD_FIELD = "product"


@router.post("/upload", summary="Upload product images", response_model=UploadResponse)
async def upload_images(
    product: Optional[List[UploadFile]] = File(None),
    storage: ImageStorageService = Depends(get_image_storage),
    settings: Settings = Depends(get_settings),
):
    """
    Store up to ``MAX_UPLOAD_FILES`` images sent in the ``product`` form field and
    return the public URL of each.
    """
    files = [upload for upload in (product or []) if upload.filename]
    if not files:
        raise ValidationError("No files uploaded").with_payload(success=0)
    if len(files) > settings.max_upload_files:
        raise ValidationError(
            f"At most {settings.max_upload_files} files can be uploaded at once"
        ).with_payload(success=0)

    images = [
        IncomingImage(field_name=UPLOAD_FIELD, original_name=upload.filename, content=await upload.read())
        for upload in files
    ]
    image_urls = await storage.store_images(images)
    return UploadResponse(image_urls=image_urls)
