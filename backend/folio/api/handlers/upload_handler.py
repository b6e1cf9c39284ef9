"""
Upload Handler

Image upload for project and blog post covers.
"""

from fastapi import APIRouter, Depends, File, UploadFile

from folio.shared.schemas.settings import UploadResponse
from folio.shared.services.upload_service import UploadService
from folio.api.dependencies import CurrentUser
from folio.api.dependencies.services import get_upload_service


router = APIRouter()


@router.post("", response_model=UploadResponse)
async def upload_file(
    current_user: CurrentUser,
    file: UploadFile = File(...),
    upload_service: UploadService = Depends(get_upload_service),
):
    """
    Store the file and return its public URL.

    Raises:
        400: Extension not allowed or file too large
    """
    url = await upload_service.save(file.filename, file.file)
    return UploadResponse(url=url)
