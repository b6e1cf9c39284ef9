"""
Contact Handler

Public contact form.
"""

from fastapi import APIRouter, Depends, status

from folio.shared.schemas.settings import ContactCreate, ContactResponse
from folio.shared.services.contact_service import ContactService
from folio.api.dependencies.services import get_contact_service


router = APIRouter()


@router.post(
    "",
    response_model=ContactResponse,
    status_code=status.HTTP_201_CREATED,
)
async def submit_contact(
    data: ContactCreate,
    contact_service: ContactService = Depends(get_contact_service),
):
    return await contact_service.submit(data.name, data.email, data.message)
