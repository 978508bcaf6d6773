# External package imports
from fastapi import APIRouter

# Local application imports
from ...application.dto.contact_dto import ContactRequest, ContactResponse
from ...application.use_cases.contact.submit_contact import SubmitContactUseCase
from ...di.container import get_container


router = APIRouter(tags=["contact"])


@router.post("", response_model=ContactResponse)
async def submit_contact(request: ContactRequest) -> ContactResponse:
    """Contact form submission from the public site"""
    container = get_container()
    contact_use_case = container.get(SubmitContactUseCase)
    return await contact_use_case.execute(request)
