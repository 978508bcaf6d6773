# Standard library imports
import logging

# Local application imports
from ...dto.contact_dto import ContactRequest, ContactResponse

logger = logging.getLogger(__name__)


class SubmitContactUseCase:
    """Use case for the contact form. Messages are logged, not stored."""

    async def execute(self, request: ContactRequest) -> ContactResponse:
        logger.info(
            "Contact message from %s <%s>: %s (%d chars)",
            request.name, request.email, request.subject, len(request.message),
        )
        return ContactResponse()
