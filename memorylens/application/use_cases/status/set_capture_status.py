# Standard library imports
import logging
from typing import Tuple

# Local application imports
from ....domain.repositories.status_repository import CaptureStatusRepository
from ....domain.models.capture_status import CaptureStatus
from ...dto.status_dto import CaptureStatusChangeResponse

logger = logging.getLogger(__name__)

STATUS_NOTICES = {
    CaptureStatus.CAPTURING: (
        "MemoryLens started capturing memories",
        "The device will now automatically capture images at set intervals.",
    ),
    CaptureStatus.STOPPED: (
        "MemoryLens stopped capturing memories",
        "The device has stopped capturing images.",
    ),
}
STATUS_UPDATE_FAILED = "Failed to update status"


def status_notice(status: CaptureStatus) -> Tuple[str, str]:
    return STATUS_NOTICES[status]


class SetCaptureStatusUseCase:
    """Use case for explicitly starting or stopping capture"""

    def __init__(self, status_repository: CaptureStatusRepository) -> None:
        self.status_repository = status_repository

    async def execute(self, status: CaptureStatus) -> CaptureStatusChangeResponse:
        """
        Write the capture flag

        Raises:
            RuntimeError: "Failed to update status: <reason>" if the write fails
        """
        try:
            await self.status_repository.set(status)
        except RuntimeError as e:
            logger.error("Error updating status: %s", e)
            raise RuntimeError(f"{STATUS_UPDATE_FAILED}: {str(e)}")

        title, description = status_notice(status)
        logger.info("Capture status set to %s", status.value)
        return CaptureStatusChangeResponse(
            status=status.value,
            capturing=status is CaptureStatus.CAPTURING,
            title=title,
            description=description,
        )
