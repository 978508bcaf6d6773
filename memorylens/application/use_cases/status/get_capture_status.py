# Local application imports
from ....domain.repositories.status_repository import CaptureStatusRepository
from ....domain.models.capture_status import CaptureStatus
from ...dto.status_dto import CaptureStatusResponse


def status_response(status: CaptureStatus) -> CaptureStatusResponse:
    return CaptureStatusResponse(status=status.value, capturing=status is CaptureStatus.CAPTURING)


class GetCaptureStatusUseCase:
    """Use case for reading the device capture flag"""

    def __init__(self, status_repository: CaptureStatusRepository) -> None:
        self.status_repository = status_repository

    async def execute(self) -> CaptureStatusResponse:
        return status_response(await self.status_repository.get())
