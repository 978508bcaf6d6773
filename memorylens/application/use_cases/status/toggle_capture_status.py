# Local application imports
from ....domain.repositories.status_repository import CaptureStatusRepository
from ...dto.status_dto import CaptureStatusChangeResponse
from .set_capture_status import SetCaptureStatusUseCase


class ToggleCaptureStatusUseCase:
    """Use case for the Start/Stop Capturing button"""

    def __init__(self, status_repository: CaptureStatusRepository) -> None:
        self.status_repository = status_repository
        self._set_status = SetCaptureStatusUseCase(status_repository)

    async def execute(self) -> CaptureStatusChangeResponse:
        """
        Flip "0" to "1" and anything else to "0"

        Raises:
            RuntimeError: If the flag cannot be read or written
        """
        current = await self.status_repository.get()
        return await self._set_status.execute(current.toggled())
