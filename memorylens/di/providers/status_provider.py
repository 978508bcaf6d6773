from typing import TYPE_CHECKING
from ...domain.repositories.status_repository import CaptureStatusRepository
from ...application.use_cases.status.get_capture_status import GetCaptureStatusUseCase
from ...application.use_cases.status.set_capture_status import SetCaptureStatusUseCase
from ...application.use_cases.status.toggle_capture_status import ToggleCaptureStatusUseCase

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class StatusProvider:
    """Registers capture status use cases"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        container.register_factory(
            GetCaptureStatusUseCase,
            lambda: GetCaptureStatusUseCase(status_repository=container.get(CaptureStatusRepository))
        )
        container.register_factory(
            SetCaptureStatusUseCase,
            lambda: SetCaptureStatusUseCase(status_repository=container.get(CaptureStatusRepository))
        )
        container.register_factory(
            ToggleCaptureStatusUseCase,
            lambda: ToggleCaptureStatusUseCase(status_repository=container.get(CaptureStatusRepository))
        )
