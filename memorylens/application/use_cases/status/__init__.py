from .get_capture_status import GetCaptureStatusUseCase
from .set_capture_status import SetCaptureStatusUseCase, STATUS_NOTICES, STATUS_UPDATE_FAILED
from .toggle_capture_status import ToggleCaptureStatusUseCase

__all__ = [
    "GetCaptureStatusUseCase",
    "SetCaptureStatusUseCase",
    "ToggleCaptureStatusUseCase",
    "STATUS_NOTICES",
    "STATUS_UPDATE_FAILED",
]
