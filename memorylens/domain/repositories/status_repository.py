from abc import ABC, abstractmethod
from ..models.capture_status import CaptureStatus


class CaptureStatusRepository(ABC):
    """Repository interface for the device capture on/off flag"""

    @abstractmethod
    async def get(self) -> CaptureStatus:
        pass

    @abstractmethod
    async def set(self, status: CaptureStatus) -> None:
        pass
