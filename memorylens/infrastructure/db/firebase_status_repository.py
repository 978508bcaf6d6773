# Standard library imports
import asyncio
from typing import Optional

# External package imports
from firebase_admin import db
from firebase_admin.exceptions import FirebaseError

# Local application imports
from ...domain.repositories.status_repository import CaptureStatusRepository
from ...domain.models.capture_status import CaptureStatus
from .firebase_connection import get_status_reference


class FirebaseCaptureStatusRepository(CaptureStatusRepository):
    """Reads and writes the status flag ("0"/"1") polled by the capture device"""

    def __init__(self, status_reference: Optional[db.Reference] = None) -> None:
        self._status_reference = status_reference

    @property
    def status_reference(self) -> db.Reference:
        if self._status_reference is None:
            self._status_reference = get_status_reference()
        return self._status_reference

    async def get(self) -> CaptureStatus:
        try:
            value = await asyncio.to_thread(self.status_reference.get)
        except FirebaseError as e:
            raise RuntimeError(f"Error reading capture status: {str(e)}")
        return CaptureStatus.from_value(value)

    async def set(self, status: CaptureStatus) -> None:
        try:
            await asyncio.to_thread(self.status_reference.set, status.value)
        except FirebaseError as e:
            raise RuntimeError(f"Error updating capture status: {str(e)}")
