"""
Realtime database subscriptions.

``Reference.listen`` delivers events on a background SDK thread; this module
hands them over to the asyncio event loop so the dashboard can be notified
and new images can be queued for face recognition.
"""

# Standard library imports
import asyncio
import logging
from typing import Any, Awaitable, Callable, List, Optional

# External package imports
from firebase_admin import db

# Local application imports
from ...domain.models.capture_status import CaptureStatus
from ...domain.constants import MemoryFields
from .firebase_connection import get_images_reference, get_status_reference
from .firebase_memory_repository import iter_children

logger = logging.getLogger(__name__)

StatusCallback = Callable[[CaptureStatus], Awaitable[None]]
ImagesCallback = Callable[[List[str]], Awaitable[None]]


def _needs_recognition(record: Any) -> bool:
    return isinstance(record, dict) and MemoryFields.DETECTED_FACES not in record


def pending_image_ids(path: str, data: Any) -> List[str]:
    """
    Work out which images an images/ event touched that still have no
    recognition results.

    Args:
        path: Event path relative to images/ ("/" for the whole node)
        data: Event payload

    Returns:
        Image IDs to queue for recognition
    """
    parts = [part for part in (path or "/").split("/") if part]
    if not parts:
        return [
            key for key, record in iter_children(data)
            if "/" not in key and _needs_recognition(record)
        ]
    if len(parts) == 1:
        return [parts[0]] if _needs_recognition(data) else []
    # Writes below an image (e.g. its detectedFaces) are not new images
    return []


class RealtimeListener:
    """Subscribes to status/ and images/ and relays changes to coroutines."""

    def __init__(
        self,
        loop: asyncio.AbstractEventLoop,
        on_status_change: StatusCallback,
        on_images_change: ImagesCallback,
        status_reference: Optional[db.Reference] = None,
        images_reference: Optional[db.Reference] = None,
    ) -> None:
        self._loop = loop
        self._on_status_change = on_status_change
        self._on_images_change = on_images_change
        self._status_reference = status_reference
        self._images_reference = images_reference
        self._registrations: List[Any] = []

    def start(self) -> None:
        status_reference = self._status_reference or get_status_reference()
        images_reference = self._images_reference or get_images_reference()
        self._registrations.append(status_reference.listen(self._handle_status_event))
        self._registrations.append(images_reference.listen(self._handle_images_event))
        logger.info("Realtime listeners attached to status and images")

    def stop(self) -> None:
        for registration in self._registrations:
            try:
                registration.close()
            except Exception as e:
                logger.warning("Error closing realtime listener: %s", e)
        self._registrations.clear()
        logger.info("Realtime listeners closed")

    @property
    def is_running(self) -> bool:
        return bool(self._registrations)

    def _handle_status_event(self, event: Any) -> None:
        status = CaptureStatus.from_value(event.data)
        logger.debug("Capture status event %s: %s", event.event_type, status.value)
        self._submit(self._on_status_change(status))

    def _handle_images_event(self, event: Any) -> None:
        image_ids = pending_image_ids(event.path, event.data)
        logger.debug("Images event %s at %s: %d pending", event.event_type, event.path, len(image_ids))
        self._submit(self._on_images_change(image_ids))

    def _submit(self, coroutine: Awaitable[None]) -> None:
        if self._loop.is_closed():
            logger.debug("Event loop closed; dropping realtime event")
            coroutine.close()
            return
        asyncio.run_coroutine_threadsafe(coroutine, self._loop)
