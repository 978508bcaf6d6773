"""
Background face recognition for newly captured memories.

Image IDs arrive from the realtime listener; each one is recognized at most
once per process and retried a limited number of times on failure.
"""

# Standard library imports
import asyncio
import logging
from typing import Any, Awaitable, Callable, Dict, Iterable, Optional, Set

logger = logging.getLogger(__name__)

RecognizeCallable = Callable[[str], Awaitable[Any]]


class RecognitionWorker:
    """asyncio queue consumer running recognition one image at a time."""

    def __init__(
        self,
        recognize: RecognizeCallable,
        max_attempts: int = 3,
        retry_delay_seconds: float = 1.0,
    ) -> None:
        self._recognize = recognize
        self.max_attempts = max(1, max_attempts)
        self.retry_delay_seconds = retry_delay_seconds
        self._queue: "asyncio.Queue[str]" = asyncio.Queue()
        self._queued: Set[str] = set()
        # Saving an empty detectedFaces list removes the node, so finished
        # IDs have to be remembered here or they would be queued again.
        self._finished: Set[str] = set()
        self._attempts: Dict[str, int] = {}
        self._task: Optional[asyncio.Task] = None

    def enqueue(self, image_id: str) -> bool:
        """Queue an image; returns False if it is queued or already handled."""
        if not image_id or image_id in self._queued or image_id in self._finished:
            return False
        self._queued.add(image_id)
        self._queue.put_nowait(image_id)
        logger.debug("Queued memory %s for recognition", image_id)
        return True

    def enqueue_many(self, image_ids: Iterable[str]) -> int:
        return sum(1 for image_id in image_ids if self.enqueue(image_id))

    def attempts(self, image_id: str) -> int:
        return self._attempts.get(image_id, 0)

    def is_finished(self, image_id: str) -> bool:
        return image_id in self._finished

    @property
    def pending(self) -> int:
        return self._queue.qsize()

    @property
    def is_running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self) -> None:
        if self.is_running:
            return
        self._task = asyncio.create_task(self.run())
        logger.info("Recognition worker started")

    async def stop(self) -> None:
        if self._task is None:
            return
        self._task.cancel()
        try:
            await self._task
        except asyncio.CancelledError:
            pass
        self._task = None
        logger.info("Recognition worker stopped")

    async def run(self) -> None:
        while True:
            image_id = await self._queue.get()
            try:
                await self.process(image_id)
            finally:
                self._queue.task_done()

    async def join(self) -> None:
        await self._queue.join()

    async def process(self, image_id: str) -> bool:
        """
        Recognize one image, requeueing it on failure until the attempt limit.

        Returns:
            True if recognition succeeded
        """
        self._queued.discard(image_id)
        try:
            await self._recognize(image_id)
        except asyncio.CancelledError:
            raise
        except ValueError as e:
            # Missing memory or image without a URL; retrying will not help
            logger.warning("Skipping recognition for memory %s: %s", image_id, e)
            self._finish(image_id)
            return False
        except Exception as e:
            attempts = self._attempts.get(image_id, 0) + 1
            self._attempts[image_id] = attempts
            if attempts >= self.max_attempts:
                logger.warning(
                    "Giving up on memory %s after %d failed attempts: %s", image_id, attempts, e
                )
                self._finish(image_id)
                return False
            logger.error("Recognition attempt %d for memory %s failed: %s", attempts, image_id, e)
            if self.retry_delay_seconds > 0:
                await asyncio.sleep(self.retry_delay_seconds)
            self._queued.add(image_id)
            self._queue.put_nowait(image_id)
            return False

        logger.info("Recognition completed for memory %s", image_id)
        self._finish(image_id)
        return True

    def _finish(self, image_id: str) -> None:
        self._finished.add(image_id)
        self._attempts.pop(image_id, None)
