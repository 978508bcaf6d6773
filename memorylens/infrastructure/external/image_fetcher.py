# Standard library imports
import logging
from typing import Optional

# External package imports
import cv2
import httpx
import numpy as np

# Local application imports
from ...core.config import get_settings
from ..http_client_factory import get_shared_http_client

logger = logging.getLogger(__name__)


class ImageFetchError(ValueError):
    """Raised when an image cannot be downloaded or decoded."""


def decode_image(content: bytes) -> np.ndarray:
    """
    Decode encoded image bytes into a BGR array.

    Raises:
        ImageFetchError: If the bytes are not an image or it has no pixels
    """
    if not content:
        raise ImageFetchError("Image has invalid dimensions")
    buffer = np.frombuffer(content, dtype=np.uint8)
    image = cv2.imdecode(buffer, cv2.IMREAD_COLOR)
    if image is None or image.size == 0 or image.shape[0] == 0 or image.shape[1] == 0:
        raise ImageFetchError("Image has invalid dimensions")
    return image


class ImageFetcher:
    """Downloads memory and reference images for face recognition."""

    def __init__(
        self,
        timeout: Optional[float] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        settings = get_settings()
        self.timeout = timeout or settings.image_fetch_timeout_seconds
        self._http_client = http_client

    @property
    def http_client(self) -> httpx.AsyncClient:
        return self._http_client or get_shared_http_client()

    async def fetch(self, image_url: str) -> np.ndarray:
        """
        Download an image and decode it.

        Raises:
            ImageFetchError: Empty URL, failed download or undecodable image
        """
        if not image_url or not isinstance(image_url, str):
            raise ImageFetchError("Invalid image URL")

        try:
            response = await self.http_client.get(image_url, timeout=self.timeout)
            response.raise_for_status()
        except httpx.TimeoutException:
            logger.error("Timeout downloading image %s", image_url)
            raise ImageFetchError(f"Timed out loading image: {image_url}")
        except httpx.HTTPStatusError as e:
            logger.error("HTTP %s downloading image %s", e.response.status_code, image_url)
            raise ImageFetchError(f"Failed to load image: HTTP {e.response.status_code}")
        except httpx.HTTPError as e:
            logger.error("Error downloading image %s: %s", image_url, e)
            raise ImageFetchError(f"Failed to load image: {str(e)}")

        return decode_image(response.content)
