# Standard library imports
import logging
from typing import Any, Dict, Optional

# External package imports
import httpx

# Local application imports
from ...core.config import get_settings
from ...core.security import generate_upload_auth_parameters
from ..http_client_factory import get_shared_http_client

logger = logging.getLogger(__name__)


class ImageKitConfigurationError(RuntimeError):
    """Raised when the ImageKit private key is missing."""


class ImageKitClient:
    """
    Client for the ImageKit image CDN.

    Mints signed upload credentials and uploads files server-side using the
    same credentials a browser would receive from ``/api/imagekit-auth``.
    """

    def __init__(
        self,
        public_key: Optional[str] = None,
        private_key: Optional[str] = None,
        upload_url: Optional[str] = None,
        token_ttl_seconds: Optional[int] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        settings = get_settings()
        self.public_key = public_key if public_key is not None else settings.imagekit_public_key
        self.private_key = private_key if private_key is not None else settings.imagekit_private_key
        self.upload_url = upload_url or settings.imagekit_upload_url
        self.token_ttl_seconds = token_ttl_seconds or settings.imagekit_token_ttl_seconds
        self._http_client = http_client

    @property
    def http_client(self) -> httpx.AsyncClient:
        return self._http_client or get_shared_http_client()

    def get_authentication_parameters(self) -> Dict[str, Any]:
        """
        Generate ``{token, expire, signature}`` for a direct upload.

        Raises:
            ImageKitConfigurationError: If no private key is configured
        """
        if not self.private_key:
            raise ImageKitConfigurationError("ImageKit private key is not configured")
        return generate_upload_auth_parameters(self.private_key, self.token_ttl_seconds)

    async def upload(
        self,
        content: bytes,
        file_name: str,
        folder: str,
        content_type: str = "application/octet-stream",
    ) -> str:
        """
        Upload a file and return its CDN URL.

        Args:
            content: Raw file bytes
            file_name: Name to store the file under
            folder: Destination folder (e.g. "/faces")
            content_type: MIME type of the file

        Returns:
            The ``url`` of the uploaded file

        Raises:
            ImageKitConfigurationError: If no private key is configured
            RuntimeError: If the upload request fails
        """
        auth = self.get_authentication_parameters()
        data = {
            "publicKey": self.public_key,
            "signature": auth["signature"],
            "expire": str(auth["expire"]),
            "token": auth["token"],
            "fileName": file_name,
            "folder": folder,
        }
        files = {"file": (file_name, content, content_type)}

        try:
            logger.info("Uploading %s to ImageKit folder %s", file_name, folder)
            response = await self.http_client.post(self.upload_url, data=data, files=files)
            response.raise_for_status()
            payload = response.json()
        except httpx.TimeoutException:
            logger.error("Timeout uploading %s to ImageKit", file_name)
            raise RuntimeError("Upload failed")
        except httpx.HTTPStatusError as e:
            logger.error(
                "HTTP error uploading %s to ImageKit: %s - %s",
                file_name, e.response.status_code, e.response.text,
            )
            raise RuntimeError("Upload failed")
        except (httpx.HTTPError, ValueError) as e:
            logger.error("Error uploading %s to ImageKit: %s", file_name, e)
            raise RuntimeError("Upload failed")

        url = payload.get("url") if isinstance(payload, dict) else None
        if not url:
            logger.error("ImageKit response for %s has no url", file_name)
            raise RuntimeError("Upload failed")

        logger.info("Uploaded %s to %s", file_name, url)
        return url
