"""Shared HTTP client used for CDN uploads and image downloads."""
import httpx
import logging
from typing import Optional

logger = logging.getLogger(__name__)

_shared_client: Optional[httpx.AsyncClient] = None


def get_shared_http_client() -> httpx.AsyncClient:
    """
    Get or create the shared async HTTP client.

    Uploads to the image CDN and memory image downloads go through one pooled
    client so keep-alive connections are reused between requests.

    Returns:
        Shared AsyncClient instance
    """
    global _shared_client

    if _shared_client is None or _shared_client.is_closed:
        _shared_client = httpx.AsyncClient(
            timeout=60.0,
            limits=httpx.Limits(
                max_keepalive_connections=10,
                max_connections=50,
                keepalive_expiry=30.0,
            ),
            http2=True,
            follow_redirects=True,
        )
        logger.info("Created shared HTTP client")

    return _shared_client


async def close_shared_http_client() -> None:
    """Close the shared HTTP client (application shutdown)."""
    global _shared_client

    if _shared_client is not None:
        await _shared_client.aclose()
        _shared_client = None
        logger.info("Closed shared HTTP client")
