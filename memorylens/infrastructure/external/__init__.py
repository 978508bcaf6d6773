"""External service clients (image CDN, image downloads)"""

from .imagekit_client import ImageKitClient, ImageKitConfigurationError
from .image_fetcher import ImageFetcher, ImageFetchError, decode_image

__all__ = [
    "ImageKitClient",
    "ImageKitConfigurationError",
    "ImageFetcher",
    "ImageFetchError",
    "decode_image",
]
