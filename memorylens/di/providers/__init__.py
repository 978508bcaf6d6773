from .repository_provider import RepositoryProvider
from .service_provider import ServiceProvider
from .auth_provider import AuthProvider
from .memory_provider import MemoryProvider
from .face_provider import FaceProvider
from .status_provider import StatusProvider
from .site_provider import SiteProvider


__all__ = [
    "RepositoryProvider",
    "ServiceProvider",
    "AuthProvider",
    "MemoryProvider",
    "FaceProvider",
    "StatusProvider",
    "SiteProvider",
]
