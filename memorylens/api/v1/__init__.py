from .auth_controller import router as auth_router
from .memory_controller import router as memory_router
from .status_controller import router as status_router
from .face_controller import router as face_router
from .upload_controller import router as upload_router
from .contact_controller import router as contact_router
from .realtime_controller import router as realtime_router


__all__ = [
    "auth_router",
    "memory_router",
    "status_router",
    "face_router",
    "upload_router",
    "contact_router",
    "realtime_router",
]
