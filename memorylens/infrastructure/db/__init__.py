from .firebase_connection import (
    initialize_firebase,
    is_firebase_ready,
    get_reference,
    get_status_reference,
    get_images_reference,
    get_faces_reference,
    get_users_reference,
)
from .firebase_user_repository import FirebaseUserRepository
from .firebase_memory_repository import FirebaseMemoryRepository
from .firebase_face_repository import FirebaseFaceRepository
from .firebase_status_repository import FirebaseCaptureStatusRepository
from .realtime_listener import RealtimeListener

__all__ = [
    "initialize_firebase",
    "is_firebase_ready",
    "get_reference",
    "get_status_reference",
    "get_images_reference",
    "get_faces_reference",
    "get_users_reference",
    "FirebaseUserRepository",
    "FirebaseMemoryRepository",
    "FirebaseFaceRepository",
    "FirebaseCaptureStatusRepository",
    "RealtimeListener",
]
