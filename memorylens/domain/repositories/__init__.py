from .user_repository import UserRepository
from .memory_repository import MemoryRepository
from .face_repository import FaceRepository
from .status_repository import CaptureStatusRepository

__all__ = ["UserRepository", "MemoryRepository", "FaceRepository", "CaptureStatusRepository"]
