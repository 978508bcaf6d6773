from typing import TYPE_CHECKING
from ...domain.repositories.user_repository import UserRepository
from ...domain.repositories.memory_repository import MemoryRepository
from ...domain.repositories.face_repository import FaceRepository
from ...domain.repositories.status_repository import CaptureStatusRepository
from ...infrastructure.db.firebase_user_repository import FirebaseUserRepository
from ...infrastructure.db.firebase_memory_repository import FirebaseMemoryRepository
from ...infrastructure.db.firebase_face_repository import FirebaseFaceRepository
from ...infrastructure.db.firebase_status_repository import FirebaseCaptureStatusRepository

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class RepositoryProvider:
    """Wires domain repository interfaces to the realtime database implementations"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register repository singletons.
        Database references are resolved lazily on first use, so the container
        can be built before Firebase is initialized.
        """
        container.register_singleton(UserRepository, FirebaseUserRepository())
        container.register_singleton(MemoryRepository, FirebaseMemoryRepository())
        container.register_singleton(FaceRepository, FirebaseFaceRepository())
        container.register_singleton(CaptureStatusRepository, FirebaseCaptureStatusRepository())
