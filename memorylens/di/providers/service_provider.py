from typing import TYPE_CHECKING
from ...domain.repositories.memory_repository import MemoryRepository
from ...infrastructure.external.imagekit_client import ImageKitClient
from ...infrastructure.external.image_fetcher import ImageFetcher
from ...infrastructure.notifications.websocket_manager import WebSocketManager, get_websocket_manager
from ...application.services.face_recognition_service import FaceRecognitionService

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class ServiceProvider:
    """Registers infrastructure clients and the face recognition service"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        container.register_singleton(ImageKitClient, ImageKitClient())
        container.register_singleton(ImageFetcher, ImageFetcher())
        container.register_singleton(WebSocketManager, get_websocket_manager())

        # One shared instance keeps the reference descriptor cache warm
        container.register_singleton(
            FaceRecognitionService,
            FaceRecognitionService(
                image_fetcher=container.get(ImageFetcher),
                memory_repository=container.get(MemoryRepository),
            )
        )
