from typing import TYPE_CHECKING
from ...domain.repositories.memory_repository import MemoryRepository
from ...domain.repositories.face_repository import FaceRepository
from ...application.services.face_recognition_service import FaceRecognitionService
from ...application.use_cases.memory.list_memories import ListMemoriesUseCase
from ...application.use_cases.memory.get_memory import GetMemoryUseCase
from ...application.use_cases.memory.recognize_memory_faces import RecognizeMemoryFacesUseCase

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class MemoryProvider:
    """Registers memory dashboard and recognition use cases"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        container.register_factory(
            ListMemoriesUseCase,
            lambda: ListMemoriesUseCase(memory_repository=container.get(MemoryRepository))
        )
        container.register_factory(
            GetMemoryUseCase,
            lambda: GetMemoryUseCase(memory_repository=container.get(MemoryRepository))
        )
        container.register_factory(
            RecognizeMemoryFacesUseCase,
            lambda: RecognizeMemoryFacesUseCase(
                memory_repository=container.get(MemoryRepository),
                face_repository=container.get(FaceRepository),
                recognition_service=container.get(FaceRecognitionService),
            )
        )
