# Standard library imports
import logging

# Local application imports
from ....domain.repositories.face_repository import FaceRepository
from ....domain.repositories.memory_repository import MemoryRepository
from ...dto.memory_dto import RecognitionResponse
from ...services.face_recognition_service import FaceRecognitionService
from .memory_mapper import detected_face_to_response

logger = logging.getLogger(__name__)


class RecognizeMemoryFacesUseCase:
    """Use case for running face recognition on one memory and storing the result"""

    def __init__(
        self,
        memory_repository: MemoryRepository,
        face_repository: FaceRepository,
        recognition_service: FaceRecognitionService,
    ) -> None:
        self.memory_repository = memory_repository
        self.face_repository = face_repository
        self.recognition_service = recognition_service

    async def execute(self, memory_id: str) -> RecognitionResponse:
        """
        Detect, label and save the faces in a memory image

        Raises:
            ValueError: If the memory does not exist or has no image
            RuntimeError: If detection or saving fails
        """
        memory = await self.memory_repository.find_by_id(memory_id)
        if memory is None:
            raise ValueError("Memory not found")
        if not memory.img_url:
            raise ValueError("Invalid image URL")

        known_faces = await self.face_repository.list_all()
        result = await self.recognition_service.detect_faces(memory.img_url, known_faces)
        if result.error:
            raise RuntimeError(f"Face detection failed: {result.error}")

        saved = await self.recognition_service.save_detected_faces(memory_id, result.detected_faces)
        if not saved:
            raise RuntimeError("Failed to save detected faces")

        logger.info("Saved %d detected faces for memory %s", len(result.detected_faces), memory_id)
        return RecognitionResponse(
            memory_id=memory_id,
            detected_faces=[detected_face_to_response(face) for face in result.detected_faces],
            saved=True,
        )
