# Standard library imports
import logging

# Local application imports
from ....domain.repositories.face_repository import FaceRepository

logger = logging.getLogger(__name__)


class DeleteFaceUseCase:
    """Use case for removing a trained face"""

    def __init__(self, face_repository: FaceRepository) -> None:
        self.face_repository = face_repository

    async def execute(self, face_id: str) -> None:
        """
        Raises:
            ValueError: If the face does not exist
            RuntimeError: If the database delete fails
        """
        face = await self.face_repository.find_by_id(face_id)
        if face is None:
            raise ValueError("Face not found")
        await self.face_repository.delete(face_id)
        logger.info("Face %s (%s) deleted", face_id, face.name)
