# Standard library imports
from typing import List

# Local application imports
from ....domain.repositories.face_repository import FaceRepository
from ...dto.face_dto import FaceResponse


class ListFacesUseCase:
    """Use case for listing trained faces"""

    def __init__(self, face_repository: FaceRepository) -> None:
        self.face_repository = face_repository

    async def execute(self) -> List[FaceResponse]:
        faces = await self.face_repository.list_all()
        return [
            FaceResponse(id=face.id or "", name=face.name, image_urls=face.image_urls)
            for face in faces
        ]
