from typing import TYPE_CHECKING
from ...domain.repositories.face_repository import FaceRepository
from ...infrastructure.external.imagekit_client import ImageKitClient
from ...application.use_cases.face.register_face import RegisterFaceUseCase
from ...application.use_cases.face.list_faces import ListFacesUseCase
from ...application.use_cases.face.delete_face import DeleteFaceUseCase

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class FaceProvider:
    """Registers face training use cases"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        container.register_factory(
            RegisterFaceUseCase,
            lambda: RegisterFaceUseCase(
                face_repository=container.get(FaceRepository),
                imagekit_client=container.get(ImageKitClient),
            )
        )
        container.register_factory(
            ListFacesUseCase,
            lambda: ListFacesUseCase(face_repository=container.get(FaceRepository))
        )
        container.register_factory(
            DeleteFaceUseCase,
            lambda: DeleteFaceUseCase(face_repository=container.get(FaceRepository))
        )
