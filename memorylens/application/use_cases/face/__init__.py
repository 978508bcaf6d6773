from .register_face import RegisterFaceUseCase, FACE_SAVE_FAILED, face_file_name
from .list_faces import ListFacesUseCase
from .delete_face import DeleteFaceUseCase

__all__ = [
    "RegisterFaceUseCase",
    "ListFacesUseCase",
    "DeleteFaceUseCase",
    "FACE_SAVE_FAILED",
    "face_file_name",
]
