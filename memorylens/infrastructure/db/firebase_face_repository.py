# Standard library imports
import asyncio
import logging
from typing import Any, List, Optional

# External package imports
from firebase_admin import db
from firebase_admin.exceptions import FirebaseError

# Local application imports
from ...domain.repositories.face_repository import FaceRepository
from ...domain.models.known_face import KnownFace
from ...domain.constants import FaceFields
from .firebase_connection import get_faces_reference
from .firebase_memory_repository import iter_children

logger = logging.getLogger(__name__)


class FirebaseFaceRepository(FaceRepository):
    """Realtime database implementation of FaceRepository (faces/ node)"""

    def __init__(self, faces_reference: Optional[db.Reference] = None) -> None:
        self._faces_reference = faces_reference

    @property
    def faces_reference(self) -> db.Reference:
        if self._faces_reference is None:
            self._faces_reference = get_faces_reference()
        return self._faces_reference

    async def list_all(self) -> List[KnownFace]:
        try:
            data = await asyncio.to_thread(self.faces_reference.get)
        except FirebaseError as e:
            raise RuntimeError(f"Error reading faces: {str(e)}")

        faces: List[KnownFace] = []
        for key, record in iter_children(data):
            face = self._record_to_face(key, record)
            if face is not None:
                faces.append(face)
        return faces

    async def find_by_id(self, face_id: str) -> Optional[KnownFace]:
        if not face_id:
            return None
        try:
            record = await asyncio.to_thread(self.faces_reference.child(face_id).get)
        except FirebaseError as e:
            raise RuntimeError(f"Error reading face {face_id}: {str(e)}")
        return self._record_to_face(face_id, record)

    async def create(self, face: KnownFace) -> KnownFace:
        """
        Push a new face record; the database generates the key.

        Returns:
            KnownFace with its generated ID
        """
        record = {
            FaceFields.NAME: face.name,
            FaceFields.IMAGE_URLS: list(face.image_urls),
        }
        try:
            new_reference = await asyncio.to_thread(self.faces_reference.push, record)
        except FirebaseError as e:
            raise RuntimeError(f"Error saving face: {str(e)}")
        logger.info("Saved face %s (%s)", new_reference.key, face.name)
        return KnownFace(id=new_reference.key, name=face.name, image_urls=list(face.image_urls))

    async def delete(self, face_id: str) -> None:
        try:
            await asyncio.to_thread(self.faces_reference.child(face_id).delete)
        except FirebaseError as e:
            raise RuntimeError(f"Error deleting face {face_id}: {str(e)}")
        logger.info("Deleted face %s", face_id)

    def _record_to_face(self, face_id: str, record: Any) -> Optional[KnownFace]:
        if not isinstance(record, dict):
            return None
        name = record.get(FaceFields.NAME)
        if not name:
            logger.warning("Skipping face %s without a name", face_id)
            return None
        image_urls = [str(url) for _, url in iter_children(record.get(FaceFields.IMAGE_URLS)) if url]
        return KnownFace(id=face_id, name=name, image_urls=image_urls)
