# Standard library imports
import asyncio
import logging
from typing import Any, Dict, Iterable, List, Optional, Tuple

# External package imports
from firebase_admin import db
from firebase_admin.exceptions import FirebaseError

# Local application imports
from ...domain.repositories.memory_repository import MemoryRepository
from ...domain.models.memory import (
    DetailedLocation,
    DetectedFace,
    FaceBox,
    FaceDetection,
    Location,
    MemoryImage,
)
from ...domain.constants import (
    DetectedFaceFields,
    IMAGES_PATH,
    LocationFields,
    MemoryFields,
)
from .firebase_connection import get_images_reference, get_root_reference

logger = logging.getLogger(__name__)


def iter_children(value: Any) -> Iterable[Tuple[str, Any]]:
    """
    Iterate (key, child) pairs of a realtime database node.

    The database returns nodes whose keys are all small integers as lists
    (with None holes), every other node as a dict.
    """
    if isinstance(value, dict):
        return ((str(key), child) for key, child in value.items() if child is not None)
    if isinstance(value, list):
        return ((str(index), child) for index, child in enumerate(value) if child is not None)
    return iter(())


def _as_float(value: Any, default: Optional[float] = None) -> Optional[float]:
    try:
        return float(value)
    except (TypeError, ValueError):
        return default


def _location_from_record(record: Any) -> Optional[Location]:
    if not isinstance(record, dict):
        return None
    detailed_record = record.get(LocationFields.DETAILED)
    detailed = None
    if isinstance(detailed_record, dict):
        detailed = DetailedLocation(
            city=detailed_record.get(LocationFields.CITY) or "",
            country=detailed_record.get(LocationFields.COUNTRY) or "",
            display_name=detailed_record.get(LocationFields.DISPLAY_NAME) or "",
            state=detailed_record.get(LocationFields.STATE) or "",
            suburb=detailed_record.get(LocationFields.SUBURB) or "",
        )
    return Location(
        city=record.get(LocationFields.CITY) or "",
        country=record.get(LocationFields.COUNTRY) or "",
        latitude=_as_float(record.get(LocationFields.LATITUDE)),
        longitude=_as_float(record.get(LocationFields.LONGITUDE)),
        detailed=detailed,
    )


def detected_face_from_record(record: Any) -> Optional[DetectedFace]:
    """Parse one stored detectedFaces entry; entries without a box are dropped."""
    if not isinstance(record, dict):
        return None
    detection = record.get(DetectedFaceFields.DETECTION)
    if not isinstance(detection, dict) or not isinstance(detection.get(DetectedFaceFields.BOX), dict):
        return None
    box = detection[DetectedFaceFields.BOX]
    return DetectedFace(
        detection=FaceDetection(
            box=FaceBox(
                x=_as_float(box.get(DetectedFaceFields.X), 0.0),
                y=_as_float(box.get(DetectedFaceFields.Y), 0.0),
                width=_as_float(box.get(DetectedFaceFields.WIDTH), 0.0),
                height=_as_float(box.get(DetectedFaceFields.HEIGHT), 0.0),
            ),
            score=_as_float(detection.get(DetectedFaceFields.SCORE), 0.0),
        ),
        name=record.get(DetectedFaceFields.NAME),
        confidence=_as_float(record.get(DetectedFaceFields.CONFIDENCE)),
    )


def memory_from_record(memory_id: str, record: Any) -> MemoryImage:
    """Convert a raw images/{id} record into a MemoryImage."""
    if not isinstance(record, dict):
        return MemoryImage(id=memory_id)

    detected_faces = None
    raw_faces = record.get(MemoryFields.DETECTED_FACES)
    if raw_faces is not None:
        detected_faces = [
            face
            for _, raw in iter_children(raw_faces)
            if (face := detected_face_from_record(raw)) is not None
        ]

    timestamp = record.get(MemoryFields.TIMESTAMP)
    return MemoryImage(
        id=memory_id,
        img_url=record.get(MemoryFields.IMG_URL) or "",
        timestamp=str(timestamp) if timestamp else None,
        location=_location_from_record(record.get(MemoryFields.LOCATION)),
        detected_faces=detected_faces,
    )


def detected_face_to_record(face: DetectedFace) -> Dict[str, Any]:
    """
    Serialize a face the way it is stored: detection box, name and confidence.
    Confidence falls back to 1 - distance when only the distance is known.
    """
    confidence = face.confidence
    if confidence is None and face.distance is not None:
        confidence = round(1 - face.distance, 2)
    box = face.detection.box
    return {
        DetectedFaceFields.DETECTION: {
            DetectedFaceFields.BOX: {
                DetectedFaceFields.X: box.x,
                DetectedFaceFields.Y: box.y,
                DetectedFaceFields.WIDTH: box.width,
                DetectedFaceFields.HEIGHT: box.height,
            },
            DetectedFaceFields.SCORE: face.detection.score,
        },
        DetectedFaceFields.NAME: face.name,
        DetectedFaceFields.CONFIDENCE: confidence,
    }


class FirebaseMemoryRepository(MemoryRepository):
    """Realtime database implementation of MemoryRepository"""

    def __init__(
        self,
        images_reference: Optional[db.Reference] = None,
        root_reference: Optional[db.Reference] = None,
    ) -> None:
        self._images_reference = images_reference
        self._root_reference = root_reference

    @property
    def images_reference(self) -> db.Reference:
        if self._images_reference is None:
            self._images_reference = get_images_reference()
        return self._images_reference

    @property
    def root_reference(self) -> db.Reference:
        if self._root_reference is None:
            self._root_reference = get_root_reference()
        return self._root_reference

    async def list_all(self) -> List[MemoryImage]:
        """
        Read every memory under images/.

        Returns:
            List of MemoryImage domain models (empty if the node is absent)
        """
        try:
            data = await asyncio.to_thread(self.images_reference.get)
        except FirebaseError as e:
            raise RuntimeError(f"Error reading memories: {str(e)}")
        return [memory_from_record(key, record) for key, record in iter_children(data)]

    async def find_by_id(self, memory_id: str) -> Optional[MemoryImage]:
        if not memory_id:
            return None
        try:
            record = await asyncio.to_thread(self.images_reference.child(memory_id).get)
        except FirebaseError as e:
            raise RuntimeError(f"Error reading memory {memory_id}: {str(e)}")
        if record is None:
            return None
        return memory_from_record(memory_id, record)

    async def save_detected_faces(self, memory_id: str, faces: List[DetectedFace]) -> bool:
        """
        Store recognition results with a multi-path update of
        images/{id}/detectedFaces.

        Returns:
            True if saved, False if the database rejected the update
        """
        records = [detected_face_to_record(face) for face in faces if face.detection is not None]
        updates = {f"{IMAGES_PATH}/{memory_id}/{MemoryFields.DETECTED_FACES}": records}
        try:
            await asyncio.to_thread(self.root_reference.update, updates)
        except (FirebaseError, ValueError, RuntimeError) as e:
            logger.error("Error saving detected faces for %s: %s", memory_id, e)
            return False
        logger.info("Detected faces saved for memory %s (%d faces)", memory_id, len(records))
        return True
