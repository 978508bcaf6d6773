# Standard library imports
from typing import List, Optional

# Local application imports
from ....domain.models.memory import DetectedFace, MemoryImage
from ....domain.constants import PLACEHOLDER_IMAGE_URL, UNKNOWN_LOCATION
from ....utils.datetime_utils import format_capture_date, format_capture_time
from ...dto.memory_dto import (
    DetectedFaceResponse,
    FaceBoxResponse,
    LandmarkResponse,
    LocationResponse,
    MemoryResponse,
)


def detected_face_to_response(face: DetectedFace) -> DetectedFaceResponse:
    box = face.detection.box
    return DetectedFaceResponse(
        box=FaceBoxResponse(x=box.x, y=box.y, width=box.width, height=box.height),
        score=face.detection.score,
        name=face.name,
        confidence=face.confidence,
        distance=face.distance,
        landmarks=[LandmarkResponse(x=point.x, y=point.y) for point in face.landmarks],
    )


def memory_to_response(memory: MemoryImage) -> MemoryResponse:
    """Build the card view of a memory."""
    location = memory.location
    detailed = location.detailed if location else None

    city = (detailed.city if detailed else "") or (location.city if location else "") or UNKNOWN_LOCATION
    detected_faces: Optional[List[DetectedFaceResponse]] = None
    if memory.detected_faces is not None:
        detected_faces = [detected_face_to_response(face) for face in memory.detected_faces]

    return MemoryResponse(
        id=memory.id,
        img_url=memory.img_url,
        image_url=memory.img_url or PLACEHOLDER_IMAGE_URL,
        timestamp=memory.timestamp,
        formatted_date=format_capture_date(memory.timestamp),
        formatted_time=format_capture_time(memory.timestamp),
        city=city,
        state=(detailed.state if detailed else "") or "",
        address=(detailed.display_name if detailed else "") or "",
        location=LocationResponse(
            city=location.city,
            country=location.country,
            latitude=location.latitude,
            longitude=location.longitude,
        ) if location else None,
        detected_faces=detected_faces,
    )


def sort_newest_first(memories: List[MemoryImage]) -> List[MemoryImage]:
    """
    Order memories by timestamp, newest first.

    Device timestamps sort lexicographically; entries without one go last
    and keep their relative order.
    """
    with_timestamp = [memory for memory in memories if memory.timestamp]
    without_timestamp = [memory for memory in memories if not memory.timestamp]
    with_timestamp.sort(key=lambda memory: memory.timestamp, reverse=True)
    return with_timestamp + without_timestamp
