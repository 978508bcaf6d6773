from .user import User
from .capture_status import CaptureStatus
from .known_face import KnownFace
from .memory import (
    DetailedLocation,
    Location,
    FaceBox,
    FaceDetection,
    LandmarkPoint,
    DetectedFace,
    MemoryImage,
)

__all__ = [
    "User",
    "CaptureStatus",
    "KnownFace",
    "DetailedLocation",
    "Location",
    "FaceBox",
    "FaceDetection",
    "LandmarkPoint",
    "DetectedFace",
    "MemoryImage",
]
