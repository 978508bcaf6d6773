# Standard library imports
from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class DetailedLocation:
    """Reverse-geocoded address parts attached by the capture device."""
    city: str = ""
    country: str = ""
    display_name: str = ""
    state: str = ""
    suburb: str = ""


@dataclass
class Location:
    city: str = ""
    country: str = ""
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    detailed: Optional[DetailedLocation] = None


@dataclass
class FaceBox:
    x: float
    y: float
    width: float
    height: float


@dataclass
class FaceDetection:
    box: FaceBox
    score: float


@dataclass
class LandmarkPoint:
    x: float
    y: float


@dataclass
class DetectedFace:
    """
    One face found in a memory image.

    ``name`` is None when the face did not match any reference face.
    ``distance`` is only known right after matching; persisted faces keep
    ``confidence`` (1 - distance, two decimals) instead.
    """
    detection: FaceDetection
    name: Optional[str] = None
    confidence: Optional[float] = None
    distance: Optional[float] = None
    landmarks: List[LandmarkPoint] = field(default_factory=list)


@dataclass
class MemoryImage:
    """
    Image captured by the IoT device.

    ``timestamp`` uses the device format ``YYYY-MM-DD_HH-MM-SS`` and may be
    missing for partially written entries.
    """
    id: str
    img_url: str = ""
    timestamp: Optional[str] = None
    location: Optional[Location] = None
    detected_faces: Optional[List[DetectedFace]] = None
