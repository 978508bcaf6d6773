from typing import List, Optional
from pydantic import BaseModel, Field


class FaceBoxResponse(BaseModel):
    x: float
    y: float
    width: float
    height: float


class LandmarkResponse(BaseModel):
    x: float
    y: float


class DetectedFaceResponse(BaseModel):
    """Face overlay for a memory; ``name`` is None for unrecognized faces"""
    box: FaceBoxResponse
    score: float
    name: Optional[str] = None
    confidence: Optional[float] = None
    distance: Optional[float] = None
    landmarks: List[LandmarkResponse] = Field(default_factory=list)


class LocationResponse(BaseModel):
    city: str = ""
    country: str = ""
    latitude: Optional[float] = None
    longitude: Optional[float] = None


class MemoryResponse(BaseModel):
    """
    DTO for a memory card.

    ``image_url`` is the URL to render (placeholder when the device wrote
    none); ``city``, ``state`` and ``address`` prefer the detailed
    reverse-geocoded location.
    """
    id: str
    img_url: str = ""
    image_url: str
    timestamp: Optional[str] = None
    formatted_date: str = ""
    formatted_time: str = ""
    city: str
    state: str = ""
    address: str = ""
    location: Optional[LocationResponse] = None
    detected_faces: Optional[List[DetectedFaceResponse]] = None


class MemoryDetailResponse(BaseModel):
    memory: MemoryResponse
    message: str


class RecognitionResponse(BaseModel):
    """Result of running face recognition on one memory"""
    memory_id: str
    detected_faces: List[DetectedFaceResponse] = Field(default_factory=list)
    saved: bool = False
    error: Optional[str] = None
