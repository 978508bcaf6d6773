from typing import List, Optional
from pydantic import BaseModel, Field


class FaceImageUpload(BaseModel):
    """One reference photo received from a form or API upload"""
    filename: str
    content_type: Optional[str] = None
    content: bytes


class FaceRegistrationRequest(BaseModel):
    name: str = ""
    images: List[FaceImageUpload] = Field(default_factory=list)


class FaceResponse(BaseModel):
    id: str
    name: str
    image_urls: List[str] = Field(default_factory=list)
