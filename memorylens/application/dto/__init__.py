from .auth_dto import UserRegistrationRequest, UserLoginRequest, TokenResponse
from .user_dto import UserResponse
from .memory_dto import (
    DetectedFaceResponse,
    FaceBoxResponse,
    LandmarkResponse,
    LocationResponse,
    MemoryDetailResponse,
    MemoryResponse,
    RecognitionResponse,
)
from .face_dto import FaceImageUpload, FaceRegistrationRequest, FaceResponse
from .status_dto import (
    CaptureStatusChangeResponse,
    CaptureStatusResponse,
    CaptureStatusUpdateRequest,
)
from .upload_dto import UploadAuthResponse
from .contact_dto import ContactRequest, ContactResponse

__all__ = [
    "UserRegistrationRequest",
    "UserLoginRequest",
    "TokenResponse",
    "UserResponse",
    "DetectedFaceResponse",
    "FaceBoxResponse",
    "LandmarkResponse",
    "LocationResponse",
    "MemoryDetailResponse",
    "MemoryResponse",
    "RecognitionResponse",
    "FaceImageUpload",
    "FaceRegistrationRequest",
    "FaceResponse",
    "CaptureStatusChangeResponse",
    "CaptureStatusResponse",
    "CaptureStatusUpdateRequest",
    "UploadAuthResponse",
    "ContactRequest",
    "ContactResponse",
]
