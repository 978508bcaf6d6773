from .face_recognition_service import FaceDetectionResult, FaceRecognitionService

__all__ = ["FaceDetectionResult", "FaceRecognitionService"]
