from .face_embedding import (
    DEFAULT_EMBEDDING_MODEL,
    DETECTOR_CHAIN,
    FaceEmbedding,
    detect_all_faces,
    detect_single_face,
    load_models,
    models_loaded,
)
from .face_matcher import (
    DEFAULT_DISTANCE_THRESHOLD,
    UNKNOWN_LABEL,
    FaceMatch,
    FaceMatcher,
    LabeledFaceDescriptors,
)
from .recognition_worker import RecognitionWorker

__all__ = [
    "DEFAULT_EMBEDDING_MODEL",
    "DETECTOR_CHAIN",
    "FaceEmbedding",
    "detect_all_faces",
    "detect_single_face",
    "load_models",
    "models_loaded",
    "DEFAULT_DISTANCE_THRESHOLD",
    "UNKNOWN_LABEL",
    "FaceMatch",
    "FaceMatcher",
    "LabeledFaceDescriptors",
    "RecognitionWorker",
]
