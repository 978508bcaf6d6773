"""
Face detection and descriptors using DeepFace.

Memory images and reference photos go through the same detector and
embedding model so their descriptors are comparable.
"""
from dataclasses import dataclass, field
from threading import Lock
from typing import Any, List, Optional, Sequence, Tuple
import logging

import numpy as np

from ...domain.models.memory import FaceBox, FaceDetection, LandmarkPoint

logger = logging.getLogger(__name__)

DEFAULT_EMBEDDING_MODEL = "Facenet"

# (detector backend, minimum detection confidence), tried in order
DETECTOR_CHAIN: Tuple[Tuple[str, float], ...] = (
    ("ssd", 0.5),
    ("opencv", 0.4),
)

_models_loaded = False
_models_lock = Lock()


@dataclass
class FaceEmbedding:
    """A detected face with its L2-normalized descriptor."""
    detection: FaceDetection
    descriptor: np.ndarray
    landmarks: List[LandmarkPoint] = field(default_factory=list)


def _get_deepface():
    try:
        from deepface import DeepFace
        return DeepFace
    except ImportError:
        return None


def load_models(model_name: str = DEFAULT_EMBEDDING_MODEL) -> bool:
    """
    Build the embedding model once per process.

    Failures are logged and reported through the return value.
    """
    global _models_loaded
    with _models_lock:
        if _models_loaded:
            return True
        DeepFace = _get_deepface()
        if DeepFace is None:
            logger.warning("DeepFace not available; install deepface.")
            return False
        try:
            DeepFace.build_model(model_name)
        except Exception as e:
            logger.error("Error loading face recognition model %s: %s", model_name, e)
            return False
        _models_loaded = True
        logger.info("Face recognition model %s loaded", model_name)
        return True


def models_loaded() -> bool:
    return _models_loaded


def normalize_descriptor(values: Sequence[float]) -> np.ndarray:
    vector = np.asarray(values, dtype=np.float64)
    norm = np.linalg.norm(vector)
    if norm == 0:
        return vector
    return vector / norm


def _landmarks(area: dict) -> List[LandmarkPoint]:
    points = []
    for key in ("left_eye", "right_eye", "nose", "mouth_left", "mouth_right"):
        point = area.get(key)
        if point is not None and len(point) == 2:
            points.append(LandmarkPoint(x=float(point[0]), y=float(point[1])))
    return points


def _to_face_embedding(obj: dict) -> Optional[FaceEmbedding]:
    embedding = obj.get("embedding")
    area = obj.get("facial_area") or {}
    width, height = float(area.get("w", 0)), float(area.get("h", 0))
    if embedding is None or width <= 0 or height <= 0:
        return None
    return FaceEmbedding(
        detection=FaceDetection(
            box=FaceBox(x=float(area.get("x", 0)), y=float(area.get("y", 0)), width=width, height=height),
            score=float(obj.get("face_confidence") or 0.0),
        ),
        descriptor=normalize_descriptor(embedding),
        landmarks=_landmarks(area),
    )


def represent_faces(
    image: Any,
    detector_backend: str,
    min_confidence: float,
    model_name: str = DEFAULT_EMBEDDING_MODEL,
) -> List[FaceEmbedding]:
    """
    Detect faces with one detector and compute their descriptors.

    Raises whatever DeepFace raises; callers decide whether to fall back.
    """
    DeepFace = _get_deepface()
    if DeepFace is None:
        raise RuntimeError("DeepFace not available; install deepface.")
    objs = DeepFace.represent(
        img_path=image,
        model_name=model_name,
        detector_backend=detector_backend,
        enforce_detection=False,
    )
    faces = []
    for obj in objs or []:
        if float(obj.get("face_confidence") or 0.0) < min_confidence:
            continue
        face = _to_face_embedding(obj)
        if face is not None:
            faces.append(face)
    return faces


def detect_all_faces(image: Any, model_name: str = DEFAULT_EMBEDDING_MODEL) -> List[FaceEmbedding]:
    """
    Detect every face in an image, falling back to the next detector when one
    fails or finds nothing.
    """
    for detector_backend, min_confidence in DETECTOR_CHAIN:
        try:
            faces = represent_faces(image, detector_backend, min_confidence, model_name)
        except Exception as e:
            logger.warning("Detector %s failed, trying next: %s", detector_backend, e)
            continue
        if faces:
            return faces
        logger.debug("Detector %s found no faces", detector_backend)
    return []


def detect_single_face(image: Any, model_name: str = DEFAULT_EMBEDDING_MODEL) -> Optional[FaceEmbedding]:
    """Return the most confident face in a reference photo, or None."""
    faces = detect_all_faces(image, model_name)
    if not faces:
        return None
    return max(faces, key=lambda face: (face.detection.score, face.detection.box.width * face.detection.box.height))
