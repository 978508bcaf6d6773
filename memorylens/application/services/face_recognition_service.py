"""
Face recognition for memory images.

Detects every face in a memory image, computes descriptors for the
registered reference photos and labels each detected face with the closest
registered person (or leaves it unnamed).
"""

# Standard library imports
import asyncio
import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Tuple

# External package imports
import numpy as np

# Local application imports
from ...core.config import get_settings
from ...domain.models.known_face import KnownFace
from ...domain.models.memory import DetectedFace
from ...domain.repositories.memory_repository import MemoryRepository
from ...infrastructure.external.image_fetcher import ImageFetcher
from ...infrastructure.recognition.face_embedding import (
    FaceEmbedding,
    detect_all_faces,
    detect_single_face,
    load_models,
)
from ...infrastructure.recognition.face_matcher import FaceMatcher, LabeledFaceDescriptors

logger = logging.getLogger(__name__)


@dataclass
class FaceDetectionResult:
    detected_faces: List[DetectedFace] = field(default_factory=list)
    error: Optional[str] = None


class FaceRecognitionService:
    """Detection, reference descriptors and matching for memory images"""

    def __init__(
        self,
        image_fetcher: ImageFetcher,
        memory_repository: MemoryRepository,
        distance_threshold: Optional[float] = None,
        detect_all: Callable[[Any], List[FaceEmbedding]] = detect_all_faces,
        detect_single: Callable[[Any], Optional[FaceEmbedding]] = detect_single_face,
        model_loader: Callable[[], bool] = load_models,
    ) -> None:
        self.image_fetcher = image_fetcher
        self.memory_repository = memory_repository
        self.distance_threshold = (
            distance_threshold if distance_threshold is not None
            else get_settings().face_match_threshold
        )
        self._detect_all = detect_all
        self._detect_single = detect_single
        self._model_loader = model_loader
        # (face id, image URL) -> descriptor of the reference photo
        self._descriptor_cache: Dict[Tuple[str, str], np.ndarray] = {}

    async def load_models(self) -> bool:
        return await asyncio.to_thread(self._model_loader)

    def clear_cache(self) -> None:
        self._descriptor_cache.clear()

    async def _reference_descriptor(self, face: KnownFace, image_url: str) -> Optional[np.ndarray]:
        cache_key = (face.id or face.name, image_url)
        cached = self._descriptor_cache.get(cache_key)
        if cached is not None:
            return cached
        try:
            image = await self.image_fetcher.fetch(image_url)
            embedding = await asyncio.to_thread(self._detect_single, image)
        except Exception as e:
            logger.warning("Error processing reference image %s for %s: %s", image_url, face.name, e)
            return None
        if embedding is None:
            logger.warning("No face detected in reference image %s for %s", image_url, face.name)
            return None
        self._descriptor_cache[cache_key] = embedding.descriptor
        return embedding.descriptor

    async def build_labeled_descriptors(self, known_faces: List[KnownFace]) -> List[LabeledFaceDescriptors]:
        """
        Compute descriptors for every registered person.

        Reference photos without a detectable face are skipped, and so are
        people left without any descriptor.
        """
        labeled = []
        for face in known_faces:
            descriptors = []
            for image_url in face.image_urls:
                descriptor = await self._reference_descriptor(face, image_url)
                if descriptor is not None:
                    descriptors.append(descriptor)
            if descriptors:
                labeled.append(LabeledFaceDescriptors(label=face.name, descriptors=descriptors))
            else:
                logger.info("No usable reference descriptors for %s", face.name)
        return labeled

    async def detect_faces(self, image_url: str, known_faces: List[KnownFace]) -> FaceDetectionResult:
        """
        Detect and label faces in one memory image.

        Returns:
            FaceDetectionResult; on failure ``detected_faces`` is empty and
            ``error`` carries the message
        """
        try:
            image = await self.image_fetcher.fetch(image_url)
            embeddings = await asyncio.to_thread(self._detect_all, image)
            if not embeddings:
                logger.info("No faces detected in %s", image_url)
                return FaceDetectionResult()

            labeled = await self.build_labeled_descriptors(known_faces)
            if not labeled:
                return FaceDetectionResult(detected_faces=[
                    DetectedFace(detection=embedding.detection, landmarks=embedding.landmarks)
                    for embedding in embeddings
                ])

            matcher = FaceMatcher(labeled, distance_threshold=self.distance_threshold)
            detected = []
            for embedding in embeddings:
                match = matcher.find_best_match(embedding.descriptor)
                detected.append(DetectedFace(
                    detection=embedding.detection,
                    landmarks=embedding.landmarks,
                    name=None if match.is_unknown else match.label,
                    confidence=match.confidence,
                    distance=match.distance,
                ))
            logger.info(
                "Detected %d faces in %s (%d recognized)",
                len(detected), image_url, sum(1 for face in detected if face.name),
            )
            return FaceDetectionResult(detected_faces=detected)
        except Exception as e:
            logger.error("Error detecting faces in %s: %s", image_url, e)
            return FaceDetectionResult(error=str(e))

    async def save_detected_faces(self, image_id: str, faces: List[DetectedFace]) -> bool:
        return await self.memory_repository.save_detected_faces(image_id, faces)
