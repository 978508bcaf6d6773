"""
Unit tests for FaceRecognitionService with stubbed detectors.
"""
from unittest.mock import AsyncMock, MagicMock

import numpy as np
import pytest
from memorylens.domain.models.known_face import KnownFace
from memorylens.domain.models.memory import FaceBox, FaceDetection
from memorylens.infrastructure.external.image_fetcher import ImageFetchError
from memorylens.infrastructure.recognition.face_embedding import FaceEmbedding
from memorylens.application.services.face_recognition_service import FaceRecognitionService


def _embedding(*descriptor, x=0.0):
    return FaceEmbedding(
        detection=FaceDetection(box=FaceBox(x=x, y=0, width=50, height=50), score=0.9),
        descriptor=np.array(descriptor, dtype=np.float64),
    )


@pytest.fixture
def image_fetcher():
    fetcher = MagicMock()
    fetcher.fetch = AsyncMock(side_effect=lambda url: url)
    return fetcher


@pytest.fixture
def memory_repo():
    return AsyncMock()


def _service(image_fetcher, memory_repo, faces_in_memory, references):
    """references maps reference URL -> embedding (or None for no face)."""
    detect_single = MagicMock(side_effect=lambda image: references[image])
    service = FaceRecognitionService(
        image_fetcher,
        memory_repo,
        distance_threshold=0.55,
        detect_all=lambda image: faces_in_memory,
        detect_single=detect_single,
        model_loader=lambda: True,
    )
    return service, detect_single


class TestDetectFaces:
    @pytest.mark.asyncio
    async def test_labels_known_and_unknown_faces(self, image_fetcher, memory_repo):
        known = [KnownFace(id="f1", name="Alice", image_urls=["ref-a1", "ref-a2"])]
        service, _ = _service(
            image_fetcher,
            memory_repo,
            faces_in_memory=[_embedding(0.0, 0.1, x=1), _embedding(1.0, 1.0, x=2)],
            references={"ref-a1": _embedding(0.0, 0.0), "ref-a2": _embedding(0.0, 0.2)},
        )

        result = await service.detect_faces("memory.jpg", known)

        assert result.error is None
        alice, stranger = result.detected_faces
        assert alice.name == "Alice"
        assert alice.confidence == 0.9
        assert alice.detection.box.x == 1
        assert stranger.name is None
        assert stranger.confidence is None
        assert stranger.distance > 0.55

    @pytest.mark.asyncio
    async def test_no_known_faces_leaves_names_empty(self, image_fetcher, memory_repo):
        service, detect_single = _service(
            image_fetcher, memory_repo, faces_in_memory=[_embedding(0.0, 0.0)], references={},
        )
        result = await service.detect_faces("memory.jpg", [])
        assert len(result.detected_faces) == 1
        assert result.detected_faces[0].name is None
        detect_single.assert_not_called()

    @pytest.mark.asyncio
    async def test_no_faces_in_image(self, image_fetcher, memory_repo):
        service, _ = _service(image_fetcher, memory_repo, faces_in_memory=[], references={})
        result = await service.detect_faces("memory.jpg", [KnownFace(id="f1", name="Alice", image_urls=["r"])])
        assert result.detected_faces == []
        assert result.error is None

    @pytest.mark.asyncio
    async def test_reference_without_face_is_skipped(self, image_fetcher, memory_repo):
        known = [
            KnownFace(id="f1", name="Alice", image_urls=["blurry"]),
            KnownFace(id="f2", name="Bob", image_urls=["ref-b"]),
        ]
        service, _ = _service(
            image_fetcher,
            memory_repo,
            faces_in_memory=[_embedding(1.0, 1.0)],
            references={"blurry": None, "ref-b": _embedding(1.0, 1.1)},
        )
        result = await service.detect_faces("memory.jpg", known)
        assert result.detected_faces[0].name == "Bob"

    @pytest.mark.asyncio
    async def test_fetch_failure_is_reported(self, image_fetcher, memory_repo):
        image_fetcher.fetch.side_effect = ImageFetchError("Image has invalid dimensions")
        service, _ = _service(image_fetcher, memory_repo, faces_in_memory=[], references={})
        result = await service.detect_faces("memory.jpg", [])
        assert result.detected_faces == []
        assert result.error == "Image has invalid dimensions"


class TestReferenceCache:
    @pytest.mark.asyncio
    async def test_reference_descriptors_computed_once(self, image_fetcher, memory_repo):
        known = [KnownFace(id="f1", name="Alice", image_urls=["ref-a"])]
        service, detect_single = _service(
            image_fetcher,
            memory_repo,
            faces_in_memory=[_embedding(0.0, 0.0)],
            references={"ref-a": _embedding(0.0, 0.0)},
        )

        await service.detect_faces("memory-1.jpg", known)
        await service.detect_faces("memory-2.jpg", known)
        assert detect_single.call_count == 1

        service.clear_cache()
        await service.detect_faces("memory-3.jpg", known)
        assert detect_single.call_count == 2


@pytest.mark.asyncio
async def test_save_delegates_to_repository(image_fetcher, memory_repo):
    memory_repo.save_detected_faces.return_value = True
    service, _ = _service(image_fetcher, memory_repo, faces_in_memory=[], references={})
    assert await service.save_detected_faces("m1", []) is True
    memory_repo.save_detected_faces.assert_awaited_once_with("m1", [])


@pytest.mark.asyncio
async def test_load_models_runs_loader(image_fetcher, memory_repo):
    service, _ = _service(image_fetcher, memory_repo, faces_in_memory=[], references={})
    assert await service.load_models() is True
