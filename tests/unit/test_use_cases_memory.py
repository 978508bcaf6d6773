"""
Unit tests for memory use cases and the card mapper.
"""
from unittest.mock import AsyncMock, MagicMock

import pytest
from memorylens.domain.models.known_face import KnownFace
from memorylens.domain.models.memory import (
    DetailedLocation,
    DetectedFace,
    FaceBox,
    FaceDetection,
    Location,
    MemoryImage,
)
from memorylens.application.services.face_recognition_service import FaceDetectionResult
from memorylens.application.use_cases.memory.memory_mapper import memory_to_response, sort_newest_first
from memorylens.application.use_cases.memory.list_memories import ListMemoriesUseCase
from memorylens.application.use_cases.memory.get_memory import GetMemoryUseCase
from memorylens.application.use_cases.memory.recognize_memory_faces import RecognizeMemoryFacesUseCase


def _face(name=None, confidence=None):
    return DetectedFace(
        detection=FaceDetection(box=FaceBox(x=10, y=20, width=30, height=40), score=0.98),
        name=name,
        confidence=confidence,
    )


@pytest.fixture
def mock_memory_repo():
    return AsyncMock()


class TestSortNewestFirst:
    def test_orders_by_timestamp_descending(self):
        memories = [
            MemoryImage(id="a", timestamp="2025-04-27_10-00-00"),
            MemoryImage(id="b", timestamp="2025-04-28_00-20-50"),
            MemoryImage(id="c", timestamp="2025-04-27_23-59-59"),
        ]
        assert [m.id for m in sort_newest_first(memories)] == ["b", "c", "a"]

    def test_missing_timestamps_go_last(self):
        memories = [
            MemoryImage(id="no-ts-1"),
            MemoryImage(id="old", timestamp="2024-01-01_00-00-00"),
            MemoryImage(id="no-ts-2"),
            MemoryImage(id="new", timestamp="2025-01-01_00-00-00"),
        ]
        assert [m.id for m in sort_newest_first(memories)] == ["new", "old", "no-ts-1", "no-ts-2"]


class TestMemoryToResponse:
    def test_detailed_city_preferred(self):
        memory = MemoryImage(
            id="m1",
            img_url="https://ik.imagekit.io/demo/m1.jpg",
            timestamp="2025-04-28_00-20-50",
            location=Location(
                city="Pune",
                country="India",
                detailed=DetailedLocation(city="Mumbai", state="Maharashtra", display_name="Marine Drive"),
            ),
        )
        card = memory_to_response(memory)
        assert card.city == "Mumbai"
        assert card.state == "Maharashtra"
        assert card.address == "Marine Drive"
        assert card.formatted_date == "04/28/2025"
        assert card.formatted_time == "00:20:50"
        assert card.image_url == memory.img_url

    def test_falls_back_to_plain_city(self):
        card = memory_to_response(MemoryImage(id="m1", location=Location(city="Pune")))
        assert card.city == "Pune"
        assert card.state == ""

    def test_unknown_location_and_placeholder(self):
        card = memory_to_response(MemoryImage(id="m1"))
        assert card.city == "Unknown Location"
        assert card.image_url == "/static/placeholder.svg"
        assert card.formatted_date == ""
        assert card.location is None
        assert card.detected_faces is None

    def test_detected_faces_are_mapped(self):
        card = memory_to_response(MemoryImage(id="m1", detected_faces=[_face("Alice", 0.71)]))
        assert card.detected_faces[0].name == "Alice"
        assert card.detected_faces[0].box.width == 30


class TestListMemoriesUseCase:
    @pytest.mark.asyncio
    async def test_returns_sorted_cards(self, mock_memory_repo):
        mock_memory_repo.list_all.return_value = [
            MemoryImage(id="old", timestamp="2025-04-27_10-00-00"),
            MemoryImage(id="new", timestamp="2025-04-28_10-00-00"),
        ]
        result = await ListMemoriesUseCase(mock_memory_repo).execute()
        assert [card.id for card in result] == ["new", "old"]

    @pytest.mark.asyncio
    async def test_empty(self, mock_memory_repo):
        mock_memory_repo.list_all.return_value = []
        assert await ListMemoriesUseCase(mock_memory_repo).execute() == []


class TestGetMemoryUseCase:
    @pytest.mark.asyncio
    async def test_details_message(self, mock_memory_repo):
        mock_memory_repo.find_by_id.return_value = MemoryImage(id="m1", timestamp="2025-04-28_00-20-50")
        result = await GetMemoryUseCase(mock_memory_repo).execute("m1")
        assert result.message == "Viewing memory from 04/28/2025"
        assert result.memory.id == "m1"

    @pytest.mark.asyncio
    async def test_details_message_without_timestamp(self, mock_memory_repo):
        mock_memory_repo.find_by_id.return_value = MemoryImage(id="m2", img_url="https://cdn/m2.jpg")
        result = await GetMemoryUseCase(mock_memory_repo).execute("m2")
        assert result.message == "Viewing memory"

    @pytest.mark.asyncio
    async def test_not_found(self, mock_memory_repo):
        mock_memory_repo.find_by_id.return_value = None
        with pytest.raises(ValueError, match="Memory not found"):
            await GetMemoryUseCase(mock_memory_repo).execute("missing")


class TestRecognizeMemoryFacesUseCase:
    @pytest.fixture
    def face_repo(self):
        repo = AsyncMock()
        repo.list_all.return_value = [KnownFace(id="f1", name="Alice", image_urls=["https://cdn/a.jpg"])]
        return repo

    @pytest.fixture
    def service(self):
        service = MagicMock()
        service.detect_faces = AsyncMock()
        service.save_detected_faces = AsyncMock(return_value=True)
        return service

    @pytest.mark.asyncio
    async def test_success(self, mock_memory_repo, face_repo, service):
        mock_memory_repo.find_by_id.return_value = MemoryImage(id="m1", img_url="https://cdn/m1.jpg")
        faces = [_face("Alice", 0.8), _face()]
        service.detect_faces.return_value = FaceDetectionResult(detected_faces=faces)

        result = await RecognizeMemoryFacesUseCase(mock_memory_repo, face_repo, service).execute("m1")

        service.detect_faces.assert_awaited_once_with("https://cdn/m1.jpg", face_repo.list_all.return_value)
        service.save_detected_faces.assert_awaited_once_with("m1", faces)
        assert result.saved is True
        assert [face.name for face in result.detected_faces] == ["Alice", None]

    @pytest.mark.asyncio
    async def test_memory_not_found(self, mock_memory_repo, face_repo, service):
        mock_memory_repo.find_by_id.return_value = None
        with pytest.raises(ValueError, match="Memory not found"):
            await RecognizeMemoryFacesUseCase(mock_memory_repo, face_repo, service).execute("m1")
        service.detect_faces.assert_not_called()

    @pytest.mark.asyncio
    async def test_memory_without_image(self, mock_memory_repo, face_repo, service):
        mock_memory_repo.find_by_id.return_value = MemoryImage(id="m1")
        with pytest.raises(ValueError, match="Invalid image URL"):
            await RecognizeMemoryFacesUseCase(mock_memory_repo, face_repo, service).execute("m1")

    @pytest.mark.asyncio
    async def test_detection_error(self, mock_memory_repo, face_repo, service):
        mock_memory_repo.find_by_id.return_value = MemoryImage(id="m1", img_url="https://cdn/m1.jpg")
        service.detect_faces.return_value = FaceDetectionResult(error="Image has invalid dimensions")
        with pytest.raises(RuntimeError, match="Face detection failed: Image has invalid dimensions"):
            await RecognizeMemoryFacesUseCase(mock_memory_repo, face_repo, service).execute("m1")
        service.save_detected_faces.assert_not_called()

    @pytest.mark.asyncio
    async def test_save_failure(self, mock_memory_repo, face_repo, service):
        mock_memory_repo.find_by_id.return_value = MemoryImage(id="m1", img_url="https://cdn/m1.jpg")
        service.detect_faces.return_value = FaceDetectionResult(detected_faces=[_face()])
        service.save_detected_faces.return_value = False
        with pytest.raises(RuntimeError, match="Failed to save detected faces"):
            await RecognizeMemoryFacesUseCase(mock_memory_repo, face_repo, service).execute("m1")
