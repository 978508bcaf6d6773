"""
Unit tests for the DeepFace detector chain and descriptor helpers.
"""
from unittest.mock import MagicMock, patch

import numpy as np
import pytest
from memorylens.infrastructure.recognition import face_embedding
from memorylens.infrastructure.recognition.face_embedding import (
    detect_all_faces,
    detect_single_face,
    load_models,
    normalize_descriptor,
    represent_faces,
)


def _obj(confidence, x=0, y=0, w=40, h=40, embedding=(3.0, 4.0)):
    return {
        "embedding": list(embedding),
        "facial_area": {"x": x, "y": y, "w": w, "h": h, "left_eye": (10, 12), "right_eye": (30, 12)},
        "face_confidence": confidence,
    }


class FakeDeepFace:
    """Answers represent() per detector backend and records the call order."""

    def __init__(self, results):
        self.results = results
        self.backends = []

    def represent(self, img_path, model_name, detector_backend, enforce_detection):
        assert enforce_detection is False
        self.backends.append(detector_backend)
        result = self.results[detector_backend]
        if isinstance(result, Exception):
            raise result
        return result


@pytest.fixture
def fake_deepface():
    def _install(results):
        fake = FakeDeepFace(results)
        patcher = patch.object(face_embedding, "_get_deepface", return_value=fake)
        patcher.start()
        return fake

    yield _install
    patch.stopall()


class TestDetectorChain:
    def test_ssd_result_used_when_confident(self, fake_deepface):
        fake = fake_deepface({"ssd": [_obj(0.9)], "opencv": [_obj(0.8)]})
        faces = detect_all_faces("image")
        assert fake.backends == ["ssd"]
        assert len(faces) == 1
        assert faces[0].detection.score == 0.9

    def test_falls_back_to_opencv_below_ssd_confidence(self, fake_deepface):
        fake = fake_deepface({"ssd": [_obj(0.3)], "opencv": [_obj(0.45)]})
        faces = detect_all_faces("image")
        assert fake.backends == ["ssd", "opencv"]
        assert [face.detection.score for face in faces] == [0.45]

    def test_falls_back_to_opencv_when_ssd_raises(self, fake_deepface):
        fake = fake_deepface({"ssd": ValueError("detector unavailable"), "opencv": [_obj(0.6)]})
        faces = detect_all_faces("image")
        assert fake.backends == ["ssd", "opencv"]
        assert len(faces) == 1

    def test_opencv_threshold_applies(self, fake_deepface):
        fake_deepface({"ssd": [], "opencv": [_obj(0.39)]})
        assert detect_all_faces("image") == []

    def test_whole_image_pseudo_face_is_dropped(self, fake_deepface):
        # enforce_detection=False returns the full frame with zero confidence
        fake_deepface({"ssd": [_obj(0, w=640, h=480)], "opencv": [_obj(0, w=640, h=480)]})
        assert detect_all_faces("image") == []

    def test_empty_box_is_dropped(self, fake_deepface):
        fake_deepface({"ssd": [_obj(0.9, w=0, h=0)], "opencv": []})
        assert detect_all_faces("image") == []


class TestRepresentFaces:
    def test_descriptor_is_normalized_and_landmarks_kept(self, fake_deepface):
        fake_deepface({"ssd": [_obj(0.9, x=5, y=6)]})
        face = represent_faces("image", "ssd", 0.5)[0]
        assert np.allclose(face.descriptor, [0.6, 0.8])
        assert face.detection.box.x == 5.0
        assert face.detection.box.y == 6.0
        assert len(face.landmarks) == 2

    def test_missing_deepface_raises(self):
        with patch.object(face_embedding, "_get_deepface", return_value=None):
            with pytest.raises(RuntimeError, match="DeepFace not available"):
                represent_faces("image", "ssd", 0.5)


class TestDetectSingleFace:
    def test_picks_most_confident(self, fake_deepface):
        fake_deepface({"ssd": [_obj(0.7, x=1), _obj(0.95, x=2), _obj(0.8, x=3)]})
        face = detect_single_face("image")
        assert face.detection.box.x == 2.0

    def test_none_when_no_face(self, fake_deepface):
        fake_deepface({"ssd": [], "opencv": []})
        assert detect_single_face("image") is None


class TestLoadModels:
    @pytest.fixture(autouse=True)
    def reset_loaded(self, monkeypatch):
        monkeypatch.setattr(face_embedding, "_models_loaded", False)

    def test_builds_model_once(self):
        deepface = MagicMock()
        with patch.object(face_embedding, "_get_deepface", return_value=deepface):
            assert load_models() is True
            assert load_models() is True
        deepface.build_model.assert_called_once_with("Facenet")
        assert face_embedding.models_loaded() is True

    def test_build_failure_is_logged_not_raised(self, caplog):
        deepface = MagicMock()
        deepface.build_model.side_effect = OSError("weights download failed")
        with patch.object(face_embedding, "_get_deepface", return_value=deepface):
            assert load_models() is False
        assert face_embedding.models_loaded() is False
        assert "weights download failed" in caplog.text

    def test_missing_deepface_returns_false(self):
        with patch.object(face_embedding, "_get_deepface", return_value=None):
            assert load_models() is False


def test_normalize_zero_vector():
    assert np.array_equal(normalize_descriptor([0.0, 0.0]), np.array([0.0, 0.0]))
