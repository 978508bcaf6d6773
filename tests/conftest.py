"""
Shared pytest fixtures for MemoryLens tests.
"""
import os
from unittest.mock import MagicMock, patch

import pytest

# The app is created at import time; keep its lifespan away from model
# downloads and any real service account.
os.environ.setdefault("RECOGNITION_ENABLED", "false")
os.environ.setdefault("FIREBASE_CREDENTIALS_PATH", "tests/does-not-exist.json")
os.environ.setdefault("JWT_SECRET_KEY", "test_secret_key_for_testing_only")


@pytest.fixture
def mock_env():
    """Fixture to set common test environment variables."""
    env_vars = {
        "FIREBASE_DATABASE_URL": "https://memorylens-test.firebaseio.com",
        "IMAGEKIT_PUBLIC_KEY": "public_test_key",
        "IMAGEKIT_PRIVATE_KEY": "private_test_key",
        "JWT_SECRET_KEY": "test_secret_key_for_testing_only",
        "LOCAL_TIMEZONE": "UTC",
    }
    with patch.dict(os.environ, env_vars, clear=False):
        yield env_vars


@pytest.fixture
def mock_settings():
    """Fixture to mock get_settings for tests. Patches all modules that use it."""
    mock = MagicMock()
    mock.jwt_secret_key = "test_jwt_secret"
    mock.jwt_algorithm = "HS256"
    mock.access_token_expire_minutes = 1440
    mock.session_cookie_name = "memorylens_session"
    mock.imagekit_public_key = "public_test_key"
    mock.imagekit_private_key = "private_test_key"
    mock.imagekit_upload_url = "https://upload.imagekit.io/api/v1/files/upload"
    mock.imagekit_token_ttl_seconds = 1800
    mock.imagekit_faces_folder = "/faces"
    mock.face_match_threshold = 0.55
    mock.image_fetch_timeout_seconds = 15.0
    mock.recognition_max_attempts = 3
    mock.local_timezone = "UTC"

    # Patch at source and at use sites (modules import get_settings at load time)
    with patch("memorylens.core.config.get_settings", return_value=mock), patch(
        "memorylens.core.security.get_settings", return_value=mock
    ), patch("memorylens.utils.datetime_utils.get_settings", return_value=mock), patch(
        "memorylens.infrastructure.external.imagekit_client.get_settings", return_value=mock
    ), patch(
        "memorylens.infrastructure.external.image_fetcher.get_settings", return_value=mock
    ), patch(
        "memorylens.application.use_cases.face.register_face.get_settings", return_value=mock
    ), patch(
        "memorylens.application.use_cases.auth.login_user.get_settings", return_value=mock
    ):
        yield mock
