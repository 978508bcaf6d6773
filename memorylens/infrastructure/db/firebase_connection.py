"""
Firebase Realtime Database connection
=====================================

Initializes the Firebase Admin SDK once (service-account key + database URL)
and hands out ``firebase_admin.db`` references for the top-level nodes the
application uses (status, images, faces, users).
"""

# Standard library imports
import logging
from pathlib import Path
from typing import Any, Optional

# External package imports
import firebase_admin
from firebase_admin import credentials, db

# Local application imports
from ...core.config import get_settings
from ...domain.constants import FACES_PATH, IMAGES_PATH, STATUS_PATH, USERS_PATH

logger = logging.getLogger(__name__)

# Global Firebase app instance (initialized once)
_firebase_app: Optional[Any] = None


def initialize_firebase() -> Optional[Any]:
    """
    Initialize Firebase Admin SDK using the service account key.

    This function is called once and caches the Firebase app instance.

    Returns:
        Firebase app instance if successful, None otherwise
    """
    global _firebase_app

    if _firebase_app is not None:
        return _firebase_app

    # Reuse an app initialized elsewhere in the process
    try:
        _firebase_app = firebase_admin.get_app()
        logger.info("Firebase Admin SDK already initialized")
        return _firebase_app
    except ValueError:
        pass

    settings = get_settings()
    key_path = Path(settings.firebase_credentials_path)
    if not key_path.exists():
        logger.warning("Firebase key file not found: %s", key_path)
        return None
    if not settings.firebase_database_url:
        logger.warning("FIREBASE_DATABASE_URL not set; realtime database unavailable")
        return None

    try:
        cred = credentials.Certificate(str(key_path))
        _firebase_app = firebase_admin.initialize_app(
            cred, {"databaseURL": settings.firebase_database_url}
        )
    except (ValueError, OSError) as e:
        logger.error("Failed to initialize Firebase: %s", e)
        return None

    logger.info("Firebase Admin SDK initialized for %s", settings.firebase_database_url)
    return _firebase_app


def is_firebase_ready() -> bool:
    return _firebase_app is not None


def get_reference(path: str) -> "db.Reference":
    """
    Get a realtime database reference.

    Raises:
        RuntimeError: If Firebase could not be initialized
    """
    app = initialize_firebase()
    if app is None:
        raise RuntimeError("Realtime database is not configured")
    return db.reference(path, app=app)


def get_root_reference() -> "db.Reference":
    return get_reference("/")


def get_status_reference() -> "db.Reference":
    return get_reference(STATUS_PATH)


def get_images_reference() -> "db.Reference":
    return get_reference(IMAGES_PATH)


def get_faces_reference() -> "db.Reference":
    return get_reference(FACES_PATH)


def get_users_reference() -> "db.Reference":
    return get_reference(USERS_PATH)
