# Standard library imports
import os
from typing import Final, List, Optional


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


class Settings:
    """
    Application settings loaded from environment variables.

    This class centralizes all configuration settings for the application.
    All settings are loaded from environment variables with sensible defaults.
    """

    def __init__(self) -> None:
        # Realtime Database (Firebase) Configuration
        self.firebase_credentials_path: Final[str] = os.getenv(
            "FIREBASE_CREDENTIALS_PATH", "firebase_key.json"
        )
        self.firebase_database_url: Final[str] = os.getenv("FIREBASE_DATABASE_URL", "")

        # ImageKit (image CDN / upload) Configuration
        self.imagekit_public_key: Final[str] = os.getenv("IMAGEKIT_PUBLIC_KEY", "")
        self.imagekit_private_key: Final[str] = os.getenv("IMAGEKIT_PRIVATE_KEY", "")
        self.imagekit_url_endpoint: Final[str] = os.getenv(
            "IMAGEKIT_URL_ENDPOINT", "https://ik.imagekit.io/yourendpoint"
        )
        self.imagekit_upload_url: Final[str] = os.getenv(
            "IMAGEKIT_UPLOAD_URL", "https://upload.imagekit.io/api/v1/files/upload"
        )
        self.imagekit_token_ttl_seconds: Final[int] = int(
            os.getenv("IMAGEKIT_TOKEN_TTL_SECONDS", "1800")
        )
        self.imagekit_faces_folder: Final[str] = os.getenv("IMAGEKIT_FACES_FOLDER", "/faces")

        # JWT / Session Configuration
        self.jwt_secret_key: Final[str] = os.getenv("JWT_SECRET_KEY", "change_this_secret_in_production")
        self.jwt_algorithm: Final[str] = os.getenv("JWT_ALGORITHM", "HS256")
        self.access_token_expire_minutes: Final[int] = int(
            os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", "1440")
        )
        self.session_cookie_name: Final[str] = os.getenv("SESSION_COOKIE_NAME", "memorylens_session")

        # Face Recognition Configuration
        self.face_match_threshold: Final[float] = float(os.getenv("FACE_MATCH_THRESHOLD", "0.55"))
        self.image_fetch_timeout_seconds: Final[float] = float(
            os.getenv("IMAGE_FETCH_TIMEOUT_SECONDS", "15")
        )
        self.recognition_enabled: Final[bool] = _env_bool("RECOGNITION_ENABLED", "true")
        self.recognition_max_attempts: Final[int] = int(os.getenv("RECOGNITION_MAX_ATTEMPTS", "3"))

        # Web / Misc
        self.local_timezone: Final[str] = os.getenv("LOCAL_TIMEZONE", "UTC")
        self.cors_allow_origins: Final[List[str]] = [
            origin.strip()
            for origin in os.getenv("CORS_ALLOW_ORIGINS", "http://localhost:3000").split(",")
            if origin.strip()
        ]
        self.log_level: Final[str] = os.getenv("LOG_LEVEL", "INFO").upper()


# Global settings instance (singleton pattern)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get application settings (singleton pattern)

    Returns:
        Settings instance with all configuration values
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings

