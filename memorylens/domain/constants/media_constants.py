"""
Shared constants for reference face uploads and memory rendering.

Used by API controllers, page routes and the face registration use case.
"""

# -----------------------------------------------------------------------------
# Reference faces (photos used for face recognition)
# -----------------------------------------------------------------------------
ALLOWED_IMAGE_EXTENSIONS = frozenset({".jpg", ".jpeg", ".png", ".webp"})
ALLOWED_IMAGE_MIME = frozenset({"image/jpeg", "image/png", "image/webp"})
REQUIRED_FACE_IMAGES = 3
MAX_FACE_IMAGE_BYTES = 10 * 1024 * 1024

# -----------------------------------------------------------------------------
# Memory cards
# -----------------------------------------------------------------------------
PLACEHOLDER_IMAGE_URL = "/static/placeholder.svg"
UNKNOWN_LOCATION = "Unknown Location"
