from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class KnownFace:
    """
    Reference face registered by an administrator.

    A person is identified by a display name and the CDN URLs of the
    photos uploaded for them.
    """
    id: Optional[str]
    name: str
    image_urls: List[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        """Business validations"""
        if not self.name or not self.name.strip():
            raise ValueError("Face name is required")
