from abc import ABC, abstractmethod
from typing import List, Optional
from ..models.known_face import KnownFace


class FaceRepository(ABC):
    """Repository interface for registered reference faces"""

    @abstractmethod
    async def list_all(self) -> List[KnownFace]:
        pass

    @abstractmethod
    async def find_by_id(self, face_id: str) -> Optional[KnownFace]:
        pass

    @abstractmethod
    async def create(self, face: KnownFace) -> KnownFace:
        """Store a new face and return it with its generated ID"""
        pass

    @abstractmethod
    async def delete(self, face_id: str) -> None:
        pass
