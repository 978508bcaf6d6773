from abc import ABC, abstractmethod
from typing import List, Optional
from ..models.memory import DetectedFace, MemoryImage


class MemoryRepository(ABC):
    """Repository interface for images written by the capture device"""

    @abstractmethod
    async def list_all(self) -> List[MemoryImage]:
        """Return every stored memory, in storage order"""
        pass

    @abstractmethod
    async def find_by_id(self, memory_id: str) -> Optional[MemoryImage]:
        """Find a memory by its database key"""
        pass

    @abstractmethod
    async def save_detected_faces(self, memory_id: str, faces: List[DetectedFace]) -> bool:
        """Persist recognition results for a memory. Returns False on failure."""
        pass
