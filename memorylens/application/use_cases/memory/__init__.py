from .list_memories import ListMemoriesUseCase
from .get_memory import GetMemoryUseCase
from .recognize_memory_faces import RecognizeMemoryFacesUseCase

__all__ = ["ListMemoriesUseCase", "GetMemoryUseCase", "RecognizeMemoryFacesUseCase"]
