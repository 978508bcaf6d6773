# Standard library imports
from typing import List

# Local application imports
from ....domain.repositories.memory_repository import MemoryRepository
from ...dto.memory_dto import MemoryResponse
from .memory_mapper import memory_to_response, sort_newest_first


class ListMemoriesUseCase:
    """Use case for listing captured memories, newest first"""

    def __init__(self, memory_repository: MemoryRepository) -> None:
        self.memory_repository = memory_repository

    async def execute(self) -> List[MemoryResponse]:
        memories = await self.memory_repository.list_all()
        return [memory_to_response(memory) for memory in sort_newest_first(memories)]
