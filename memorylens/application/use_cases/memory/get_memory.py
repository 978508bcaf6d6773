# Local application imports
from ....domain.repositories.memory_repository import MemoryRepository
from ...dto.memory_dto import MemoryDetailResponse
from .memory_mapper import memory_to_response


class GetMemoryUseCase:
    """Use case for viewing a single memory"""

    def __init__(self, memory_repository: MemoryRepository) -> None:
        self.memory_repository = memory_repository

    async def execute(self, memory_id: str) -> MemoryDetailResponse:
        """
        Get a memory with its details message

        Args:
            memory_id: Database key of the memory

        Returns:
            MemoryDetailResponse

        Raises:
            ValueError: If the memory does not exist
        """
        memory = await self.memory_repository.find_by_id(memory_id)
        if memory is None:
            raise ValueError("Memory not found")

        response = memory_to_response(memory)
        message = "Viewing memory"
        if response.formatted_date:
            message = f"{message} from {response.formatted_date}"
        return MemoryDetailResponse(memory=response, message=message)
