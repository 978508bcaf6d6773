# Standard library imports
from typing import List

# External package imports
from fastapi import APIRouter, Depends, HTTPException, status

# Local application imports
from ...application.dto.memory_dto import MemoryDetailResponse, MemoryResponse, RecognitionResponse
from ...application.dto.user_dto import UserResponse
from ...application.use_cases.memory.list_memories import ListMemoriesUseCase
from ...application.use_cases.memory.get_memory import GetMemoryUseCase
from ...application.use_cases.memory.recognize_memory_faces import RecognizeMemoryFacesUseCase
from ...di.container import get_container
from .dependencies import get_current_user


router = APIRouter(tags=["memories"])


@router.get("", response_model=List[MemoryResponse])
async def list_memories(
    current_user: UserResponse = Depends(get_current_user),
) -> List[MemoryResponse]:
    """List captured memories, newest first"""
    container = get_container()
    list_use_case = container.get(ListMemoriesUseCase)

    try:
        return await list_use_case.execute()
    except RuntimeError as exception:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=str(exception)
        )


@router.get("/{memory_id}", response_model=MemoryDetailResponse)
async def get_memory(
    memory_id: str,
    current_user: UserResponse = Depends(get_current_user),
) -> MemoryDetailResponse:
    container = get_container()
    get_use_case = container.get(GetMemoryUseCase)

    try:
        return await get_use_case.execute(memory_id)
    except ValueError as exception:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(exception)
        )
    except RuntimeError as exception:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=str(exception)
        )


@router.post("/{memory_id}/recognize", response_model=RecognitionResponse)
async def recognize_memory_faces(
    memory_id: str,
    current_user: UserResponse = Depends(get_current_user),
) -> RecognitionResponse:
    """
    Run face recognition on a memory now and store the detected faces.

    Returns:
        RecognitionResponse with the labeled faces
    """
    container = get_container()
    recognize_use_case = container.get(RecognizeMemoryFacesUseCase)

    try:
        return await recognize_use_case.execute(memory_id)
    except ValueError as exception:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(exception)
        )
    except RuntimeError as exception:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=str(exception)
        )
