# External package imports
from fastapi import APIRouter, Depends, HTTPException, status

# Local application imports
from ...application.dto.status_dto import (
    CaptureStatusChangeResponse,
    CaptureStatusResponse,
    CaptureStatusUpdateRequest,
)
from ...application.dto.user_dto import UserResponse
from ...application.use_cases.status.get_capture_status import GetCaptureStatusUseCase
from ...application.use_cases.status.set_capture_status import SetCaptureStatusUseCase
from ...application.use_cases.status.toggle_capture_status import ToggleCaptureStatusUseCase
from ...domain.models.capture_status import CaptureStatus
from ...di.container import get_container
from .dependencies import get_current_user


router = APIRouter(tags=["status"])


@router.get("", response_model=CaptureStatusResponse)
async def get_capture_status(
    current_user: UserResponse = Depends(get_current_user),
) -> CaptureStatusResponse:
    container = get_container()
    get_use_case = container.get(GetCaptureStatusUseCase)

    try:
        return await get_use_case.execute()
    except RuntimeError as exception:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=str(exception)
        )


@router.post("/toggle", response_model=CaptureStatusChangeResponse)
async def toggle_capture_status(
    current_user: UserResponse = Depends(get_current_user),
) -> CaptureStatusChangeResponse:
    """
    Start or stop capturing.

    Returns:
        New status with the notice to show ("MemoryLens started capturing
        memories" / "MemoryLens stopped capturing memories")
    """
    container = get_container()
    toggle_use_case = container.get(ToggleCaptureStatusUseCase)

    try:
        return await toggle_use_case.execute()
    except RuntimeError as exception:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=str(exception)
        )


@router.put("", response_model=CaptureStatusChangeResponse)
async def set_capture_status(
    request: CaptureStatusUpdateRequest,
    current_user: UserResponse = Depends(get_current_user),
) -> CaptureStatusChangeResponse:
    container = get_container()
    set_use_case = container.get(SetCaptureStatusUseCase)

    try:
        return await set_use_case.execute(CaptureStatus(request.status))
    except RuntimeError as exception:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=str(exception)
        )
