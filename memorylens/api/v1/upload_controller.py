# Standard library imports
import logging

# External package imports
from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

# Local application imports
from ...application.dto.upload_dto import UploadAuthResponse
from ...application.dto.user_dto import UserResponse
from ...application.use_cases.upload.get_upload_auth import GetUploadAuthUseCase
from ...infrastructure.external.imagekit_client import ImageKitConfigurationError
from ...di.container import get_container
from .dependencies import get_current_user

logger = logging.getLogger(__name__)

router = APIRouter(tags=["upload"])


@router.get("/imagekit-auth", response_model=UploadAuthResponse)
async def get_imagekit_auth(current_user: UserResponse = Depends(get_current_user)):
    """
    Signed parameters for a direct browser upload to ImageKit.

    Errors are returned as ``{"error": ...}`` with status 500.
    """
    container = get_container()
    upload_auth_use_case = container.get(GetUploadAuthUseCase)

    try:
        return await upload_auth_use_case.execute()
    except ImageKitConfigurationError as exception:
        logger.error("Error generating ImageKit auth parameters: %s", exception)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "ImageKit private key is not configured"},
        )
    except Exception as exception:
        logger.error("Error generating ImageKit auth parameters: %s", exception, exc_info=True)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Failed to generate authentication parameters"},
        )
