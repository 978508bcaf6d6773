# Standard library imports
from typing import Optional

# External package imports
from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

# Local application imports
from ...application.use_cases.auth.get_current_user import GetCurrentUserUseCase
from ...application.dto.user_dto import UserResponse
from ...core.config import get_settings
from ...di.container import get_container


# Cookie sessions are accepted too, so a missing header is not an error here
security_scheme = HTTPBearer(auto_error=False)


def get_session_token(request: Request) -> Optional[str]:
    return request.cookies.get(get_settings().session_cookie_name)


async def resolve_user(token: Optional[str]) -> UserResponse:
    """
    Resolve the user for a session token

    Raises:
        ValueError: If the token is missing or invalid
    """
    container = get_container()
    get_current_user_use_case = container.get(GetCurrentUserUseCase)
    return await get_current_user_use_case.execute(token or "")


async def get_current_user(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security_scheme),
) -> UserResponse:
    """
    FastAPI dependency for the signed-in user.

    Uses the bearer token when present, otherwise the session cookie.

    Raises:
        HTTPException: 401 if neither yields a valid session, 503 if users cannot be read
    """
    token = credentials.credentials if credentials else get_session_token(request)

    try:
        return await resolve_user(token)
    except ValueError as exception:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(exception),
            headers={"WWW-Authenticate": "Bearer"},
        )
    except RuntimeError as exception:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=str(exception)
        )
