# Standard library imports
from typing import Optional

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....core.security import decode_jwt_token
from ...dto.user_dto import UserResponse


class GetCurrentUserUseCase:
    """Use case for resolving the user behind a session token"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self, token: str) -> UserResponse:
        """
        Resolve a session token (bearer header or cookie)

        Raises:
            ValueError: If the token is missing, invalid, expired or the user is gone
        """
        if not token:
            raise ValueError("Not authenticated")

        payload = decode_jwt_token(token)
        user_id: Optional[str] = payload.get("sub")
        if not user_id:
            raise ValueError("Invalid authentication payload: missing user ID")

        user = await self.user_repository.find_by_id(user_id)
        if user is None:
            raise ValueError("User not found")

        return UserResponse(id=user.id or "", full_name=user.full_name, email=user.email)
