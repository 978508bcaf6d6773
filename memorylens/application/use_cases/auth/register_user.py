# Standard library imports
import logging

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.models.user import User
from ....core.security import hash_password
from ....utils.datetime_utils import utc_now
from ...dto.auth_dto import UserRegistrationRequest
from ...dto.user_dto import UserResponse

logger = logging.getLogger(__name__)


class RegisterUserUseCase:
    """Use case for creating a dashboard account"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self, request: UserRegistrationRequest) -> UserResponse:
        """
        Register a new account

        Raises:
            ValueError: If the email is already registered
        """
        if await self.user_repository.find_by_email(request.email) is not None:
            raise ValueError("User with this email already exists")

        user = await self.user_repository.create(User(
            id=None,
            full_name=request.full_name,
            email=request.email,
            hashed_password=hash_password(request.password),
            created_at=utc_now().isoformat(),
        ))
        logger.info("Registered user %s", user.id)
        return UserResponse(id=user.id or "", full_name=user.full_name, email=user.email)
