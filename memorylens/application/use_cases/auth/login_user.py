# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.constants import UserFields
from ....core.config import get_settings
from ....core.security import verify_password, create_jwt_token
from ...dto.auth_dto import UserLoginRequest, TokenResponse


class LoginUserUseCase:
    """Use case for signing in and issuing a session token"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self, request: UserLoginRequest) -> TokenResponse:
        """
        Check credentials and issue a JWT

        Raises:
            ValueError: If the email is unknown or the password is wrong
        """
        user = await self.user_repository.find_by_email(request.email)
        # Same message for both cases so accounts cannot be enumerated
        if user is None or not verify_password(request.password, user.hashed_password):
            raise ValueError("Invalid email or password")

        token = create_jwt_token({
            "sub": user.id or "",
            UserFields.EMAIL: user.email,
        })
        return TokenResponse(
            access_token=token,
            expires_in=get_settings().access_token_expire_minutes * 60,
        )
