"""
Unit tests for auth use cases (Login, Register, GetCurrentUser).
"""
from unittest.mock import AsyncMock

import pytest
from memorylens.core.security import hash_password, create_jwt_token
from memorylens.application.use_cases.auth.login_user import LoginUserUseCase
from memorylens.application.use_cases.auth.register_user import RegisterUserUseCase
from memorylens.application.use_cases.auth.get_current_user import GetCurrentUserUseCase
from memorylens.application.dto.auth_dto import UserLoginRequest, UserRegistrationRequest, TokenResponse
from memorylens.domain.models.user import User


@pytest.fixture
def mock_user_repo():
    """Mock UserRepository with async methods."""
    return AsyncMock()


@pytest.fixture
def stored_user():
    return User(
        id="usr-123",
        full_name="Test User",
        email="test@example.com",
        hashed_password=hash_password("validpass123"),
    )


class TestLoginUserUseCase:
    """Tests for LoginUserUseCase"""

    @pytest.mark.asyncio
    async def test_login_success(self, mock_user_repo, mock_settings, stored_user):
        mock_user_repo.find_by_email.return_value = stored_user

        result = await LoginUserUseCase(mock_user_repo).execute(
            UserLoginRequest(email="test@example.com", password="validpass123")
        )
        assert isinstance(result, TokenResponse)
        assert result.token_type == "bearer"
        assert len(result.access_token) > 0
        assert result.expires_in == 1440 * 60

    @pytest.mark.asyncio
    async def test_login_user_not_found(self, mock_user_repo):
        mock_user_repo.find_by_email.return_value = None
        with pytest.raises(ValueError, match="Invalid email or password"):
            await LoginUserUseCase(mock_user_repo).execute(
                UserLoginRequest(email="unknown@example.com", password="anypass123")
            )

    @pytest.mark.asyncio
    async def test_login_wrong_password(self, mock_user_repo, stored_user):
        mock_user_repo.find_by_email.return_value = stored_user
        with pytest.raises(ValueError, match="Invalid email or password"):
            await LoginUserUseCase(mock_user_repo).execute(
                UserLoginRequest(email="test@example.com", password="wrongpassword")
            )


class TestRegisterUserUseCase:
    """Tests for RegisterUserUseCase"""

    @pytest.mark.asyncio
    async def test_register_success(self, mock_user_repo):
        mock_user_repo.find_by_email.return_value = None
        mock_user_repo.create.side_effect = lambda user: User(
            id="usr-new",
            full_name=user.full_name,
            email=user.email,
            hashed_password=user.hashed_password,
        )

        result = await RegisterUserUseCase(mock_user_repo).execute(
            UserRegistrationRequest(full_name=" New User ", email="New@Example.com", password="password123")
        )
        assert result.id == "usr-new"
        assert result.full_name == "New User"
        assert result.email == "new@example.com"
        saved = mock_user_repo.create.call_args[0][0]
        assert saved.hashed_password != "password123"
        assert saved.created_at is not None

    @pytest.mark.asyncio
    async def test_register_duplicate_email(self, mock_user_repo, stored_user):
        mock_user_repo.find_by_email.return_value = stored_user
        with pytest.raises(ValueError, match="already exists"):
            await RegisterUserUseCase(mock_user_repo).execute(
                UserRegistrationRequest(full_name="Test", email="test@example.com", password="password123")
            )
        mock_user_repo.create.assert_not_called()


class TestGetCurrentUserUseCase:
    """Tests for GetCurrentUserUseCase"""

    @pytest.mark.asyncio
    async def test_valid_token(self, mock_user_repo, mock_settings, stored_user):
        mock_user_repo.find_by_id.return_value = stored_user
        token = create_jwt_token({"sub": "usr-123"})

        result = await GetCurrentUserUseCase(mock_user_repo).execute(token)
        assert result.id == "usr-123"
        mock_user_repo.find_by_id.assert_awaited_once_with("usr-123")

    @pytest.mark.asyncio
    async def test_missing_token(self, mock_user_repo):
        with pytest.raises(ValueError, match="Not authenticated"):
            await GetCurrentUserUseCase(mock_user_repo).execute("")

    @pytest.mark.asyncio
    async def test_invalid_token(self, mock_user_repo, mock_settings):
        with pytest.raises(ValueError):
            await GetCurrentUserUseCase(mock_user_repo).execute("garbage")

    @pytest.mark.asyncio
    async def test_token_without_subject(self, mock_user_repo, mock_settings):
        token = create_jwt_token({"email": "test@example.com"})
        with pytest.raises(ValueError, match="missing user ID"):
            await GetCurrentUserUseCase(mock_user_repo).execute(token)

    @pytest.mark.asyncio
    async def test_deleted_user(self, mock_user_repo, mock_settings):
        mock_user_repo.find_by_id.return_value = None
        token = create_jwt_token({"sub": "usr-gone"})
        with pytest.raises(ValueError, match="User not found"):
            await GetCurrentUserUseCase(mock_user_repo).execute(token)
