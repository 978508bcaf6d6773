from typing import Optional
from pydantic import BaseModel, EmailStr, Field, field_validator


class UserRegistrationRequest(BaseModel):
    """Sign-up form / API payload"""
    full_name: str = Field(min_length=2, max_length=200)
    email: EmailStr
    password: str = Field(min_length=8, max_length=256)

    @field_validator("full_name")
    @classmethod
    def strip_full_name(cls, value: str) -> str:
        value = value.strip()
        if len(value) < 2:
            raise ValueError("Full name must be at least 2 characters")
        return value


class UserLoginRequest(BaseModel):
    email: EmailStr
    # Any non-empty password; strength is only enforced on sign-up
    password: str = Field(min_length=1, max_length=256)


class TokenResponse(BaseModel):
    """Session token returned on sign-in, also set as the session cookie"""
    access_token: str
    token_type: str = "bearer"
    expires_in: Optional[int] = None
