from dataclasses import dataclass
from typing import Optional


@dataclass
class User:
    """
    Dashboard account kept under users/{id}.

    Emails are stored lowercased so sign-in is case-insensitive; only the
    bcrypt hash of the password is ever held.
    """
    id: Optional[str]
    full_name: str
    email: str
    hashed_password: str
    created_at: Optional[str] = None

    def __post_init__(self) -> None:
        self.full_name = (self.full_name or "").strip()
        self.email = (self.email or "").strip().lower()
        if len(self.full_name) < 2:
            raise ValueError("Full name must be at least 2 characters")
        if "@" not in self.email:
            raise ValueError("Invalid email format")
        if not self.hashed_password:
            raise ValueError("Password hash is required")
