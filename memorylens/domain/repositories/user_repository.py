from abc import ABC, abstractmethod
from typing import Optional
from ..models.user import User


class UserRepository(ABC):
    """Storage for dashboard accounts"""

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[User]:
        """Case-insensitive lookup; None if no account uses the address"""

    @abstractmethod
    async def find_by_id(self, user_id: str) -> Optional[User]:
        """Lookup by the database key carried in the session token"""

    @abstractmethod
    async def create(self, user: User) -> User:
        """Store a new account and return it with its generated ID"""
