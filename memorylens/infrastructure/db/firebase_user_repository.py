# Standard library imports
import asyncio
import logging
from typing import Any, Dict, Optional

# External package imports
from firebase_admin import db
from firebase_admin.exceptions import FirebaseError

# Local application imports
from ...domain.repositories.user_repository import UserRepository
from ...domain.models.user import User
from ...domain.constants import UserFields
from .firebase_connection import get_users_reference
from .firebase_memory_repository import iter_children

logger = logging.getLogger(__name__)


class FirebaseUserRepository(UserRepository):
    """Realtime database implementation of UserRepository (users/ node)"""

    def __init__(self, users_reference: Optional[db.Reference] = None) -> None:
        self._users_reference = users_reference

    @property
    def users_reference(self) -> db.Reference:
        if self._users_reference is None:
            self._users_reference = get_users_reference()
        return self._users_reference

    async def find_by_email(self, email: str) -> Optional[User]:
        """
        Find user by email address

        Args:
            email: Email address to search for (case-insensitive)

        Returns:
            User domain model if found, None otherwise
        """
        if not email:
            return None

        wanted = email.strip().lower()
        try:
            data = await asyncio.to_thread(self.users_reference.get)
        except FirebaseError as e:
            raise RuntimeError(f"Error finding user by email: {str(e)}")

        for key, record in iter_children(data):
            if isinstance(record, dict) and str(record.get(UserFields.EMAIL, "")).lower() == wanted:
                return self._record_to_user(key, record)
        return None

    async def find_by_id(self, user_id: str) -> Optional[User]:
        """
        Find user by ID

        Args:
            user_id: User ID (database key)

        Returns:
            User domain model if found, None otherwise
        """
        if not user_id:
            return None
        try:
            record = await asyncio.to_thread(self.users_reference.child(user_id).get)
        except (FirebaseError, ValueError) as e:
            # ValueError: key contains characters the database rejects
            raise RuntimeError(f"Error finding user by ID: {str(e)}")
        if not isinstance(record, dict):
            return None
        return self._record_to_user(user_id, record)

    async def create(self, user: User) -> User:
        """
        Push a new account; the database generates the key.

        Returns:
            User with its generated ID
        """
        try:
            new_reference = await asyncio.to_thread(self.users_reference.push, self._user_to_record(user))
        except FirebaseError as e:
            raise RuntimeError(f"Error saving user: {str(e)}")

        return User(
            id=new_reference.key,
            full_name=user.full_name,
            email=user.email,
            hashed_password=user.hashed_password,
            created_at=user.created_at,
        )

    def _record_to_user(self, user_id: str, record: Any) -> Optional[User]:
        try:
            return User(
                id=user_id,
                full_name=record.get(UserFields.FULL_NAME, ""),
                email=record.get(UserFields.EMAIL, ""),
                hashed_password=record.get(UserFields.HASHED_PASSWORD, ""),
                created_at=record.get(UserFields.CREATED_AT),
            )
        except ValueError as e:
            logger.warning("Skipping malformed user record %s: %s", user_id, e)
            return None

    def _user_to_record(self, user: User) -> Dict[str, Any]:
        record = {
            UserFields.FULL_NAME: user.full_name,
            UserFields.EMAIL: user.email,
            UserFields.HASHED_PASSWORD: user.hashed_password,
        }
        if user.created_at:
            record[UserFields.CREATED_AT] = user.created_at
        return record
