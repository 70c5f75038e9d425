"""
User Service

Business logic for user management operations.
"""
import logging
from abc import ABC, abstractmethod
from datetime import date
from typing import List, Optional

from tracker.modules.users.domain.exceptions import InvalidUserStateError, UserNotFoundError
from tracker.modules.users.domain.user import User
from tracker.modules.users.repositories.user_repository import UserRepository

logger = logging.getLogger("tracker.users.service")


class UserProvider(ABC):
    """Read-only queries over users. Lookups return None or an empty list, never raise on a miss."""

    @abstractmethod
    async def get_user(self, user_id: int) -> Optional[User]:
        pass

    @abstractmethod
    async def get_user_by_email(self, email: str) -> Optional[User]:
        pass

    @abstractmethod
    async def find_all_users(self) -> List[User]:
        pass

    @abstractmethod
    async def search_users_by_email(self, email_fragment: str) -> List[User]:
        pass

    @abstractmethod
    async def search_users_by_name(self, first_name: str, last_name: str) -> List[User]:
        pass

    @abstractmethod
    async def search_users_by_age_greater_than(self, min_age: int, today: Optional[date] = None) -> List[User]:
        pass


class UserService(UserProvider):
    """Service for user business logic. Every mutation runs in its own transaction."""

    def __init__(self, repository: Optional[UserRepository] = None):
        self.repository = repository or UserRepository()

    async def create_user(self, user: User) -> User:
        """Create a new user. The user must not carry an id yet."""
        logger.info(f"[UserService.create_user] email={user.email}")
        if user.id is not None:
            raise InvalidUserStateError("User has already DB ID, update is not permitted!")

        async with self.repository.transaction():
            return await self.repository.save(user)

    async def update_user(self, user_id: int, patch: User) -> User:
        """Apply the non-None fields of `patch` to the stored user."""
        logger.info(f"[UserService.update_user] user_id={user_id}")

        async with self.repository.transaction():
            existing = await self.repository.find_by_id(user_id)
            if existing is None:
                raise UserNotFoundError.for_id(user_id)
            return await self.repository.save(existing.merge(patch))

    async def delete_user(self, user_id: int) -> None:
        logger.info(f"[UserService.delete_user] user_id={user_id}")

        async with self.repository.transaction():
            if not await self.repository.exists_by_id(user_id):
                raise UserNotFoundError.for_id(user_id)
            await self.repository.delete_by_id(user_id)

    async def get_user(self, user_id: int) -> Optional[User]:
        """Get user by ID."""
        logger.debug(f"[UserService.get_user] user_id={user_id}")
        return await self.repository.find_by_id(user_id)

    async def get_user_by_email(self, email: str) -> Optional[User]:
        """Get user by exact email."""
        logger.debug(f"[UserService.get_user_by_email] email={email}")
        return await self.repository.find_by_email(email)

    async def find_all_users(self) -> List[User]:
        return await self.repository.find_all()

    async def search_users_by_email(self, email_fragment: str) -> List[User]:
        logger.info(f"[UserService.search_users_by_email] fragment={email_fragment}")
        return await self.repository.find_by_email_containing_ignore_case(email_fragment)

    async def search_users_by_name(self, first_name: str, last_name: str) -> List[User]:
        logger.info(f"[UserService.search_users_by_name] name={first_name} {last_name}")
        return await self.repository.find_by_first_name_and_last_name(first_name, last_name)

    async def search_users_by_age_greater_than(self, min_age: int, today: Optional[date] = None) -> List[User]:
        logger.info(f"[UserService.search_users_by_age_greater_than] min_age={min_age}")
        return await self.repository.find_by_age_greater_than(min_age, today)
