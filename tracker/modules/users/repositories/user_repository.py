"""
User Repository

Handles all database operations for the users table. Every query is a
store-level predicate; nothing is filtered in memory.
"""
import logging
from datetime import date
from typing import List, Optional

from databases import Database
from sqlalchemy import delete, func, insert, select, update

from tracker.modules.users.domain import age
from tracker.modules.users.domain.user import User
from tracker.modules.users.repositories.tables import users

logger = logging.getLogger("tracker.users.repository")

LIKE_ESCAPE = "/"


def _escape_like(value: str) -> str:
    """Make %, _ and the escape character match literally in a LIKE pattern."""
    for char in (LIKE_ESCAPE, "%", "_"):
        value = value.replace(char, LIKE_ESCAPE + char)
    return value


class UserRepository:
    """Repository for user data access."""

    def __init__(self, database: Optional[Database] = None):
        if database is None:
            from tracker.modules.database import database
        self.database = database

    def transaction(self):
        """Unit of work for a single mutating operation."""
        return self.database.transaction()

    async def _fetch_users(self, query) -> List[User]:
        rows = await self.database.fetch_all(query)
        return [User.from_dict(dict(row)) for row in rows]

    async def find_by_id(self, user_id: int) -> Optional[User]:
        """Get user by ID."""
        query = select(users).where(users.c.id == user_id)
        row = await self.database.fetch_one(query)
        if not row:
            return None
        return User.from_dict(dict(row))

    async def find_all(self) -> List[User]:
        query = select(users).order_by(users.c.id)
        return await self._fetch_users(query)

    async def find_by_email(self, email: str) -> Optional[User]:
        """Exact match; the column is not unique, so the lowest id wins."""
        query = (
            select(users)
            .where(users.c.email == email)
            .order_by(users.c.id)
            .limit(1)
        )
        row = await self.database.fetch_one(query)
        if not row:
            return None
        return User.from_dict(dict(row))

    async def find_by_email_containing_ignore_case(self, fragment: str) -> List[User]:
        """Case-insensitive substring match. An empty fragment matches every email."""
        # Whole pattern is one bound value: no literal % may reach the SQL text.
        pattern = f"%{_escape_like(fragment.lower())}%"
        query = (
            select(users)
            .where(users.c.email.is_not(None))
            .where(func.lower(users.c.email).like(pattern, escape=LIKE_ESCAPE))
            .order_by(users.c.id)
        )
        return await self._fetch_users(query)

    async def find_by_first_name_and_last_name(self, first_name: str, last_name: str) -> List[User]:
        """Exact, case-sensitive match on both names."""
        query = (
            select(users)
            .where(users.c.first_name == first_name)
            .where(users.c.last_name == last_name)
            .order_by(users.c.id)
        )
        return await self._fetch_users(query)

    async def find_by_age_greater_than(self, min_age: int, today: Optional[date] = None) -> List[User]:
        """
        Users born strictly before `today` minus `min_age + 1` years.

        Args:
            min_age: Age threshold (exclusive)
            today: Reference date, defaults to the module clock
        """
        cutoff = age.birthdate_cutoff(min_age, today or age.today())
        logger.debug(f"[UserRepository.find_by_age_greater_than] min_age={min_age}, cutoff={cutoff}")
        query = (
            select(users)
            .where(users.c.birthdate.is_not(None))
            .where(users.c.birthdate < cutoff)
            .order_by(users.c.id)
        )
        return await self._fetch_users(query)

    async def save(self, user: User) -> User:
        """Insert when the user has no id yet, otherwise update the stored row."""
        values = {
            "first_name": user.first_name,
            "last_name": user.last_name,
            "birthdate": user.birthdate,
            "email": user.email,
        }
        if user.id is None:
            query = insert(users).values(**values).returning(users.c.id)
            user_id = await self.database.fetch_val(query)
            logger.debug(f"[UserRepository.save] inserted user_id={user_id}")
            return User(id=user_id, **values)

        query = update(users).where(users.c.id == user.id).values(**values)
        await self.database.execute(query)
        logger.debug(f"[UserRepository.save] updated user_id={user.id}")
        return User(id=user.id, **values)

    async def delete_by_id(self, user_id: int) -> None:
        query = delete(users).where(users.c.id == user_id)
        await self.database.execute(query)

    async def exists_by_id(self, user_id: int) -> bool:
        query = select(users.c.id).where(users.c.id == user_id)
        return await self.database.fetch_val(query) is not None
