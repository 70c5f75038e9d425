"""
API Dependencies

FastAPI dependencies wiring the repository and service for each request.
"""
from databases import Database
from fastapi import Depends

from tracker.modules.database import get_database
from tracker.modules.users.repositories.user_repository import UserRepository
from tracker.modules.users.services.user_service import UserService


def get_user_repository(database: Database = Depends(get_database)) -> UserRepository:
    return UserRepository(database)


def get_user_service(repository: UserRepository = Depends(get_user_repository)) -> UserService:
    return UserService(repository)
