"""
Data Access Layer (Repositories)

Repositories handle all database interactions.
"""

from .tables import metadata, users
from .user_repository import UserRepository

__all__ = [
    "metadata",
    "users",
    "UserRepository",
]
