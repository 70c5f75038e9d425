"""
Business Logic Services

Services contain business logic and orchestrate repository calls.
"""

from .user_service import UserProvider, UserService

__all__ = [
    "UserProvider",
    "UserService",
]
