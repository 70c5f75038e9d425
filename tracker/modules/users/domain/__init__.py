"""
Domain Models

Pure data models representing the user entity.
"""

from .user import User
from .exceptions import UserError, UserNotFoundError, InvalidUserStateError

__all__ = [
    "User",
    "UserError",
    "UserNotFoundError",
    "InvalidUserStateError",
]
