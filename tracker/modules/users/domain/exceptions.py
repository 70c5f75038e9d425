"""
User Management - Exceptions
"""


class UserError(Exception):
    """Base exception for user management errors"""
    pass


class UserNotFoundError(UserError):
    """Raised when an operation requires a user that does not exist"""

    @classmethod
    def for_id(cls, user_id: int) -> "UserNotFoundError":
        return cls(f"User with ID={user_id} was not found")


class InvalidUserStateError(UserError):
    """Raised when a user is in the wrong lifecycle state for the operation"""
    pass
