"""
User Mapper

Stateless conversion between the User entity and its DTOs.
"""
from tracker.modules.users.api.schemas import (
    CreateUserRequest,
    UpdateUserRequest,
    UserBasicDto,
    UserDto,
    UserSearchResultDto,
)
from tracker.modules.users.domain.user import User


class UserMapper:

    def to_dto(self, user: User) -> UserDto:
        """Full representation with every field."""
        return UserDto(
            id=user.id,
            first_name=user.first_name,
            last_name=user.last_name,
            birthdate=user.birthdate,
            email=user.email,
        )

    def to_basic_dto(self, user: User) -> UserBasicDto:
        """Id and names only."""
        return UserBasicDto(id=user.id, first_name=user.first_name, last_name=user.last_name)

    def to_search_result_dto(self, user: User) -> UserSearchResultDto:
        """Id and email only."""
        return UserSearchResultDto(id=user.id, email=user.email)

    def from_create_request(self, request: CreateUserRequest) -> User:
        """New, unsaved user; the store assigns the id."""
        return User(
            first_name=request.first_name,
            last_name=request.last_name,
            birthdate=request.birthdate,
            email=request.email,
        )

    def from_update_request(self, request: UpdateUserRequest) -> User:
        """Fields missing from the request stay None and are skipped by the merge."""
        return User(
            first_name=request.first_name,
            last_name=request.last_name,
            birthdate=request.birthdate,
            email=request.email,
        )


# Singleton instance
user_mapper = UserMapper()
