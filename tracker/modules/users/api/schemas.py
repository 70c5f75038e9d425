"""
Request/Response Models

Wire shapes for the user endpoints. JSON uses camelCase names; snake_case
is accepted on input as well.
"""
from datetime import date
from typing import Annotated, Optional

from email_validator import EmailNotValidError, validate_email
from pydantic import AfterValidator, BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel


def check_email(value: str) -> str:
    """Reject malformed addresses but keep the submitted text as is."""
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError as e:
        raise ValueError(f"value is not a valid email address: {e}")
    return value


Email = Annotated[str, AfterValidator(check_email)]


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class UserDto(CamelModel):
    id: Optional[int] = None
    first_name: str
    last_name: str
    birthdate: date
    email: str


class UserBasicDto(CamelModel):
    id: Optional[int] = None
    first_name: str
    last_name: str


class UserSearchResultDto(CamelModel):
    id: Optional[int] = None
    email: str


class CreateUserRequest(CamelModel):
    first_name: str
    last_name: str
    birthdate: date
    email: Email

    @field_validator("first_name", "last_name")
    @classmethod
    def not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be blank")
        return value


class UpdateUserRequest(CamelModel):
    # None means "leave unchanged"
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    birthdate: Optional[date] = None
    email: Optional[Email] = None
