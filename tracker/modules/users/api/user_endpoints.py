"""
User Management API Endpoints

REST API endpoints for user CRUD operations and searches.
"""
import logging
from datetime import date
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Path, Query

from tracker.modules.users.api.dependencies import get_user_service
from tracker.modules.users.api.mapper import user_mapper
from tracker.modules.users.api.schemas import (
    CreateUserRequest,
    UpdateUserRequest,
    UserBasicDto,
    UserDto,
    UserSearchResultDto,
)
from tracker.modules.users.domain import age
from tracker.modules.users.domain.exceptions import (
    InvalidUserStateError,
    UserNotFoundError,
)
from tracker.modules.users.services.user_service import UserService

logger = logging.getLogger("tracker.users.api")

router = APIRouter(prefix="/v1/users", tags=["users"])


@router.get("", response_model=List[UserDto])
@router.get("/", response_model=List[UserDto], include_in_schema=False)
async def get_all_users(service: UserService = Depends(get_user_service)):
    """List all users with full details."""
    try:
        users = await service.find_all_users()
        return [user_mapper.to_dto(user) for user in users]
    except Exception as e:
        logger.error(f"[user_endpoints.get_all_users] ERROR: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=str(e))


@router.get("/simple", response_model=List[UserBasicDto])
async def get_all_users_simple(service: UserService = Depends(get_user_service)):
    """List all users with id, first name and last name only."""
    try:
        users = await service.find_all_users()
        return [user_mapper.to_basic_dto(user) for user in users]
    except Exception as e:
        logger.error(f"[user_endpoints.get_all_users_simple] ERROR: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=str(e))


@router.get("/email", response_model=List[UserSearchResultDto])
async def search_users_by_email_param(
    email: str = Query(..., description="Email fragment, case-insensitive"),
    service: UserService = Depends(get_user_service)
):
    """Search users whose email contains the given text. Returns id and email only."""
    logger.debug(f"[user_endpoints.search_users_by_email_param] email={email}")

    try:
        users = await service.search_users_by_email(email)
        return [user_mapper.to_search_result_dto(user) for user in users]
    except Exception as e:
        logger.error(f"[user_endpoints.search_users_by_email_param] ERROR: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=str(e))


@router.get("/search/by-email", response_model=UserDto)
async def get_user_by_email(
    email: str = Query(..., description="Exact email address"),
    service: UserService = Depends(get_user_service)
):
    """Get a user by exact email address."""
    logger.debug(f"[user_endpoints.get_user_by_email] email={email}")

    try:
        user = await service.get_user_by_email(email)
        if not user:
            raise UserNotFoundError(f"User with email={email} was not found")
        return user_mapper.to_dto(user)
    except UserNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except Exception as e:
        logger.error(f"[user_endpoints.get_user_by_email] ERROR: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=str(e))


@router.get("/search/by-name", response_model=UserDto)
async def get_user_by_name(
    first_name: str = Query(..., alias="firstName"),
    last_name: str = Query(..., alias="lastName"),
    service: UserService = Depends(get_user_service)
):
    """
    Get a user by first and last name.

    Returns the first match when several users share the name.
    """
    logger.debug(f"[user_endpoints.get_user_by_name] name={first_name} {last_name}")

    try:
        users = await service.search_users_by_name(first_name, last_name)
        if not users:
            raise UserNotFoundError(f"User with name={first_name} {last_name} was not found")
        return user_mapper.to_dto(users[0])
    except UserNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except Exception as e:
        logger.error(f"[user_endpoints.get_user_by_name] ERROR: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=str(e))


@router.get("/search/email", response_model=List[UserSearchResultDto])
async def search_users_by_email_fragment(
    email_fragment: str = Query(..., alias="emailFragment"),
    service: UserService = Depends(get_user_service)
):
    """Search users by email fragment (case-insensitive, partial match)."""
    try:
        users = await service.search_users_by_email(email_fragment)
        return [user_mapper.to_search_result_dto(user) for user in users]
    except Exception as e:
        logger.error(f"[user_endpoints.search_users_by_email_fragment] ERROR: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=str(e))


@router.get("/search/age", response_model=List[UserDto])
async def search_users_by_age(
    age_min: int = Query(..., alias="ageMin", description="Minimum age (exclusive)"),
    service: UserService = Depends(get_user_service)
):
    """Search users older than `ageMin` years."""
    try:
        users = await service.search_users_by_age_greater_than(age_min)
        return [user_mapper.to_dto(user) for user in users]
    except Exception as e:
        logger.error(f"[user_endpoints.search_users_by_age] ERROR: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=str(e))


@router.get("/older/{time}", response_model=List[UserDto])
async def get_users_older_than(
    time: date = Path(..., description="Reference date (YYYY-MM-DD)"),
    service: UserService = Depends(get_user_service)
):
    """Search users older than the number of whole years elapsed since `time`."""
    try:
        age_min = age.years_between(time, age.today())
        users = await service.search_users_by_age_greater_than(age_min)
        return [user_mapper.to_dto(user) for user in users]
    except Exception as e:
        logger.error(f"[user_endpoints.get_users_older_than] ERROR: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=str(e))


@router.get("/{user_id}", response_model=UserDto)
async def get_user(
    user_id: int,
    service: UserService = Depends(get_user_service)
):
    """Get user details by ID."""
    logger.debug(f"[user_endpoints.get_user] user_id={user_id}")

    try:
        user = await service.get_user(user_id)
        if not user:
            raise UserNotFoundError.for_id(user_id)
        return user_mapper.to_dto(user)
    except UserNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except Exception as e:
        logger.error(f"[user_endpoints.get_user] ERROR: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=str(e))


@router.post("", response_model=UserDto, status_code=201)
@router.post("/", response_model=UserDto, status_code=201, include_in_schema=False)
async def create_user(
    request: CreateUserRequest,
    service: UserService = Depends(get_user_service)
):
    """Create a new user."""
    logger.debug(f"[user_endpoints.create_user] email={request.email}")

    try:
        user = await service.create_user(user_mapper.from_create_request(request))
        return user_mapper.to_dto(user)
    except InvalidUserStateError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.error(f"[user_endpoints.create_user] ERROR: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=str(e))


@router.put("/{user_id}", response_model=UserDto)
async def update_user(
    user_id: int,
    request: UpdateUserRequest,
    service: UserService = Depends(get_user_service)
):
    """
    Update an existing user.

    Only fields present in the body are changed.
    """
    logger.debug(f"[user_endpoints.update_user] user_id={user_id}")

    try:
        user = await service.update_user(user_id, user_mapper.from_update_request(request))
        return user_mapper.to_dto(user)
    except UserNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except Exception as e:
        logger.error(f"[user_endpoints.update_user] ERROR: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=str(e))


@router.delete("/{user_id}", status_code=204)
async def delete_user(
    user_id: int,
    service: UserService = Depends(get_user_service)
):
    """Delete a user by ID."""
    logger.debug(f"[user_endpoints.delete_user] user_id={user_id}")

    try:
        await service.delete_user(user_id)
        return None
    except UserNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except Exception as e:
        logger.error(f"[user_endpoints.delete_user] ERROR: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=str(e))
