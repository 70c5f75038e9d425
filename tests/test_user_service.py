"""
Tests for UserService invariants.
"""
from datetime import date
from unittest.mock import AsyncMock, MagicMock

import pytest

from tracker.modules.users.domain.exceptions import InvalidUserStateError, UserNotFoundError
from tracker.modules.users.domain.user import User
from tracker.modules.users.services.user_service import UserProvider, UserService


@pytest.fixture
def mock_repository():
    """Repository stub; transaction() supports `async with`."""
    repository = MagicMock()
    repository.save = AsyncMock()
    repository.find_by_id = AsyncMock(return_value=None)
    repository.exists_by_id = AsyncMock(return_value=False)
    repository.delete_by_id = AsyncMock()
    return repository


def test_service_is_a_provider():
    assert isinstance(UserService(MagicMock()), UserProvider)


@pytest.mark.asyncio
async def test_create_assigns_id_and_echoes_fields(service, ann):
    created = await service.create_user(ann)

    assert created.id is not None
    assert (created.first_name, created.last_name, created.birthdate, created.email) == (
        "Ann", "Lee", date(1990, 1, 1), "ann@x.com"
    )
    assert await service.get_user(created.id) == created


@pytest.mark.asyncio
@pytest.mark.parametrize("user_id", [0, 1, 42, -3])
async def test_create_with_id_is_rejected(mock_repository, ann, user_id):
    service = UserService(mock_repository)
    ann.id = user_id

    with pytest.raises(InvalidUserStateError):
        await service.create_user(ann)

    mock_repository.save.assert_not_called()


@pytest.mark.asyncio
async def test_partial_update_changes_only_given_fields(service, ann):
    created = await service.create_user(ann)

    updated = await service.update_user(created.id, User(email="new@x.com"))

    assert updated.email == "new@x.com"
    assert (updated.id, updated.first_name, updated.last_name, updated.birthdate) == (
        created.id, created.first_name, created.last_name, created.birthdate
    )
    assert await service.get_user(created.id) == updated


@pytest.mark.asyncio
async def test_update_missing_user_raises(service):
    with pytest.raises(UserNotFoundError, match="User with ID=999 was not found"):
        await service.update_user(999, User(first_name="Nobody"))

    assert await service.find_all_users() == []


@pytest.mark.asyncio
async def test_delete_missing_user_raises_without_deleting(mock_repository):
    service = UserService(mock_repository)

    with pytest.raises(UserNotFoundError):
        await service.delete_user(999)

    mock_repository.delete_by_id.assert_not_called()


@pytest.mark.asyncio
async def test_delete_existing_user(service, ann):
    created = await service.create_user(ann)

    await service.delete_user(created.id)

    assert await service.get_user(created.id) is None


@pytest.mark.asyncio
async def test_queries_return_empty_instead_of_raising(service):
    assert await service.get_user(1) is None
    assert await service.get_user_by_email("nobody@x.com") is None
    assert await service.search_users_by_email("x") == []
    assert await service.search_users_by_name("No", "Body") == []
    assert await service.search_users_by_age_greater_than(10) == []


@pytest.mark.asyncio
async def test_age_search_passes_reference_date(service):
    await service.create_user(User(first_name="Old", last_name="Timer", birthdate=date(1950, 1, 1), email="old@x.com"))
    await service.create_user(User(first_name="Young", last_name="One", birthdate=date(2010, 1, 1), email="young@x.com"))

    found = await service.search_users_by_age_greater_than(30, today=date(2024, 6, 1))

    assert [u.first_name for u in found] == ["Old"]
