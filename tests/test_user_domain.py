"""
Tests for the User entity and its partial merge.
"""
from datetime import date

from tracker.modules.users.domain.user import User


def test_merge_overwrites_only_supplied_fields():
    stored = User(id=7, first_name="Ann", last_name="Lee", birthdate=date(1990, 1, 1), email="ann@x.com")

    merged = stored.merge(User(email="new@x.com"))

    assert merged == User(id=7, first_name="Ann", last_name="Lee", birthdate=date(1990, 1, 1), email="new@x.com")
    # The stored record itself is untouched
    assert stored.email == "ann@x.com"


def test_merge_never_takes_the_patch_id():
    stored = User(id=7, first_name="Ann", last_name="Lee", birthdate=date(1990, 1, 1), email="ann@x.com")

    merged = stored.merge(User(id=99, last_name="Kim"))

    assert merged.id == 7
    assert merged.last_name == "Kim"


def test_from_dict_reads_database_row():
    row = {"id": 3, "first_name": "Bo", "last_name": "Ng", "birthdate": date(2000, 2, 2), "email": "bo@x.com"}

    user = User.from_dict(row)

    assert user.id == 3
    assert user.to_dict() == row
