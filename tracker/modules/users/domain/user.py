"""
User Domain Model

Pure data model representing a user entity.
"""
from dataclasses import dataclass, replace
from datetime import date
from typing import Optional


@dataclass
class User:
    """User domain model. `id` stays None until the record is persisted."""
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    birthdate: Optional[date] = None
    email: Optional[str] = None
    id: Optional[int] = None

    @classmethod
    def from_dict(cls, data: dict) -> "User":
        """Create User from dictionary (e.g., from database row)."""
        return cls(
            id=data.get("id"),
            first_name=data.get("first_name"),
            last_name=data.get("last_name"),
            birthdate=data.get("birthdate"),
            email=data.get("email"),
        )

    def to_dict(self) -> dict:
        """Convert User to dictionary."""
        return {
            "id": self.id,
            "first_name": self.first_name,
            "last_name": self.last_name,
            "birthdate": self.birthdate,
            "email": self.email,
        }

    def merge(self, patch: "User") -> "User":
        """Return a copy with every non-None field of `patch` applied. The id is never taken from the patch."""
        updates = {
            field: value
            for field, value in patch.to_dict().items()
            if field != "id" and value is not None
        }
        return replace(self, **updates)
