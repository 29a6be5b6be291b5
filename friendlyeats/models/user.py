"""
User data model.

Sample users are not backed by real accounts, only an identifier.
"""

from dataclasses import dataclass


@dataclass
class User:
    """A FriendlyEats user."""
    user_id: str  # Opaque unique identifier

    def to_dict(self) -> dict:
        """Convert to document body."""
        return {"userID": self.user_id}

    @classmethod
    def from_dict(cls, data: dict) -> "User":
        """Create User from document body."""
        return cls(user_id=data["userID"])
