"""
Yum data model.

A yum is a like a user gives to a review.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Yum:
    """
    Endorsement of a review by a user.
    Unique per (user_id, review_id) pair.
    """
    user_id: str
    review_id: str

    def to_dict(self) -> dict:
        return {"userID": self.user_id, "reviewID": self.review_id}

    @classmethod
    def from_dict(cls, data: dict) -> "Yum":
        return cls(user_id=data["userID"], review_id=data["reviewID"])
