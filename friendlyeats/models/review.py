"""
Review data model.

A rating and comment left on a restaurant by a user.
"""

from dataclasses import dataclass
from datetime import datetime

from friendlyeats.models.user import User

# Sample comment for each star rating
REVIEW_TEXTS = {
    5: "Amazing!!",
    4: "Tasty restaurant, would recommend",
    3: "Food was good but the service was slow",
    2: "The ketchup was too spicy",
    1: "There is a bug in my soup",
}


def comment_for_rating(rating: int) -> str:
    """
    Look up the sample comment for a rating.

    Raises:
        ValueError: If rating is not 1-5
    """
    try:
        return REVIEW_TEXTS[rating]
    except KeyError:
        raise ValueError(
            f"No sample comment for rating {rating!r}; "
            "ratings must be drawn from 1-5"
        ) from None


@dataclass
class Review:
    """
    Review of a restaurant.
    yum_count is updated while yums are fabricated.
    """
    review_id: str
    restaurant_id: str  # References a Restaurant
    rating: int  # 1-5 star rating
    user_info: User  # Author
    text: str
    date: datetime
    yum_count: int = 0

    def __post_init__(self):
        # Validate rating
        if not (1 <= self.rating <= 5):
            raise ValueError(f"Invalid rating: {self.rating}. Must be 1-5")

    def to_dict(self) -> dict:
        """Convert to document body (the id is the document key)."""
        return {
            "restaurantID": self.restaurant_id,
            "rating": self.rating,
            "userInfo": self.user_info.to_dict(),
            "text": self.text,
            "timestamp": self.date,
            "yumCount": self.yum_count,
        }

    @classmethod
    def from_dict(cls, data: dict, review_id: str) -> "Review":
        """Create Review from document body and its key."""
        timestamp = data["timestamp"]
        if isinstance(timestamp, str):
            timestamp = datetime.fromisoformat(timestamp)

        return cls(
            review_id=review_id,
            restaurant_id=data["restaurantID"],
            rating=data["rating"],
            user_info=User.from_dict(data["userInfo"]),
            text=data["text"],
            date=timestamp,
            yum_count=data.get("yumCount", 0),
        )
