"""
Sample Data Fabricator.

Builds an in-memory FriendlyEats dataset of users, restaurants, reviews and
yums whose aggregates agree with each other.
"""

import logging
import random
import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Callable, Dict, List, Optional

from friendlyeats.models.user import User
from friendlyeats.models.restaurant import Restaurant
from friendlyeats.models.review import Review, comment_for_rating
from friendlyeats.models.yum import Yum

logger = logging.getLogger(__name__)


@dataclass
class SampleData:
    """The four fabricated collections, in generation order."""
    users: List[User] = field(default_factory=list)
    restaurants: List[Restaurant] = field(default_factory=list)
    reviews: List[Review] = field(default_factory=list)
    yums: List[Yum] = field(default_factory=list)

    def counts(self) -> Dict[str, int]:
        return {
            "users": len(self.users),
            "restaurants": len(self.restaurants),
            "reviews": len(self.reviews),
            "yums": len(self.yums),
        }


def updated_average(
    average: float,
    count: int,
    rating: int,
    legacy: bool = False
) -> float:
    """
    Fold a new rating into a running average.

    Args:
        average: Current average over `count` ratings
        count: Number of ratings folded in so far
        rating: New rating
        legacy: Divide by (average + 1) like earlier populated data did.
            The result is not a true mean unless average == count.

    Returns:
        New average
    """
    total = average * count + rating
    if legacy:
        return total / (average + 1)
    return total / (count + 1)


def _new_id() -> str:
    return str(uuid.uuid4())


def _now() -> datetime:
    return datetime.now(timezone.utc)


class SampleDataFabricator:
    """
    Fabricates users, restaurants, reviews and yums.

    Users come first since restaurants depend on users, reviews depend on
    both, and yums depend on reviews and users.
    """

    def __init__(
        self,
        user_count: int = 20,
        restaurant_count: int = 20,
        reviews_per_restaurant: int = 20,
        max_yums_per_review: int = 20,
        rng: Optional[random.Random] = None,
        id_factory: Optional[Callable[[], str]] = None,
        clock: Optional[Callable[[], datetime]] = None,
        legacy_average: bool = False
    ):
        """
        Initialize fabricator.

        Args:
            user_count: Number of users to create
            restaurant_count: Number of restaurants to create
            reviews_per_restaurant: Reviews generated for each restaurant
            max_yums_per_review: Exclusive upper bound on yums per review.
                Must not exceed user_count.
            rng: Random source (defaults to a fresh random.Random)
            id_factory: Produces unique document ids (defaults to UUID4)
            clock: Produces review timestamps (defaults to UTC now)
            legacy_average: Use the legacy running-average formula

        Raises:
            ValueError: If the counts are inconsistent
        """
        for label, value in (
            ("user_count", user_count),
            ("restaurant_count", restaurant_count),
            ("reviews_per_restaurant", reviews_per_restaurant),
        ):
            if value < 0:
                raise ValueError(f"{label} must be non-negative, got {value}")

        if max_yums_per_review < 1:
            raise ValueError(
                f"max_yums_per_review must be at least 1, got {max_yums_per_review}"
            )

        # Yums are assigned to users by index to avoid duplicate likes
        if max_yums_per_review > user_count:
            raise ValueError(
                f"max_yums_per_review ({max_yums_per_review}) must be <= "
                f"user_count ({user_count}); yums are unique per user per review"
            )

        self.user_count = user_count
        self.restaurant_count = restaurant_count
        self.reviews_per_restaurant = reviews_per_restaurant
        self.max_yums_per_review = max_yums_per_review
        self.rng = rng or random.Random()
        self.id_factory = id_factory or _new_id
        self.clock = clock or _now
        self.legacy_average = legacy_average

        if legacy_average:
            logger.warning("Using legacy running-average formula; averages will be skewed")

    def generate(self) -> SampleData:
        """
        Build a complete dataset.

        Returns:
            SampleData with cross-referenced users, restaurants, reviews and yums
        """
        data = SampleData()
        data.users = self._generate_users()
        data.restaurants = self._generate_restaurants(data.users)

        for restaurant in data.restaurants:
            data.reviews.extend(self._generate_reviews(restaurant, data.users))

        for review in data.reviews:
            data.yums.extend(self._generate_yums(review, data.users))

        counts = data.counts()
        logger.info(
            f"Fabricated {counts['users']} users, {counts['restaurants']} restaurants, "
            f"{counts['reviews']} reviews, {counts['yums']} yums"
        )
        return data

    def _random_user(self, users: List[User]) -> User:
        return self.rng.choice(users)

    def _generate_users(self) -> List[User]:
        return [User(user_id=self.id_factory()) for _ in range(self.user_count)]

    def _generate_restaurants(self, users: List[User]) -> List[Restaurant]:
        restaurants = []
        for _ in range(self.restaurant_count):
            restaurants.append(Restaurant(
                restaurant_id=self.id_factory(),
                owner_id=self._random_user(users).user_id,
                name=Restaurant.random_name(self.rng),
                category=Restaurant.random_category(self.rng),
                city=Restaurant.random_city(self.rng),
                price=Restaurant.random_price(self.rng),
                review_count=0,
                average_rating=0.0,
                photo_url=Restaurant.random_photo_url(self.rng)
            ))
        logger.debug(f"Generated {len(restaurants)} restaurants")
        return restaurants

    def _generate_reviews(
        self,
        restaurant: Restaurant,
        users: List[User]
    ) -> List[Review]:
        """Generate reviews for one restaurant, updating its aggregates in place."""
        reviews = []
        for _ in range(self.reviews_per_restaurant):
            rating = self.rng.randint(1, 5)
            review = Review(
                review_id=self.id_factory(),
                restaurant_id=restaurant.restaurant_id,
                rating=rating,
                user_info=self._random_user(users),
                text=comment_for_rating(rating),
                date=self.clock(),
                yum_count=0
            )

            restaurant.average_rating = updated_average(
                restaurant.average_rating,
                restaurant.review_count,
                rating,
                legacy=self.legacy_average
            )
            restaurant.review_count += 1
            reviews.append(review)

        logger.debug(
            f"Restaurant {restaurant.restaurant_id}: {restaurant.review_count} reviews, "
            f"average {restaurant.average_rating:.2f}"
        )
        return reviews

    def _generate_yums(self, review: Review, users: List[User]) -> List[Yum]:
        """Generate yums for one review, updating its yum_count in place."""
        yum_total = self.rng.randrange(self.max_yums_per_review)
        if yum_total == 0:
            return []

        yums = []
        # Index into users so nobody likes the same review twice
        for index in range(yum_total):
            yums.append(Yum(user_id=users[index].user_id, review_id=review.review_id))
            review.yum_count += 1
        return yums
