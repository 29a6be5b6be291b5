"""
Unit tests for the FriendlyEats record models.
"""

import random
import pytest
from datetime import datetime, timezone
from friendlyeats.models.user import User
from friendlyeats.models.restaurant import Restaurant, CATEGORIES, CITIES, NAME_WORDS
from friendlyeats.models.review import Review, REVIEW_TEXTS, comment_for_rating
from friendlyeats.models.yum import Yum


def make_review(rating=4):
    return Review(
        review_id="review-1",
        restaurant_id="restaurant-1",
        rating=rating,
        user_info=User(user_id="user-1"),
        text="Tasty restaurant, would recommend",
        date=datetime(2024, 6, 1, 12, 0, tzinfo=timezone.utc),
    )


def test_review_rating_validation():
    """Test Review rejects ratings outside 1-5."""
    assert make_review(rating=1).rating == 1
    assert make_review(rating=5).rating == 5

    with pytest.raises(ValueError):
        make_review(rating=0)
    with pytest.raises(ValueError):
        make_review(rating=6)


def test_comment_table():
    """Test every rating maps to its fixed comment."""
    assert comment_for_rating(5) == "Amazing!!"
    assert comment_for_rating(4) == "Tasty restaurant, would recommend"
    assert comment_for_rating(3) == "Food was good but the service was slow"
    assert comment_for_rating(2) == "The ketchup was too spicy"
    assert comment_for_rating(1) == "There is a bug in my soup"
    assert sorted(REVIEW_TEXTS) == [1, 2, 3, 4, 5]


def test_comment_for_unexpected_rating():
    """Test unexpected ratings fail fast."""
    with pytest.raises(ValueError):
        comment_for_rating(0)
    with pytest.raises(ValueError):
        comment_for_rating(7)


def test_review_document_fields():
    """Test Review document body uses the app's field names."""
    review = make_review()
    doc = review.to_dict()

    assert doc == {
        "restaurantID": "restaurant-1",
        "rating": 4,
        "userInfo": {"userID": "user-1"},
        "text": "Tasty restaurant, would recommend",
        "timestamp": review.date,
        "yumCount": 0,
    }

    restored = Review.from_dict(doc, "review-1")
    assert restored == review


def test_review_from_dict_parses_iso_timestamp():
    """Test timestamps saved as ISO strings are parsed back."""
    review = make_review()
    doc = review.to_dict()
    doc["timestamp"] = review.date.isoformat()

    restored = Review.from_dict(doc, "review-1")
    assert restored.date == review.date


def test_restaurant_document_fields():
    """Test Restaurant to/from dict conversion."""
    restaurant = Restaurant(
        restaurant_id="restaurant-1",
        owner_id="user-1",
        name="Fire Grill",
        category="Burgers",
        city="Austin",
        price=2,
        review_count=3,
        average_rating=4.0,
        photo_url="https://example.com/food_1.png"
    )

    doc = restaurant.to_dict()
    assert "restaurantID" not in doc
    assert doc["ownerID"] == "user-1"
    assert doc["reviewCount"] == 3
    assert doc["averageRating"] == 4.0
    assert doc["photoURL"] == "https://example.com/food_1.png"

    assert Restaurant.from_dict(doc, "restaurant-1") == restaurant


def test_restaurant_random_fields_come_from_pools():
    """Test random restaurant fields are drawn from the candidate pools."""
    rng = random.Random(7)
    for _ in range(50):
        name = Restaurant.random_name(rng)
        # Words like "Drive Thru" contain spaces, so match whole pairs
        assert any(
            name == f"{first} {second}"
            for first in NAME_WORDS
            for second in NAME_WORDS
        )
        assert Restaurant.random_category(rng) in CATEGORIES
        assert Restaurant.random_city(rng) in CITIES
        assert Restaurant.random_price(rng) in (1, 2, 3)
        photo = Restaurant.random_photo_url(rng)
        number = int(photo.rsplit("food_", 1)[1].split(".")[0])
        assert 1 <= number <= 22


def test_user_and_yum_documents():
    """Test User and Yum document bodies."""
    assert User(user_id="u1").to_dict() == {"userID": "u1"}
    assert User.from_dict({"userID": "u1"}) == User(user_id="u1")

    yum = Yum(user_id="u1", review_id="r1")
    assert yum.to_dict() == {"userID": "u1", "reviewID": "r1"}
    assert Yum.from_dict(yum.to_dict()) == yum
