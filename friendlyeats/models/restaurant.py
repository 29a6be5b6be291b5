"""
Restaurant data model.

Includes the fixed candidate pools used to fabricate sample restaurants.
"""

import random
from dataclasses import dataclass

NAME_WORDS = [
    "Bar", "Fire", "Grill", "Drive Thru", "Place", "Best", "Spot", "Prime", "Eatin'"
]

CATEGORIES = [
    "Brunch", "Burgers", "Coffee", "Deli", "Dim Sum", "Indian", "Italian",
    "Mediterranean", "Mexican", "Pizza", "Ramen", "Sushi"
]

CITIES = [
    "Albuquerque", "Arlington", "Atlanta", "Austin", "Baltimore", "Boston",
    "Charlotte", "Chicago", "Cleveland", "Colorado Springs", "Columbus",
    "Dallas", "Denver", "Detroit", "El Paso", "Fort Worth", "Fresno",
    "Houston", "Indianapolis", "Jacksonville", "Kansas City", "Las Vegas",
    "Long Beach", "Los Angeles", "Louisville", "Memphis", "Mesa", "Miami",
    "Milwaukee", "Nashville", "New York", "Oakland", "Oklahoma City", "Omaha",
    "Philadelphia", "Phoenix", "Portland", "Raleigh", "Sacramento",
    "San Antonio", "San Diego", "San Francisco", "San Jose", "Tucson", "Tulsa",
    "Virginia Beach", "Washington"
]

PRICES = [1, 2, 3]

PHOTO_URL_TEMPLATE = (
    "https://storage.googleapis.com/firestorequickstarts.appspot.com/food_{}.png"
)
PHOTO_COUNT = 22


@dataclass
class Restaurant:
    """
    A restaurant listed in the app.

    review_count and average_rating are running aggregates over the
    restaurant's reviews and are updated while reviews are fabricated.
    """
    restaurant_id: str
    owner_id: str  # References a User
    name: str
    category: str
    city: str
    price: int  # Price tier, 1-3
    review_count: int = 0
    average_rating: float = 0.0
    photo_url: str = ""

    def to_dict(self) -> dict:
        """Convert to document body (the id is the document key)."""
        return {
            "ownerID": self.owner_id,
            "name": self.name,
            "category": self.category,
            "city": self.city,
            "price": self.price,
            "reviewCount": self.review_count,
            "averageRating": self.average_rating,
            "photoURL": self.photo_url,
        }

    @classmethod
    def from_dict(cls, data: dict, restaurant_id: str) -> "Restaurant":
        """Create Restaurant from document body and its key."""
        return cls(
            restaurant_id=restaurant_id,
            owner_id=data["ownerID"],
            name=data["name"],
            category=data["category"],
            city=data["city"],
            price=data["price"],
            review_count=data.get("reviewCount", 0),
            average_rating=data.get("averageRating", 0.0),
            photo_url=data.get("photoURL", ""),
        )

    @staticmethod
    def random_name(rng: random.Random) -> str:
        return f"{rng.choice(NAME_WORDS)} {rng.choice(NAME_WORDS)}"

    @staticmethod
    def random_category(rng: random.Random) -> str:
        return rng.choice(CATEGORIES)

    @staticmethod
    def random_city(rng: random.Random) -> str:
        return rng.choice(CITIES)

    @staticmethod
    def random_price(rng: random.Random) -> int:
        return rng.choice(PRICES)

    @staticmethod
    def random_photo_url(rng: random.Random) -> str:
        return PHOTO_URL_TEMPLATE.format(rng.randint(1, PHOTO_COUNT))
