"""Generate realistic mock store catalogs for testing."""

import random
from uuid import uuid4

from faker import Faker

from src.models.taxonomies import (
    CUISINES,
    DIETARY_OPTIONS,
    DISTANCE_STEPS_MI,
    FOOD_TYPES,
    PICKUP_DAYS,
    PICKUP_WINDOWS,
    PRICE_BUCKETS,
    STORE_TAGS,
)

fake = Faker()


class MockDataGenerator:
    """Generate mock store listings in the catalog payload shape."""

    NAME_TEMPLATES = {
        "Meals": ["{last}'s {cuisine} Kitchen", "{cuisine} House", "The {adjective} {cuisine} Table"],
        "Bakery": ["{last}'s Bakehouse", "{adjective} Crumb Bakery", "Rise & {last}"],
        "Groceries": ["{last} Corner Grocery", "{adjective} Market", "{city} Pantry"],
        "Flowers": ["{last}'s Blooms", "{adjective} Petals"],
        "Pet food": ["{last}'s Pet Pantry", "{adjective} Paws"],
        "Other": ["{last} & Co.", "{adjective} Goods"],
    }

    ADJECTIVES = ["Golden", "Fresh", "Little", "Happy", "Sunny", "Green", "Rustic", "Urban"]

    IMAGES = {
        "Meals": "🍱",
        "Bakery": "🥐",
        "Groceries": "🛒",
        "Flowers": "🌹",
        "Pet food": "🦴",
        "Other": "🛍️",
    }

    def __init__(self, seed: int | None = None):
        if seed is not None:
            random.seed(seed)
            Faker.seed(seed)

    def generate_store(self, store_id: str | None = None) -> dict:
        """Generate a mock store listing."""
        food_type = random.choice(FOOD_TYPES)
        cuisine = random.choice(CUISINES) if food_type == "Meals" else random.choice([*CUISINES, "Other"])

        template = random.choice(self.NAME_TEMPLATES[food_type])
        name = template.format(
            last=fake.last_name(),
            cuisine=cuisine,
            adjective=random.choice(self.ADJECTIVES),
            city=fake.city(),
        )

        original_price = round(random.uniform(8.0, 25.0), 2)
        discounted_price = round(original_price * random.uniform(0.3, 0.45), 2)

        return {
            "id": store_id or str(uuid4())[:8],
            "name": name,
            "cuisine": cuisine,
            "dietary": random.sample(DIETARY_OPTIONS, k=random.randint(0, 2)),
            "priceBucket": random.choice(PRICE_BUCKETS),
            "distanceMi": round(random.uniform(0.1, max(DISTANCE_STEPS_MI)), 1),
            "pickupWindow": random.choice(PICKUP_WINDOWS),
            "pickupDay": random.choice(PICKUP_DAYS),
            "foodType": food_type,
            "rating": round(random.uniform(3.5, 5.0), 1),
            "originalPrice": original_price,
            "discountedPrice": discounted_price,
            "itemsLeft": random.randint(1, 15),
            "image": self.IMAGES[food_type],
            "tag": random.choice([None, None, *STORE_TAGS]),
            "isFavorite": random.random() < 0.2,
        }

    def generate_catalog(self, count: int = 20) -> list[dict]:
        """Generate a mock catalog with sequential store ids."""
        return [self.generate_store(store_id=str(index)) for index in range(1, count + 1)]
