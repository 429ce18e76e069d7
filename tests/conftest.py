"""Shared fixtures for the listing filter tests."""

import pytest

from src.models.catalog import StoreRecord


@pytest.fixture
def sample_store_data() -> list[dict]:
    """Sample store listings in the catalog payload shape."""
    return [
        {
            "id": "1",
            "name": "Bella Vista Italian",
            "cuisine": "Italian",
            "dietary": ["Vegetarian"],
            "priceBucket": "$$",
            "distanceMi": 0.8,
            "pickupWindow": "Evening",
            "pickupDay": "Today",
            "foodType": "Meals",
            "rating": 4.5,
            "originalPrice": 15.99,
            "discountedPrice": 5.99,
            "itemsLeft": 3,
            "image": "🍝",
            "tag": None,
            "isFavorite": True,
        },
        {
            "id": "2",
            "name": "Golden Dragon",
            "cuisine": "Chinese",
            "dietary": ["Vegan", "Gluten-free"],
            "priceBucket": "$",
            "distanceMi": 1.2,
            "pickupWindow": "Lunch",
            "pickupDay": "Today",
            "foodType": "Meals",
            "rating": 4.2,
            "tag": "Popular",
        },
        {
            "id": "3",
            "name": "Fresh Bakehouse",
            "cuisine": "French",
            "dietary": ["Vegetarian"],
            "priceBucket": "$",
            "distanceMi": 0.5,
            "pickupWindow": "Morning",
            "pickupDay": "Tomorrow",
            "foodType": "Bakery",
            "tag": "New",
        },
        {
            "id": "4",
            "name": "Spice Garden Indian",
            "cuisine": "Indian",
            "dietary": ["Vegan", "Vegetarian"],
            "priceBucket": "$$",
            "distanceMi": 2.1,
            "pickupWindow": "Evening",
            "pickupDay": "Today",
            "foodType": "Meals",
        },
        {
            "id": "5",
            "name": "Tokyo Sushi Bar",
            "cuisine": "Japanese",
            "dietary": ["Gluten-free"],
            "priceBucket": "$$$",
            "distanceMi": 1.8,
            "pickupWindow": "Lunch",
            "pickupDay": "Tomorrow",
            "foodType": "Meals",
            "tag": "1 left",
        },
        {
            "id": "6",
            "name": "Corner Grocery",
            "cuisine": "American",
            "dietary": [],
            "priceBucket": "$",
            "distanceMi": 0.3,
            "pickupWindow": "Late Night",
            "pickupDay": "Today",
            "foodType": "Groceries",
        },
        {
            "id": "7",
            "name": "Mediterranean Delights",
            "cuisine": "Mediterranean",
            "dietary": ["Vegan", "Gluten-free"],
            "priceBucket": "$$",
            "distanceMi": 1.5,
            "pickupWindow": "Lunch",
            "pickupDay": "Today",
            "foodType": "Meals",
        },
        {
            "id": "8",
            "name": "Flower Power",
            "cuisine": "Other",
            "dietary": [],
            "priceBucket": "$",
            "distanceMi": 0.9,
            "pickupWindow": "Morning",
            "pickupDay": "Tomorrow",
            "foodType": "Flowers",
        },
        {
            "id": "9",
            "name": "Taco Fiesta",
            "cuisine": "Mexican",
            "dietary": ["Vegetarian"],
            "priceBucket": "$",
            "distanceMi": 1.1,
            "pickupWindow": "Evening",
            "pickupDay": "Today",
            "foodType": "Meals",
        },
    ]


@pytest.fixture
def sample_catalog(sample_store_data) -> list[StoreRecord]:
    """Sample store listings as validated records."""
    return [StoreRecord.model_validate(item) for item in sample_store_data]
