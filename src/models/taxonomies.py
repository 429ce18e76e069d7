"""Option lists offered by the listing filters.

These are the values the browser presents as choices. Filtering compares
plain strings, so records carrying values outside these lists are still valid.
"""

CUISINES = (
    "Italian",
    "Mexican",
    "Japanese",
    "Chinese",
    "Indian",
    "Thai",
    "Mediterranean",
    "French",
    "American",
    "Korean",
    "Vietnamese",
    "Turkish",
    "Greek",
    "Lebanese",
    "Moroccan",
)

DIETARY_OPTIONS = (
    "Vegetarian",
    "Vegan",
    "Gluten-free",
    "Dairy-free",
    "Nut-free",
    "Halal",
    "Kosher",
)

FOOD_TYPES = (
    "Meals",
    "Bakery",
    "Groceries",
    "Flowers",
    "Pet food",
    "Other",
)

PICKUP_DAYS = ("Today", "Tomorrow")

PICKUP_WINDOWS = ("Morning", "Lunch", "Evening", "Late Night")

# Ordered cheapest first
PRICE_BUCKETS = ("$", "$$", "$$$")

DISTANCE_STEPS_MI = (0.5, 1.0, 1.5, 2.0, 2.5, 3.0, 3.5, 4.0, 4.5, 5.0)

STORE_TAGS = ("New", "1 left", "Popular")
