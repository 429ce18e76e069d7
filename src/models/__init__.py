"""Data models for the store listing browser."""

from src.models.catalog import StoreRecord
from src.models.state import (
    FilterChip,
    FilterFieldError,
    FilterState,
    Suggestion,
)

__all__ = [
    # Catalog models
    "StoreRecord",
    # State models
    "FilterState",
    "FilterChip",
    "FilterFieldError",
    "Suggestion",
]
