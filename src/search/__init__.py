"""Search and filtering over the store catalog."""

from src.search.normalize import normalize
from src.search.matcher import is_loose_match
from src.search.engine import FilterEngine
from src.search.suggestions import suggest

__all__ = [
    "normalize",
    "is_loose_match",
    "FilterEngine",
    "suggest",
]
