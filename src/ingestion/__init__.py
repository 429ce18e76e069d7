"""Catalog loading."""

from src.ingestion.loader import CatalogLoader, toggle_favorite

__all__ = [
    "CatalogLoader",
    "toggle_favorite",
]
