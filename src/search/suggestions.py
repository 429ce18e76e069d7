"""Search-as-you-type suggestions over the catalog."""

from typing import Iterable

import structlog

from src.config import get_settings
from src.metrics import record_suggestion_request
from src.models.catalog import StoreRecord
from src.models.state import Suggestion
from src.search.matcher import is_loose_match
from src.search.normalize import normalize

logger = structlog.get_logger()
settings = get_settings()


def suggest(
    query: str,
    catalog: Iterable[StoreRecord],
    limit: int | None = None,
) -> list[Suggestion]:
    """Suggest store names, cuisines and food types for a partial query.

    Each distinct display text appears once. When the same text matches as
    more than one kind (a store called "Thai" with cuisine "Thai"), the last
    kind seen wins but the first position is kept.

    Args:
        query: Raw text typed by the user
        catalog: Store records to draw suggestions from
        limit: Maximum number of suggestions

    Returns:
        Suggestions in catalog order
    """
    limit = limit or settings.suggestion_limit

    if not query.strip():
        return []

    normalized_query = normalize(query)
    found: dict[str, Suggestion] = {}

    for record in catalog:
        candidates = (
            (record.name, "name"),
            (record.cuisine, "cuisine"),
            (record.food_type, "food"),
        )
        for text, kind in candidates:
            if is_loose_match(normalized_query, normalize(text)):
                found[text] = Suggestion(text=text, type=kind)

    suggestions = list(found.values())[:limit]

    record_suggestion_request(len(suggestions))
    logger.debug("suggestions_built", query=query, suggestion_count=len(suggestions))

    return suggestions
