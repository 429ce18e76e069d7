"""Filter engine for the store listing browser."""

import time
from typing import Any, Iterable

import structlog

from src.config import get_settings
from src.metrics import record_filter_evaluation
from src.models.catalog import StoreRecord
from src.models.state import (
    FilterChip,
    FilterFieldError,
    FilterState,
    resolve_field,
    resolve_set_field,
)
from src.search.matcher import is_loose_match
from src.search.normalize import normalize

logger = structlog.get_logger()
settings = get_settings()

_SET_FIELD_PLURALS = {
    "food_types": "food types",
    "diet": "dietary",
    "cuisines": "cuisines",
}


class FilterEngine:
    """Hold the current filter state and apply it to a catalog.

    All mutators replace the state snapshot; a snapshot obtained from
    :attr:`state` is never modified afterwards.
    """

    def __init__(self):
        self._state = FilterState()
        if self.active_filter_count() != 0:
            raise FilterFieldError("Initial filter state must have no active filters")

    @property
    def state(self) -> FilterState:
        """Current filter state snapshot."""
        return self._state

    def set_field(self, field: str, value: Any) -> FilterState:
        """Replace the value of a filter field.

        Args:
            field: Field name or camelCase alias
            value: New value; an empty string unsets a text field

        Returns:
            The new state
        """
        self._state = self._state.replace(field, value)
        logger.debug("filter_set", field=resolve_field(field), value=value)
        return self._state

    def toggle_field(self, field: str, value: Any) -> FilterState:
        """Set a scalar field, or unset it if it already holds ``value``."""
        name = resolve_field(field)
        if getattr(self._state, name) == value:
            return self.clear_field(name)
        return self.set_field(name, value)

    def toggle_set_member(self, field: str, value: str) -> FilterState:
        """Add ``value`` to a multi-select field, or remove it if present.

        Raises:
            FilterFieldError: If the field is not multi-select
        """
        name = resolve_set_field(field)
        current: frozenset[str] = getattr(self._state, name)
        updated = current - {value} if value in current else current | {value}
        self._state = self._state.replace(name, updated)
        logger.debug("filter_toggled", field=name, value=value, selected=value in updated)
        return self._state

    def clear_field(self, field: str) -> FilterState:
        """Reset one field to its unset value."""
        name = resolve_field(field)
        self._state = self._state.replace(name, getattr(FilterState(), name))
        logger.debug("filter_cleared", field=name)
        return self._state

    def clear_all(self) -> FilterState:
        """Reset every field in one step."""
        self._state = FilterState()
        logger.debug("filters_cleared")
        return self._state

    def is_active(self, field: str) -> bool:
        """Check whether a field currently filters the catalog."""
        return self._state.is_active(field)

    def active_filter_count(self) -> int:
        """Count active fields, derived from the current snapshot."""
        return len(self._state.active_fields())

    def active_filter_chips(self) -> list[FilterChip]:
        """Build one removable chip per active field, in display order."""
        state = self._state
        chips = []

        for name in state.active_fields():
            value = getattr(state, name)

            if name == "query":
                max_length = settings.chip_query_max_length
                text = value if len(value) <= max_length else value[:max_length] + "..."
                label = f'"{text}"'
            elif name in _SET_FIELD_PLURALS:
                if len(value) == 1:
                    label = next(iter(value))
                else:
                    label = f"{len(value)} {_SET_FIELD_PLURALS[name]}"
            elif name == "distance":
                label = f"Within {value:g} mi"
            elif name == "price":
                label = f"Price {value}"
            else:
                label = value

            chips.append(FilterChip(key=name, label=label))

        return chips

    def evaluate(self, catalog: Iterable[StoreRecord]) -> list[StoreRecord]:
        """Return the records passing every active filter, in catalog order.

        Args:
            catalog: Store records to filter

        Returns:
            Matching records
        """
        start = time.perf_counter()
        state = self._state

        normalized_query = None
        if state.query is not None:
            normalized_query = normalize(state.query)

        results = [
            record
            for record in catalog
            if _passes(record, state, normalized_query)
        ]

        duration = time.perf_counter() - start
        active_count = self.active_filter_count()
        record_filter_evaluation(
            duration=duration,
            result_count=len(results),
            active_filters=active_count,
            has_query=normalized_query is not None,
        )
        logger.debug(
            "filter_evaluated",
            active_filters=active_count,
            result_count=len(results),
            duration_ms=round(duration * 1000, 3),
        )

        return results


def _passes(record: StoreRecord, state: FilterState, normalized_query: str | None) -> bool:
    """Check one record against every active predicate."""
    if state.pickup_day is not None and record.pickup_day != state.pickup_day:
        return False

    if state.pickup_window is not None and record.pickup_window != state.pickup_window:
        return False

    if state.food_types and record.food_type not in state.food_types:
        return False

    # At least one requested tag, not all of them
    if state.diet and state.diet.isdisjoint(record.dietary):
        return False

    if state.cuisines and record.cuisine not in state.cuisines:
        return False

    if state.distance is not None and record.distance_mi > state.distance:
        return False

    if state.price is not None and record.price_bucket != state.price:
        return False

    # Empty key would be contained in every field
    if normalized_query:
        fields = (record.name, record.cuisine, record.food_type)
        if not any(is_loose_match(normalized_query, normalize(value)) for value in fields):
            return False

    return True
