"""Filter state models for the listing browser."""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator


SuggestionType = Literal["name", "cuisine", "food"]

TEXT_FIELDS = ("query", "pickup_day", "pickup_window", "price")
SET_FIELDS = ("food_types", "diet", "cuisines")
FIELD_ORDER = (
    "query",
    "pickup_day",
    "pickup_window",
    "food_types",
    "diet",
    "cuisines",
    "distance",
    "price",
)


class FilterFieldError(ValueError):
    """Raised when a filter field name or operation is not valid."""


class FilterState(BaseModel):
    """Snapshot of every filter the user can set.

    Scalar fields use ``None`` for "no filter" and set fields use an empty
    frozenset. Snapshots are immutable; the engine replaces them wholesale.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    query: str | None = None
    pickup_day: str | None = Field(default=None, alias="pickupDay")
    pickup_window: str | None = Field(default=None, alias="pickupWindow")
    food_types: frozenset[str] = Field(default_factory=frozenset, alias="foodTypes")
    diet: frozenset[str] = Field(default_factory=frozenset)
    cuisines: frozenset[str] = Field(default_factory=frozenset)
    distance: float | None = None
    price: str | None = None

    @field_validator(*TEXT_FIELDS, mode="before")
    @classmethod
    def _empty_text_is_unset(cls, value: Any) -> Any:
        # The UI clears a selector by sending an empty string
        if value == "":
            return None
        return value

    @field_validator(*SET_FIELDS, mode="before")
    @classmethod
    def _none_is_empty_set(cls, value: Any) -> Any:
        if value is None:
            return frozenset()
        return value

    def is_active(self, field: str) -> bool:
        """Check whether a field differs from its unset value."""
        value = getattr(self, resolve_field(field))
        if isinstance(value, frozenset):
            return len(value) > 0
        return value is not None

    def active_fields(self) -> list[str]:
        """Names of active fields, in display order."""
        return [name for name in FIELD_ORDER if self.is_active(name)]

    def replace(self, field: str, value: Any) -> "FilterState":
        """Return a validated copy with one field replaced."""
        data = self.model_dump()
        data[resolve_field(field)] = value
        return FilterState.model_validate(data)


class FilterChip(BaseModel):
    """A removable label for one active filter."""

    key: str
    label: str


class Suggestion(BaseModel):
    """A search-as-you-type suggestion."""

    text: str
    type: SuggestionType


_ALIASES = {
    info.alias: name
    for name, info in FilterState.model_fields.items()
    if info.alias
}


def resolve_field(field: str) -> str:
    """Map a field name or its camelCase alias to the model field name.

    Raises:
        FilterFieldError: If the name is not a filter field
    """
    if field in FilterState.model_fields:
        return field
    if field in _ALIASES:
        return _ALIASES[field]
    raise FilterFieldError(f"Unknown filter field: {field!r}")


def resolve_set_field(field: str) -> str:
    """Like :func:`resolve_field` but only accepts set-valued fields."""
    name = resolve_field(field)
    if name not in SET_FIELDS:
        raise FilterFieldError(f"Filter field {field!r} is not a multi-select field")
    return name
