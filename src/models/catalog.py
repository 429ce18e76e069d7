"""Catalog record models matching the store listing payload."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


StoreTag = Literal["New", "1 left", "Popular"]


class StoreRecord(BaseModel):
    """A single store listing in the catalog.

    Only identity, name, cuisine, dietary tags, food type, price bucket,
    distance and pickup slot take part in filtering. The remaining
    attributes are display data carried through unchanged.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    name: str
    cuisine: str
    dietary: list[str] = Field(default_factory=list)
    food_type: str = Field(alias="foodType")
    price_bucket: str = Field(alias="priceBucket")
    distance_mi: float = Field(alias="distanceMi")
    pickup_day: str = Field(alias="pickupDay")
    pickup_window: str = Field(alias="pickupWindow")

    # Display attributes
    rating: float | None = None
    original_price: float | None = Field(default=None, alias="originalPrice")
    discounted_price: float | None = Field(default=None, alias="discountedPrice")
    items_left: int | None = Field(default=None, alias="itemsLeft")
    image: str | None = None
    img: str | None = None
    tag: StoreTag | None = None
    is_favorite: bool = Field(default=False, alias="isFavorite")
