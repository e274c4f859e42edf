"""
models/property.py
------------------
Domain model for rental properties and the listing filter options.
"""

from dataclasses import dataclass, fields
from typing import Any, Mapping, Optional, Union

Number = Union[str, int, float]


@dataclass
class Property:
    """
    A rental property.

    Attributes:
        owner_id: User who lists the property.
        title: Listing headline.
        cost_per_night: Nightly price in cents.
        average_rating: Mean review rating; only set by listing queries.
        id: Database primary key (None for new records).
    """
    owner_id: int
    title: str
    cost_per_night: int
    description: Optional[str] = None
    thumbnail_photo_url: Optional[str] = None
    cover_photo_url: Optional[str] = None
    street: Optional[str] = None
    city: Optional[str] = None
    province: Optional[str] = None
    post_code: Optional[str] = None
    country: Optional[str] = None
    parking_spaces: int = 0
    number_of_bathrooms: int = 0
    number_of_bedrooms: int = 0
    active: bool = True
    average_rating: Optional[float] = None
    id: Optional[int] = None

    @property
    def price_per_night(self) -> float:
        """Nightly price in whole currency units."""
        return self.cost_per_night / 100

    def __str__(self) -> str:
        return f"{self.title} ({self.city}) - {self.price_per_night:.2f}/night"


@dataclass
class PropertyFilters:
    """
    Optional filters for the property listing.

    Prices are in whole currency units and ratings on the review scale;
    both may be given as text straight from a query string.
    """
    city: Optional[str] = None
    owner_id: Optional[Union[int, str]] = None
    minimum_price_per_night: Optional[Number] = None
    maximum_price_per_night: Optional[Number] = None
    minimum_rating: Optional[Number] = None

    @classmethod
    def from_mapping(cls, options: Optional[Mapping[str, Any]]) -> "PropertyFilters":
        """Build filters from a plain dict, ignoring keys it does not know."""
        if not options:
            return cls()
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in options.items() if k in known})
