"""
repositories/property_repo.py
------------------------------
Data access layer for properties.
Holds the filtered listing query, the only statement in this layer whose
shape depends on its input.
"""

import math
from typing import Any, Mapping, Optional, Union

from config import DEFAULT_LIST_LIMIT
from db.executor import execute, fetch_one
from db.query_builder import QueryBuilder
from models.property import Property, PropertyFilters
from utils.logger import get_logger
from utils.parsing import parse_float, to_cents

logger = get_logger(__name__)

LISTING_BASE_SQL = """
    SELECT properties.*, AVG(property_reviews.rating) AS average_rating
    FROM properties
    INNER JOIN property_reviews ON property_reviews.property_id = properties.id
"""

# Columns an owner supplies when listing a new property, in insert order.
PROPERTY_INSERT_COLUMNS = (
    "owner_id", "title", "description", "thumbnail_photo_url", "cover_photo_url",
    "cost_per_night", "street", "city", "province", "post_code", "country",
    "parking_spaces", "number_of_bathrooms", "number_of_bedrooms",
)


def _price_in_cents(amount: Any) -> Union[float, str]:
    """
    Convert a price filter to cents without validating it.

    An unparseable price is bound as the text "NaN", which the store
    rejects against the integer `cost_per_night` column.
    """
    cents = to_cents(amount)
    return "NaN" if math.isnan(cents) else cents


def build_property_listing_query(
    filters: PropertyFilters, limit: int = DEFAULT_LIST_LIMIT
) -> tuple[str, list]:
    """
    Compose the listing statement and its positional parameters.

    WHERE-stage filters are applied in a fixed order (city, owner,
    minimum price, maximum price) and only when truthy. Prices are
    compared in cents. `minimum_rating` becomes a HAVING clause on the
    aggregated rating, and is skipped when it does not parse to a
    non-zero number. The limit is always the last parameter.
    """
    query = QueryBuilder(LISTING_BASE_SQL)

    if filters.city:
        query.where("properties.city = %s", filters.city)
    if filters.owner_id:
        query.where("properties.owner_id = %s", filters.owner_id)
    if filters.minimum_price_per_night:
        query.where("properties.cost_per_night >= %s", _price_in_cents(filters.minimum_price_per_night))
    if filters.maximum_price_per_night:
        query.where("properties.cost_per_night <= %s", _price_in_cents(filters.maximum_price_per_night))

    query.group_by("properties.id")

    minimum_rating = parse_float(filters.minimum_rating)
    if not math.isnan(minimum_rating) and minimum_rating:
        query.having("AVG(property_reviews.rating) >= %s", minimum_rating)

    query.order_by("properties.cost_per_night")
    query.limit(limit)
    return query.build()


class PropertyRepository:
    """Repository for listing and inserting properties."""

    def get_all_properties(
        self,
        options: Optional[Union[PropertyFilters, Mapping[str, Any]]] = None,
        limit: int = DEFAULT_LIST_LIMIT,
    ) -> list[Property]:
        """
        List reviewed properties matching `options`, cheapest first.

        Args:
            options: PropertyFilters, or a plain dict with the same keys.
            limit: Maximum number of properties to return.

        Returns:
            Property list, each with `average_rating` set. Empty if nothing
            matches.

        Raises:
            StoreExecutionError: If the query fails.
        """
        filters = options if isinstance(options, PropertyFilters) else PropertyFilters.from_mapping(options)
        sql, params = build_property_listing_query(filters, limit)
        logger.debug(f"Listing query: {sql} params={params}")
        return [self._row_to_property(r) for r in execute(sql, params)]

    def add_property(self, prop: Property) -> Property:
        """
        Insert a new property.

        Args:
            prop: The Property to persist; `cost_per_night` in cents.

        Returns:
            The stored property, with `id` populated.
        """
        sql = f"""
            INSERT INTO properties ({", ".join(PROPERTY_INSERT_COLUMNS)})
            VALUES ({", ".join(["%s"] * len(PROPERTY_INSERT_COLUMNS))})
            RETURNING *;
        """
        params = [getattr(prop, column) for column in PROPERTY_INSERT_COLUMNS]
        row = fetch_one(sql, params, commit=True)
        stored = self._row_to_property(row)
        logger.info(f"Added property #{stored.id} for owner {stored.owner_id}")
        return stored

    @staticmethod
    def _row_to_property(row: dict) -> Property:
        """Convert a result row to a Property; unknown columns are ignored."""
        rating = row.get("average_rating")
        return Property(
            id=row["id"],
            owner_id=row["owner_id"],
            title=row["title"],
            description=row.get("description"),
            thumbnail_photo_url=row.get("thumbnail_photo_url"),
            cover_photo_url=row.get("cover_photo_url"),
            cost_per_night=row["cost_per_night"],
            street=row.get("street"),
            city=row.get("city"),
            province=row.get("province"),
            post_code=row.get("post_code"),
            country=row.get("country"),
            parking_spaces=row.get("parking_spaces") or 0,
            number_of_bathrooms=row.get("number_of_bathrooms") or 0,
            number_of_bedrooms=row.get("number_of_bedrooms") or 0,
            active=row.get("active", True),
            average_rating=float(rating) if rating is not None else None,
        )
