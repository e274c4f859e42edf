"""
repositories/reservation_repo.py
---------------------------------
Data access layer for a guest's reservations.
"""

from config import DEFAULT_LIST_LIMIT
from db.executor import execute
from models.reservation import ReservationSummary
from utils.logger import get_logger

logger = get_logger(__name__)


class ReservationRepository:
    """Read-only queries over reservations and their properties."""

    def get_all_reservations(
        self, guest_id: int, limit: int = DEFAULT_LIST_LIMIT
    ) -> list[ReservationSummary]:
        """
        Fetch a guest's reservations with the reserved property's title,
        nightly cost and average rating.

        Args:
            guest_id: The guest's user ID.
            limit: Maximum number of reservations to return.

        Returns:
            ReservationSummary list ordered by start date (oldest first).
        """
        sql = """
            SELECT reservations.id, properties.title, reservations.start_date,
                   properties.cost_per_night, AVG(property_reviews.rating) AS average_rating
            FROM properties
            INNER JOIN reservations ON properties.id = reservations.property_id
            JOIN property_reviews ON reservations.id = property_reviews.reservation_id
            WHERE reservations.guest_id = %s
            GROUP BY properties.id, reservations.id
            ORDER BY reservations.start_date
            LIMIT %s;
        """
        rows = execute(sql, (guest_id, limit))
        logger.debug(f"Fetched {len(rows)} reservations for guest {guest_id}")
        return [
            ReservationSummary(
                id=r["id"],
                title=r["title"],
                start_date=r["start_date"],
                cost_per_night=r["cost_per_night"],
                average_rating=float(r["average_rating"]) if r["average_rating"] is not None else None,
            )
            for r in rows
        ]
