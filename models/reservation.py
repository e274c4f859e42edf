"""
models/reservation.py
---------------------
Read model for a guest's reservation list.
"""

from dataclasses import dataclass
from datetime import date
from typing import Optional


@dataclass
class ReservationSummary:
    """
    One reservation joined with the booked property's headline data.

    Attributes:
        id: Reservation primary key.
        title: Title of the reserved property.
        start_date: First night of the stay.
        cost_per_night: Nightly price in cents.
        average_rating: Mean review rating of the property.
    """
    id: int
    title: str
    start_date: date
    cost_per_night: int
    average_rating: Optional[float] = None
