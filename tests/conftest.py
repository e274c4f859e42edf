"""
Shared fixtures: a fake psycopg2 connection wired into the executor so
repositories can be exercised without a running PostgreSQL.
"""

from decimal import Decimal
from unittest.mock import MagicMock

import pytest

import db.executor


@pytest.fixture
def fake_pool(monkeypatch):
    """Stand-in for the pool: `getconn` hands out one MagicMock connection."""
    conn = MagicMock(name="connection")
    conn.closed = 0
    cursor = MagicMock(name="cursor")
    cursor.description = [("id",)]
    cursor.fetchall.return_value = []
    conn.cursor.return_value.__enter__.return_value = cursor

    pool = MagicMock(name="pool")
    pool.getconn.return_value = conn
    monkeypatch.setattr(db.executor, "get_connection", pool.getconn)
    monkeypatch.setattr(db.executor, "release_connection", pool.putconn)
    return pool


@pytest.fixture
def fake_conn(fake_pool):
    """The connection handed out by `fake_pool`."""
    return fake_pool.getconn.return_value


@pytest.fixture
def fake_cursor(fake_conn):
    """The cursor handed out by `fake_conn`."""
    return fake_conn.cursor.return_value.__enter__.return_value


def executed(cursor):
    """Return the (sql, params) of the cursor's last execute call."""
    sql, params = cursor.execute.call_args.args
    return sql, list(params)


@pytest.fixture
def property_row():
    return {
        "id": 7,
        "owner_id": 3,
        "title": "Lakeside cabin",
        "description": "Quiet and cosy",
        "thumbnail_photo_url": "https://img.example/t.jpg",
        "cover_photo_url": "https://img.example/c.jpg",
        "cost_per_night": 12500,
        "parking_spaces": 2,
        "number_of_bathrooms": 1,
        "number_of_bedrooms": 3,
        "country": "Canada",
        "street": "1 Shore Rd",
        "city": "Vancouver",
        "province": "BC",
        "post_code": "V5K 0A1",
        "active": True,
        "average_rating": Decimal("4.2500000000000000"),
    }
