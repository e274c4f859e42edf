"""
db/connection.py
----------------
Owns the PostgreSQL connection pool shared by every repository.
Uses psycopg2's ThreadedConnectionPool so concurrent callers can borrow
connections independently.
"""

from typing import Optional

import psycopg2
from psycopg2 import pool

from config import DATABASE_URL, DB_POOL_MAX, DB_POOL_MIN
from utils.logger import get_logger

logger = get_logger(__name__)

_pool: Optional[pool.ThreadedConnectionPool] = None


def init_pool(
    min_conn: int = DB_POOL_MIN,
    max_conn: int = DB_POOL_MAX,
    dsn: str = DATABASE_URL,
) -> None:
    """
    Open the connection pool. Calling it again while open is a no-op.

    Raises:
        psycopg2.OperationalError: If the database is unreachable.
    """
    global _pool
    if _pool is not None:
        return
    try:
        _pool = pool.ThreadedConnectionPool(min_conn, max_conn, dsn)
        logger.info(f"Connection pool opened ({min_conn}-{max_conn} connections).")
    except psycopg2.OperationalError as e:
        logger.error(f"Failed to open connection pool: {e}")
        raise


def get_connection():
    """
    Borrow a connection from the pool.

    Raises:
        RuntimeError: If `init_pool()` has not been called.
        psycopg2.pool.PoolError: If every connection is already borrowed.
    """
    if _pool is None:
        raise RuntimeError("Database pool not initialized. Call init_pool() first.")
    return _pool.getconn()


def release_connection(conn, close: bool = False) -> None:
    """
    Hand a borrowed connection back to the pool.

    Args:
        conn: The connection from `get_connection()`.
        close: Close it instead of keeping it for reuse (e.g. after the
            server dropped it).
    """
    if _pool is not None:
        _pool.putconn(conn, close=close)


def close_pool() -> None:
    """Close every pooled connection."""
    global _pool
    if _pool is not None:
        _pool.closeall()
        _pool = None
        logger.info("Connection pool closed.")
