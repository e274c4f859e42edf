"""
db/executor.py
--------------
The single primitive every repository goes through: run a parameterized
statement on a pooled connection and hand back its rows as dicts.
"""

from typing import Any, Optional, Sequence

import psycopg2
from psycopg2.extras import RealDictCursor

from db.connection import get_connection, release_connection
from db.exceptions import StoreExecutionError
from utils.logger import get_logger

logger = get_logger(__name__)


def execute(sql: str, params: Sequence[Any] = (), commit: bool = False) -> list[dict]:
    """
    Execute `sql` with positional `params` and return every resulting row.

    Values are bound by the driver, never formatted into the statement.

    Args:
        sql: Statement using ``%s`` placeholders.
        params: Values bound to the placeholders, in order.
        commit: Commit the transaction on success (for writes).

    Returns:
        A list of column-name -> value dicts; empty when the statement
        produces no rows.

    Raises:
        StoreExecutionError: If the pool is exhausted, the connection is
            lost, or the database rejects the statement.
    """
    conn = None
    broken = False
    try:
        conn = get_connection()
        with conn.cursor(cursor_factory=RealDictCursor) as cur:
            cur.execute(sql, params)
            rows = [dict(r) for r in cur.fetchall()] if cur.description else []
        if commit:
            conn.commit()
        else:
            conn.rollback()
        return rows
    except psycopg2.Error as e:
        if conn is not None:
            broken = not _rollback_quietly(conn)
        logger.error(f"Query failed: {e}")
        raise StoreExecutionError(str(e).strip(), sql=sql, params=params, cause=e) from e
    finally:
        if conn is not None:
            release_connection(conn, close=broken or bool(conn.closed))


def _rollback_quietly(conn) -> bool:
    """Roll back after a failure; False means the connection is unusable."""
    if conn.closed:
        return False
    try:
        conn.rollback()
        return True
    except psycopg2.Error as e:
        logger.warning(f"Rollback failed, discarding connection: {e}")
        return False


def fetch_one(sql: str, params: Sequence[Any] = (), commit: bool = False) -> Optional[dict]:
    """Like `execute`, but return only the first row (or None)."""
    rows = execute(sql, params, commit=commit)
    return rows[0] if rows else None
