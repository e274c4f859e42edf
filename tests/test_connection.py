"""
Tests for the connection pool lifecycle.
"""

from unittest.mock import MagicMock, patch

import psycopg2
import pytest

import db.connection as connection_mod


@pytest.fixture(autouse=True)
def reset_pool(monkeypatch):
    monkeypatch.setattr(connection_mod, "_pool", None)


class TestConnectionPool:

    def test_get_connection_before_init_raises(self):
        with pytest.raises(RuntimeError):
            connection_mod.get_connection()

    @patch("db.connection.pool.ThreadedConnectionPool")
    def test_init_pool_is_idempotent(self, pool_cls):
        connection_mod.init_pool(1, 3, "postgresql://u:p@h:5432/lightbnb")
        connection_mod.init_pool(1, 3, "postgresql://u:p@h:5432/lightbnb")

        pool_cls.assert_called_once_with(1, 3, "postgresql://u:p@h:5432/lightbnb")

    @patch("db.connection.pool.ThreadedConnectionPool")
    def test_init_pool_failure_propagates(self, pool_cls):
        pool_cls.side_effect = psycopg2.OperationalError("could not connect")

        with pytest.raises(psycopg2.OperationalError):
            connection_mod.init_pool()
        assert connection_mod._pool is None

    @patch("db.connection.pool.ThreadedConnectionPool")
    def test_borrow_and_release(self, pool_cls):
        fake_pool = pool_cls.return_value
        conn = MagicMock()
        fake_pool.getconn.return_value = conn
        connection_mod.init_pool()

        assert connection_mod.get_connection() is conn
        connection_mod.release_connection(conn)

        fake_pool.putconn.assert_called_once_with(conn, close=False)

    @patch("db.connection.pool.ThreadedConnectionPool")
    def test_release_broken_connection_closes_it(self, pool_cls):
        conn = MagicMock()
        connection_mod.init_pool()

        connection_mod.release_connection(conn, close=True)

        pool_cls.return_value.putconn.assert_called_once_with(conn, close=True)

    @patch("db.connection.pool.ThreadedConnectionPool")
    def test_close_pool(self, pool_cls):
        connection_mod.init_pool()

        connection_mod.close_pool()

        pool_cls.return_value.closeall.assert_called_once()
        assert connection_mod._pool is None
        with pytest.raises(RuntimeError):
            connection_mod.get_connection()
