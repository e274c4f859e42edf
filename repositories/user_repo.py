"""
repositories/user_repo.py
--------------------------
Data access layer for user records.
"""

from typing import Optional

from db.executor import fetch_one
from models.user import User
from utils.logger import get_logger

logger = get_logger(__name__)


class UserRepository:
    """Repository for lookups and inserts on the users table."""

    def get_user_with_email(self, email: str) -> Optional[User]:
        """
        Fetch a single user by email.

        Returns:
            The User, or None if no account uses that email.
        """
        row = fetch_one("SELECT * FROM users WHERE email = %s;", (email,))
        return self._row_to_user(row) if row else None

    def get_user_with_id(self, user_id: int) -> Optional[User]:
        """Fetch a single user by primary key, or None."""
        row = fetch_one("SELECT * FROM users WHERE id = %s;", (user_id,))
        return self._row_to_user(row) if row else None

    def add_user(self, user: User) -> User:
        """
        Insert a new user.

        Args:
            user: The User to persist; its password must already be hashed.

        Returns:
            The stored user, with `id` populated.

        Raises:
            StoreExecutionError: e.g. when the email is already taken.
        """
        sql = """
            INSERT INTO users (name, email, password)
            VALUES (%s, %s, %s)
            RETURNING *;
        """
        row = fetch_one(sql, (user.name, user.email, user.password), commit=True)
        stored = self._row_to_user(row)
        logger.info(f"Added user #{stored.id}")
        return stored

    @staticmethod
    def _row_to_user(row: dict) -> User:
        return User(
            id=row["id"],
            name=row["name"],
            email=row["email"],
            password=row["password"],
        )
