"""
db/exceptions.py
----------------
Errors raised by the data-access layer.
"""

from typing import Any, Optional, Sequence


class StoreError(Exception):
    """Base class for data-access failures."""


class StoreExecutionError(StoreError):
    """
    A statement failed inside the database (connectivity, constraint
    violation, malformed SQL...).

    Attributes:
        sql: The statement that was sent.
        params: The positional parameters bound to it.
        cause: The underlying driver exception.
    """

    def __init__(
        self,
        message: str,
        sql: Optional[str] = None,
        params: Optional[Sequence[Any]] = None,
        cause: Optional[BaseException] = None,
    ):
        super().__init__(message)
        self.message = message
        self.sql = sql
        self.params = list(params) if params is not None else []
        self.cause = cause
