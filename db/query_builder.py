"""
db/query_builder.py
-------------------
Accumulates optional SQL clauses together with their bound values so that
conditionally skipped filters never shift placeholder positions.
"""

from typing import Any, Optional

PLACEHOLDER = "%s"


class QueryBuilder:
    """
    Structured SELECT assembler.

    Predicates are stored as (template, value) pairs; each template holds
    exactly one ``%s``. `build()` emits clauses in SQL order
    (WHERE, GROUP BY, HAVING, ORDER BY, LIMIT) and the parameters in the
    same order, whatever order the methods were called in.

    Column names and expressions must come from application code, never
    from user input.
    """

    def __init__(self, base_sql: str):
        self.base_sql = base_sql.strip()
        self._where: list[tuple[str, Any]] = []
        self._group_by: list[str] = []
        self._having: list[tuple[str, Any]] = []
        self._order_by: list[str] = []
        self._limit: Optional[Any] = None

    @staticmethod
    def _check(predicate: str) -> None:
        if predicate.count(PLACEHOLDER) != 1:
            raise ValueError(f"Predicate must contain exactly one placeholder: {predicate!r}")

    def where(self, predicate: str, value: Any) -> "QueryBuilder":
        self._check(predicate)
        self._where.append((predicate, value))
        return self

    def group_by(self, expression: str) -> "QueryBuilder":
        self._group_by.append(expression)
        return self

    def having(self, predicate: str, value: Any) -> "QueryBuilder":
        self._check(predicate)
        self._having.append((predicate, value))
        return self

    def order_by(self, expression: str) -> "QueryBuilder":
        self._order_by.append(expression)
        return self

    def limit(self, value: Any) -> "QueryBuilder":
        self._limit = value
        return self

    def build(self) -> tuple[str, list]:
        """Return the final statement and its ordered parameter list."""
        parts = [self.base_sql]
        params: list = []

        if self._where:
            parts.append("WHERE " + " AND ".join(p for p, _ in self._where))
            params.extend(v for _, v in self._where)
        if self._group_by:
            parts.append("GROUP BY " + ", ".join(self._group_by))
        if self._having:
            parts.append("HAVING " + " AND ".join(p for p, _ in self._having))
            params.extend(v for _, v in self._having)
        if self._order_by:
            parts.append("ORDER BY " + ", ".join(self._order_by))
        if self._limit is not None:
            parts.append(f"LIMIT {PLACEHOLDER}")
            params.append(self._limit)

        return "\n".join(parts) + ";", params
