"""
db/ - Database Layer
====================
Connection pool, the parameterized-statement executor, the clause
accumulator used for dynamic queries, and the store error types.
This layer has no dependencies on the other layers.
"""
