"""
repositories/ - Data Access Layer
==================================
Each repository encapsulates the SQL for one entity and maps result rows
to domain model objects.
"""
