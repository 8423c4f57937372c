"""Domain-level rules: payload shapes and the results data access reports.

Nothing here touches HTTP or the database session.
"""
