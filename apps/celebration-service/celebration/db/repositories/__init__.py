"""
Per-table repository modules for database access.

Each module owns one table and exposes one insert and one ordered,
paginated select.
"""
