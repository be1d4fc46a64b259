"""
db/ - Database Layer
====================
The psycopg2 connection pool wrapper and the `job` / `person` schema.
Repositories borrow connections from here; nothing in this package knows
about services or handlers.
"""
