"""
db/init_db.py
-------------
Creates the database schema (tables) if they do not already exist.
Run this module directly to initialize a fresh database:
    python -m db.init_db
"""

import psycopg2

from db.connection import Database
from utils.exceptions import ConnectivityError
from utils.logger import get_logger

logger = get_logger(__name__)

SCHEMA_SQL = """
-- Jobs: caller-assigned id, base salary never below 500
CREATE TABLE IF NOT EXISTS job (
    id              INTEGER PRIMARY KEY,
    name            VARCHAR(100) NOT NULL,
    domain          VARCHAR(100) NOT NULL,
    baseSalary      DOUBLE PRECISION NOT NULL
);

-- Persons: jobId is deliberately not a foreign key
CREATE TABLE IF NOT EXISTS person (
    id              INTEGER PRIMARY KEY,
    name            VARCHAR(100) NOT NULL,
    email           VARCHAR(150) NOT NULL,
    jobId           INTEGER NOT NULL,
    salaryIndex     DOUBLE PRECISION NOT NULL
);
"""


def create_tables(db: Database) -> None:
    """
    Execute the schema SQL to create all tables.
    Safe to call multiple times (uses IF NOT EXISTS).
    """
    conn = db.get_connection()
    try:
        with conn.cursor() as cur:
            cur.execute(SCHEMA_SQL)
        conn.commit()
        logger.info("Database schema initialized successfully.")
    except psycopg2.Error as e:
        if not conn.closed:
            conn.rollback()
        logger.error(f"Failed to initialize schema: {e}")
        raise ConnectivityError(str(e).strip()) from e
    finally:
        db.release_connection(conn)


if __name__ == "__main__":
    from config import DATABASE_URL
    database = Database(DATABASE_URL)
    create_tables(database)
    database.close()
    print("Database schema created successfully.")
