"""
db/connection.py
----------------
Owns the PostgreSQL connection pool.
Uses psycopg2's ThreadedConnectionPool, since Flask serves requests from
several threads; one Database object is created at start-up and handed to
every repository.
"""

import threading

import psycopg2
from psycopg2 import pool

from utils.exceptions import ConnectivityError
from utils.logger import get_logger

logger = get_logger(__name__)


class Database:
    """Thin wrapper around a thread-safe psycopg2 connection pool."""

    def __init__(self, dsn: str, min_conn: int = 1, max_conn: int = 5):
        self.dsn = dsn
        self.min_conn = min_conn
        self.max_conn = max_conn
        self._pool: pool.ThreadedConnectionPool | None = None
        self._lock = threading.Lock()

    def open(self) -> None:
        """
        Initialize the connection pool. Safe to call more than once,
        and from several threads at once.

        Raises:
            ConnectivityError: If the database is unreachable.
        """
        with self._lock:
            if self._pool is not None:
                return
            try:
                self._pool = pool.ThreadedConnectionPool(self.min_conn, self.max_conn, self.dsn)
                logger.info("Database connection pool initialized successfully.")
            except psycopg2.Error as e:
                logger.error(f"Failed to initialize database pool: {e}")
                raise ConnectivityError(str(e).strip()) from e

    def get_connection(self):
        """
        Get a connection from the pool, opening the pool on first use.

        Returns:
            A psycopg2 connection object.

        Raises:
            ConnectivityError: If no connection can be obtained.
        """
        if self._pool is None:
            self.open()
        try:
            return self._pool.getconn()
        except psycopg2.Error as e:
            logger.error(f"Failed to get a database connection: {e}")
            raise ConnectivityError(str(e).strip()) from e

    def release_connection(self, conn) -> None:
        """Return a connection back to the pool."""
        if self._pool is not None and conn is not None:
            self._pool.putconn(conn)

    def close(self) -> None:
        """Close all connections in the pool."""
        with self._lock:
            if self._pool is not None:
                self._pool.closeall()
                self._pool = None
                logger.info("Database connection pool closed.")
