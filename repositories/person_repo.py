"""
repositories/person_repo.py
---------------------------
Data access layer for persons.
All SQL queries related to the `person` table live here.
"""

import psycopg2

from db.connection import Database
from models.person import Person
from utils.exceptions import ConflictError, ConnectivityError, NotFoundError
from utils.logger import get_logger

logger = get_logger(__name__)

_COLUMNS = "id, name, email, jobId, salaryIndex"


class PersonRepository:
    """Repository for CRUD operations on the person table."""

    def __init__(self, db: Database):
        self.db = db

    # ── CREATE ────────────────────────────────────────────

    def add(self, person: Person) -> Person:
        """
        Insert a new person row.

        Raises:
            ConflictError: If a person with the same id already exists.
            ConnectivityError: On any other database failure.
        """
        sql = f"INSERT INTO person ({_COLUMNS}) VALUES (%s, %s, %s, %s, %s);"
        conn = self.db.get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(sql, (
                    person.id, person.name, person.email,
                    person.job_id, person.salary_index,
                ))
            conn.commit()
            logger.info(f"Added person #{person.id} ({person.name})")
            return person
        except psycopg2.IntegrityError as e:
            if not conn.closed:
                conn.rollback()
            logger.error(f"Duplicate person id {person.id}: {e}")
            raise ConflictError("Person id already used.") from e
        except psycopg2.Error as e:
            if not conn.closed:
                conn.rollback()
            logger.error(f"Failed to add person #{person.id}: {e}")
            raise ConnectivityError(str(e).strip()) from e
        finally:
            self.db.release_connection(conn)

    # ── READ ──────────────────────────────────────────────

    def get_by_id(self, person_id: int) -> Person:
        """
        Fetch a single person by id.

        Raises:
            NotFoundError: If no row matches.
        """
        sql = f"SELECT {_COLUMNS} FROM person WHERE id = %s;"
        conn = self.db.get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(sql, (person_id,))
                row = cur.fetchone()
        except psycopg2.Error as e:
            logger.error(f"Failed to fetch person #{person_id}: {e}")
            raise ConnectivityError(str(e).strip()) from e
        finally:
            self.db.release_connection(conn)

        if row is None:
            raise NotFoundError("No person found with given id.")
        logger.info(f"Retrieved person #{person_id}")
        return self._row_to_person(row)

    def exists(self, person_id: int) -> bool:
        """Return True if a person row with this id exists."""
        sql = "SELECT 1 FROM person WHERE id = %s;"
        conn = self.db.get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(sql, (person_id,))
                return cur.fetchone() is not None
        except psycopg2.Error as e:
            logger.error(f"Failed to probe person #{person_id}: {e}")
            raise ConnectivityError(str(e).strip()) from e
        finally:
            self.db.release_connection(conn)

    def get_all(self) -> list[Person]:
        """Fetch every person, in whatever order the engine returns them."""
        sql = f"SELECT {_COLUMNS} FROM person;"
        conn = self.db.get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(sql)
                persons = [self._row_to_person(r) for r in cur.fetchall()]
        except psycopg2.Error as e:
            logger.error(f"Failed to list persons: {e}")
            raise ConnectivityError(str(e).strip()) from e
        finally:
            self.db.release_connection(conn)
        logger.info(f"Retrieved {len(persons)} person(s)")
        return persons

    # ── UPDATE ────────────────────────────────────────────

    def update_salary_index(self, person_id: int, salary_index: float) -> Person:
        """
        Write a new salary index, then re-read the row.

        Raises:
            NotFoundError: If no row matches.
        """
        sql = "UPDATE person SET salaryIndex = %s WHERE id = %s;"
        conn = self.db.get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(sql, (salary_index, person_id))
                updated = cur.rowcount > 0
            conn.commit()
        except psycopg2.Error as e:
            if not conn.closed:
                conn.rollback()
            logger.error(f"Failed to update salary index of person #{person_id}: {e}")
            raise ConnectivityError(str(e).strip()) from e
        finally:
            self.db.release_connection(conn)

        if not updated:
            raise NotFoundError("No person found with given id.")
        logger.info(f"Updated salary index of person #{person_id} to {salary_index}")
        return self.get_by_id(person_id)

    # ── DELETE ────────────────────────────────────────────

    def delete(self, person_id: int) -> None:
        """
        Delete a person by id.

        Raises:
            NotFoundError: If no row matches.
        """
        self.get_by_id(person_id)
        sql = "DELETE FROM person WHERE id = %s;"
        conn = self.db.get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(sql, (person_id,))
            conn.commit()
            logger.info(f"Deleted person #{person_id}")
        except psycopg2.Error as e:
            if not conn.closed:
                conn.rollback()
            logger.error(f"Failed to delete person #{person_id}: {e}")
            raise ConnectivityError(str(e).strip()) from e
        finally:
            self.db.release_connection(conn)

    # ── HELPERS ───────────────────────────────────────────

    @staticmethod
    def _row_to_person(row: tuple) -> Person:
        """Convert a database row tuple to a Person domain object."""
        return Person(
            id=row[0],
            name=row[1],
            email=row[2],
            job_id=row[3],
            salary_index=float(row[4]),
        )
