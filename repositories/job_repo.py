"""
repositories/job_repo.py
------------------------
Data access layer for jobs.
All SQL queries related to the `job` table live here.
"""

import psycopg2

from db.connection import Database
from models.job import Job
from utils.exceptions import ConflictError, ConnectivityError, NotFoundError
from utils.logger import get_logger

logger = get_logger(__name__)

_COLUMNS = "id, name, domain, baseSalary"


class JobRepository:
    """Repository for CRUD operations on the job table."""

    def __init__(self, db: Database):
        self.db = db

    # ── CREATE ────────────────────────────────────────────

    def add(self, job: Job) -> Job:
        """
        Insert a new job row.

        Args:
            job: The Job to persist; its id is supplied by the caller.

        Returns:
            The same Job.

        Raises:
            ConflictError: If a job with the same id already exists.
            ConnectivityError: On any other database failure.
        """
        sql = f"INSERT INTO job ({_COLUMNS}) VALUES (%s, %s, %s, %s);"
        conn = self.db.get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(sql, (job.id, job.name, job.domain, job.base_salary))
            conn.commit()
            logger.info(f"Added job #{job.id} ({job.name})")
            return job
        except psycopg2.IntegrityError as e:
            if not conn.closed:
                conn.rollback()
            logger.error(f"Duplicate job id {job.id}: {e}")
            raise ConflictError("Job id already used.") from e
        except psycopg2.Error as e:
            if not conn.closed:
                conn.rollback()
            logger.error(f"Failed to add job #{job.id}: {e}")
            raise ConnectivityError(str(e).strip()) from e
        finally:
            self.db.release_connection(conn)

    # ── READ ──────────────────────────────────────────────

    def get_by_id(self, job_id: int) -> Job:
        """
        Fetch a single job by id.

        Raises:
            NotFoundError: If no row matches.
        """
        sql = f"SELECT {_COLUMNS} FROM job WHERE id = %s;"
        conn = self.db.get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(sql, (job_id,))
                row = cur.fetchone()
        except psycopg2.Error as e:
            logger.error(f"Failed to fetch job #{job_id}: {e}")
            raise ConnectivityError(str(e).strip()) from e
        finally:
            self.db.release_connection(conn)

        if row is None:
            raise NotFoundError("No job was found in the database with the given id.")
        logger.info(f"Retrieved job #{job_id}")
        return self._row_to_job(row)

    def exists(self, job_id: int) -> bool:
        """Return True if a job row with this id exists."""
        sql = "SELECT 1 FROM job WHERE id = %s;"
        conn = self.db.get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(sql, (job_id,))
                return cur.fetchone() is not None
        except psycopg2.Error as e:
            logger.error(f"Failed to probe job #{job_id}: {e}")
            raise ConnectivityError(str(e).strip()) from e
        finally:
            self.db.release_connection(conn)

    def get_all(self) -> list[Job]:
        """
        Fetch every job, in whatever order the engine returns them.

        Returns:
            List of Job objects (possibly empty).
        """
        sql = f"SELECT {_COLUMNS} FROM job;"
        conn = self.db.get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(sql)
                jobs = [self._row_to_job(r) for r in cur.fetchall()]
        except psycopg2.Error as e:
            logger.error(f"Failed to list jobs: {e}")
            raise ConnectivityError(str(e).strip()) from e
        finally:
            self.db.release_connection(conn)
        logger.info(f"Retrieved {len(jobs)} job(s)")
        return jobs

    # ── UPDATE ────────────────────────────────────────────

    def update_base_salary(self, job_id: int, base_salary: float) -> Job:
        """
        Write a new base salary, then re-read the row.

        Returns:
            The updated Job.

        Raises:
            NotFoundError: If no row matches.
        """
        sql = "UPDATE job SET baseSalary = %s WHERE id = %s;"
        conn = self.db.get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(sql, (base_salary, job_id))
                updated = cur.rowcount > 0
            conn.commit()
        except psycopg2.Error as e:
            if not conn.closed:
                conn.rollback()
            logger.error(f"Failed to update base salary of job #{job_id}: {e}")
            raise ConnectivityError(str(e).strip()) from e
        finally:
            self.db.release_connection(conn)

        if not updated:
            raise NotFoundError("No job was found in the database with the given id.")
        logger.info(f"Updated base salary of job #{job_id} to {base_salary}")
        return self.get_by_id(job_id)

    # ── DELETE ────────────────────────────────────────────

    def delete(self, job_id: int) -> None:
        """
        Delete a job by id.

        Raises:
            NotFoundError: If no row matches.
        """
        self.get_by_id(job_id)
        sql = "DELETE FROM job WHERE id = %s;"
        conn = self.db.get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(sql, (job_id,))
            conn.commit()
            logger.info(f"Deleted job #{job_id}")
        except psycopg2.Error as e:
            if not conn.closed:
                conn.rollback()
            logger.error(f"Failed to delete job #{job_id}: {e}")
            raise ConnectivityError(str(e).strip()) from e
        finally:
            self.db.release_connection(conn)

    # ── HELPERS ───────────────────────────────────────────

    @staticmethod
    def _row_to_job(row: tuple) -> Job:
        """Convert a database row tuple to a Job domain object."""
        return Job(
            id=row[0],
            name=row[1],
            domain=row[2],
            base_salary=float(row[3]),
        )
