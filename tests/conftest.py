"""
Pytest configuration and shared fixtures.

Service, handler and console tests run against in-memory repositories that
honour the same contract as the SQL ones (NotFoundError / ConflictError).
Repository tests use a mocked psycopg2 connection instead.
"""

from unittest.mock import MagicMock

import pytest

from handlers import create_app
from models.job import Job
from models.person import Person
from services.job_service import JobService
from services.person_manager import PersonManager
from services.person_service import PersonService
from utils.exceptions import ConflictError, NotFoundError


class InMemoryJobRepository:
    """Dict-backed stand-in for JobRepository."""

    def __init__(self):
        self.rows: dict[int, Job] = {}

    def add(self, job: Job) -> Job:
        if job.id in self.rows:
            raise ConflictError("Job id already used.")
        self.rows[job.id] = Job(**vars(job))
        return job

    def get_by_id(self, job_id: int) -> Job:
        if job_id not in self.rows:
            raise NotFoundError("No job was found in the database with the given id.")
        return Job(**vars(self.rows[job_id]))

    def exists(self, job_id: int) -> bool:
        return job_id in self.rows

    def get_all(self) -> list[Job]:
        return [Job(**vars(j)) for j in self.rows.values()]

    def update_base_salary(self, job_id: int, base_salary: float) -> Job:
        self.get_by_id(job_id)
        self.rows[job_id].base_salary = base_salary
        return self.get_by_id(job_id)

    def delete(self, job_id: int) -> None:
        self.get_by_id(job_id)
        del self.rows[job_id]


class InMemoryPersonRepository:
    """Dict-backed stand-in for PersonRepository."""

    def __init__(self):
        self.rows: dict[int, Person] = {}

    def add(self, person: Person) -> Person:
        if person.id in self.rows:
            raise ConflictError("Person id already used.")
        self.rows[person.id] = Person(**vars(person))
        return person

    def get_by_id(self, person_id: int) -> Person:
        if person_id not in self.rows:
            raise NotFoundError("No person found with given id.")
        return Person(**vars(self.rows[person_id]))

    def exists(self, person_id: int) -> bool:
        return person_id in self.rows

    def get_all(self) -> list[Person]:
        return [Person(**vars(p)) for p in self.rows.values()]

    def update_salary_index(self, person_id: int, salary_index: float) -> Person:
        self.get_by_id(person_id)
        self.rows[person_id].salary_index = salary_index
        return self.get_by_id(person_id)

    def delete(self, person_id: int) -> None:
        self.get_by_id(person_id)
        del self.rows[person_id]


@pytest.fixture
def engineer() -> Job:
    """Valid job used across tests."""
    return Job(id=501, name="Engineer", domain="Tech", base_salary=3000.0)


@pytest.fixture
def ana() -> Person:
    """Valid person holding the engineer job."""
    return Person(id=901, name="Ana", email="ana@x.com", job_id=501, salary_index=2.0)


@pytest.fixture
def job_repo() -> InMemoryJobRepository:
    return InMemoryJobRepository()


@pytest.fixture
def person_repo() -> InMemoryPersonRepository:
    return InMemoryPersonRepository()


@pytest.fixture
def job_service(job_repo) -> JobService:
    return JobService(job_repo)


@pytest.fixture
def person_service(person_repo, job_repo) -> PersonService:
    return PersonService(person_repo, job_repo, PersonManager(job_repo))


@pytest.fixture
def seeded(job_service, person_service, engineer, ana):
    """Services with the engineer job and Ana already stored."""
    job_service.insert_job(engineer)
    person_service.insert_person(ana)
    return job_service, person_service


@pytest.fixture
def app(job_service, person_service):
    flask_app = create_app(job_service, person_service)
    flask_app.config["TESTING"] = True
    return flask_app


@pytest.fixture
def client(app):
    """Flask test client over the in-memory services."""
    with app.test_client() as test_client:
        yield test_client


@pytest.fixture
def mock_db():
    """
    Mocked Database handle.

    Returns a tuple (db, conn, cursor) where cursor is what
    `with conn.cursor() as cur` yields inside the repositories.
    """
    db = MagicMock()
    conn = MagicMock()
    conn.closed = 0
    cursor = MagicMock()
    db.get_connection.return_value = conn
    conn.cursor.return_value.__enter__.return_value = cursor
    conn.cursor.return_value.__exit__.return_value = False
    return db, conn, cursor
