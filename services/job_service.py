"""
services/job_service.py
-----------------------
Business logic for jobs: validates requests and delegates to JobRepository.
"""

from models.job import Job
from models.person import Person
from repositories.job_repo import JobRepository
from services.calculator import calculate_salary
from services.validation import validate_base_salary, validate_new_job
from utils.exceptions import ConflictError
from utils.logger import get_logger

logger = get_logger(__name__)


class JobService:
    """Handles all business logic related to jobs."""

    def __init__(self, job_repo: JobRepository):
        self.repo = job_repo

    def get_job_by_id(self, job_id: int) -> Job:
        return self.repo.get_by_id(job_id)

    def job_exists(self, job_id: int) -> bool:
        return self.repo.exists(job_id)

    def get_all_jobs(self) -> list[Job]:
        return self.repo.get_all()

    def insert_job(self, job: Job) -> Job:
        """
        Validate and persist a new job.

        Raises:
            ValidationError: On a malformed name/domain or a base salary below 500.
            ConflictError: If the id is already taken.
        """
        validate_new_job(job)
        return self.repo.add(job)

    def delete_job(self, job_id: int) -> None:
        """
        Delete a job. Persons pointing at it are left untouched and will
        fail on their next job or salary lookup.
        """
        self.repo.delete(job_id)

    def update_base_salary(self, job_id: int, base_salary: float) -> Job:
        """
        Change a job's base salary.

        Raises:
            NotFoundError: If the job does not exist.
            ConflictError: If the job already has this base salary.
            ValidationError: If the new value is below 500.
        """
        current = self.repo.get_by_id(job_id)
        if current.base_salary == base_salary:
            raise ConflictError(f"Job base salary is already: {base_salary}")
        validate_base_salary(base_salary)
        return self.repo.update_base_salary(job_id, base_salary)

    def calculate_salary(self, person: Person, job: Job) -> float:
        return calculate_salary(person, job)
