"""
services/person_manager.py
--------------------------
Information about a person that goes beyond their own row:
the job they hold, their salary and their work experience.
"""

from models.job import Job
from models.person import Person
from repositories.job_repo import JobRepository
from services.calculator import calculate_salary, classify_work_experience
from utils.logger import get_logger

logger = get_logger(__name__)


class PersonManager:
    """Resolves a person's job and derives attributes from it."""

    def __init__(self, job_repo: JobRepository):
        self.job_repo = job_repo

    def get_job(self, person: Person) -> Job:
        """Dereference the person's job id. NotFoundError if it dangles."""
        return self.job_repo.get_by_id(person.job_id)

    def get_salary(self, person: Person) -> float:
        return calculate_salary(person, self.get_job(person))

    def get_work_experience(self, person: Person) -> str:
        band = classify_work_experience(person.salary_index)
        text = band.describe(person.name)
        logger.info(text)
        return text
