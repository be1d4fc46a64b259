"""
services/person_service.py
--------------------------
Business logic for persons.
Orchestrates between PersonRepository, JobRepository and PersonManager.
"""

from models.job import Job
from models.person import Person
from repositories.job_repo import JobRepository
from repositories.person_repo import PersonRepository
from services.person_manager import PersonManager
from services.validation import validate_new_person, validate_salary_index
from utils.exceptions import ConflictError
from utils.logger import get_logger

logger = get_logger(__name__)


class PersonService:
    """
    Handles all business logic related to persons.

    Workflow for writes:
        1. Validate field formats and ranges.
        2. Check the state the write depends on (referenced job, current value).
        3. Persist via the repository.
    """

    def __init__(
        self,
        person_repo: PersonRepository,
        job_repo: JobRepository,
        person_manager: PersonManager | None = None,
    ):
        self.repo = person_repo
        self.job_repo = job_repo
        self.person_manager = person_manager or PersonManager(job_repo)

    # ── CRUD ──────────────────────────────────────────────

    def get_person_by_id(self, person_id: int) -> Person:
        return self.repo.get_by_id(person_id)

    def person_exists(self, person_id: int) -> bool:
        return self.repo.exists(person_id)

    def get_all_persons(self) -> list[Person]:
        return self.repo.get_all()

    def insert_person(self, person: Person) -> Person:
        """
        Validate and persist a new person.

        The referenced job must exist at insert time. Deleting that job later
        is still allowed and leaves the person with a dangling job id.

        Raises:
            ValidationError: On a malformed name/email or an index outside [1, 3].
            NotFoundError: If the job id does not exist.
            ConflictError: If the person id is already taken.
        """
        validate_new_person(person)
        self.job_repo.get_by_id(person.job_id)
        return self.repo.add(person)

    def delete_person(self, person_id: int) -> None:
        self.repo.delete(person_id)

    def update_salary_index(self, person_id: int, salary_index: float) -> Person:
        """
        Change a person's salary index.

        Raises:
            NotFoundError: If the person does not exist.
            ConflictError: If the person already has this index.
            ValidationError: If the new index is outside [1, 3].
        """
        current = self.repo.get_by_id(person_id)
        if current.salary_index == salary_index:
            raise ConflictError(f"Person's salary index is already {salary_index}")
        validate_salary_index(salary_index)
        return self.repo.update_salary_index(person_id, salary_index)

    # ── DERIVED ───────────────────────────────────────────

    def get_person_job(self, person_id: int) -> Job:
        return self.person_manager.get_job(self.get_person_by_id(person_id))

    def get_person_salary(self, person_id: int) -> float:
        return self.person_manager.get_salary(self.get_person_by_id(person_id))

    def get_person_work_experience(self, person_id: int) -> str:
        return self.person_manager.get_work_experience(self.get_person_by_id(person_id))
