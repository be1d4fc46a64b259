"""
services/calculator.py
----------------------
Derived attributes: a person's salary and work experience band.
Pure functions; the only side effect is a log line.
"""

from models.job import Job
from models.person import Person
from models.work_experience import WorkExperience
from services.validation import is_valid_base_salary, is_valid_salary_index
from utils.exceptions import ValidationError
from utils.logger import get_logger

logger = get_logger(__name__)

# Upper bounds (exclusive) of each band; anything above the last is SENIOR.
_BANDS = (
    (1.4, WorkExperience.ENTRY),
    (1.8, WorkExperience.ENTRY_TO_MID),
    (2.2, WorkExperience.MID),
)


def calculate_salary(person: Person, job: Job) -> float:
    """
    Salary = person's salary index * job's base salary.

    Raises:
        ValidationError: If the index is outside [1, 3] or the base salary is below 500.
    """
    if not is_valid_salary_index(person.salary_index):
        raise ValidationError("Error: salary index outside of range 1 - 3.")
    if not is_valid_base_salary(job.base_salary):
        raise ValidationError("Error: base salary lesser than 500.")

    salary = person.salary_index * job.base_salary
    logger.info(f"{person.name}'s salary is: {salary}")
    return salary


def classify_work_experience(salary_index: float) -> WorkExperience:
    """
    Map a salary index to its experience band.

    Comparisons are strict, so 1.4, 1.8 and 2.2 belong to the higher band.

    Raises:
        ValidationError: If the index is outside [1, 3].
    """
    if not is_valid_salary_index(salary_index):
        raise ValidationError("Invalid salary index value, outside of range 1 - 3")
    for upper, band in _BANDS:
        if salary_index < upper:
            return band
    return WorkExperience.SENIOR
