"""
services/validation.py
----------------------
Field and range checks applied before anything is written.
Every failure raises ValidationError with a message meant for the end user.
"""

import re

from models.job import Job
from models.person import Person
from utils.exceptions import ValidationError

MIN_BASE_SALARY = 500.0
MIN_SALARY_INDEX = 1.0
MAX_SALARY_INDEX = 3.0

_LETTERS = re.compile(r"^[A-Za-z\s]+$")

BASE_SALARY_MESSAGE = "Invalid Input for Base Salary - Please specify a value greater than 500!"
SALARY_INDEX_MESSAGE = "Invalid Input for Salary Index - Please specify a value from 1 to 3!"


def is_letters(value: str) -> bool:
    """True if the value is made only of ASCII letters and whitespace."""
    return isinstance(value, str) and bool(_LETTERS.match(value))


def is_email(value: str) -> bool:
    """Loose email check: must contain both '@' and '.'."""
    return isinstance(value, str) and "@" in value and "." in value


def is_valid_base_salary(value: float) -> bool:
    return value >= MIN_BASE_SALARY


def is_valid_salary_index(value: float) -> bool:
    return MIN_SALARY_INDEX <= value <= MAX_SALARY_INDEX


def validate_id(entity_id: int) -> None:
    if entity_id < 0:
        raise ValidationError("Invalid Input for id - Please insert a non-negative whole number!")


def validate_base_salary(value: float) -> None:
    if not is_valid_base_salary(value):
        raise ValidationError(BASE_SALARY_MESSAGE)


def validate_salary_index(value: float) -> None:
    if not is_valid_salary_index(value):
        raise ValidationError(SALARY_INDEX_MESSAGE)


def validate_new_job(job: Job) -> None:
    """Format and range checks for a job about to be inserted."""
    validate_id(job.id)
    if not is_letters(job.name) or not is_letters(job.domain):
        raise ValidationError("Please enter letters for name or domain!")
    validate_base_salary(job.base_salary)


def validate_new_person(person: Person) -> None:
    """Format and range checks for a person about to be inserted."""
    validate_id(person.id)
    validate_id(person.job_id)
    if not is_letters(person.name):
        raise ValidationError("Invalid Input for Name - Please insert letters only!")
    if not is_email(person.email):
        raise ValidationError(
            "Invalid Input for Email - Please insert a valid email with a "
            "standard format: example123@email.com"
        )
    validate_salary_index(person.salary_index)
