"""
models/person.py
----------------
Domain model for a person employed in one of the jobs.
"""

from dataclasses import dataclass
from typing import Any

from utils.exceptions import ValidationError
from utils.formatting import person_block
from utils.parsing import parse_float, parse_int


@dataclass
class Person:
    """
    Represents a single row of the `person` table.

    Attributes:
        id: Caller-assigned primary key.
        name: Full name, letters and spaces only.
        email: Contact address; must contain '@' and '.'.
        job_id: Id of the job this person holds. Not enforced by a foreign key.
        salary_index: Multiplier in [1.0, 3.0] applied to the job's base salary.
    """
    id: int
    name: str
    email: str
    job_id: int
    salary_index: float

    @classmethod
    def from_dict(cls, data: Any) -> "Person":
        """
        Build a Person from a JSON body using the camelCase wire names.

        Raises:
            ValidationError: If the body is not an object, a field is
                missing, or a numeric field does not parse.
        """
        if not isinstance(data, dict):
            raise ValidationError("Invalid person body - expected a JSON object.")
        missing = [
            k for k in ("id", "name", "email", "jobId", "salaryIndex")
            if data.get(k) is None
        ]
        if missing:
            raise ValidationError(f"Missing required field(s): {', '.join(missing)}")
        return cls(
            id=parse_int(data["id"], "id"),
            name=str(data["name"]),
            email=str(data["email"]),
            job_id=parse_int(data["jobId"], "job id"),
            salary_index=parse_float(data["salaryIndex"], "Salary Index"),
        )

    def __str__(self) -> str:
        return person_block(self)
