"""
models/job.py
-------------
Domain model for a job (position) that persons can be assigned to.
"""

from dataclasses import dataclass
from typing import Any

from utils.exceptions import ValidationError
from utils.formatting import job_block
from utils.parsing import parse_float, parse_int


@dataclass
class Job:
    """
    Represents a single row of the `job` table.

    Attributes:
        id: Caller-assigned primary key.
        name: Job title, letters and spaces only.
        domain: Field of activity, letters and spaces only.
        base_salary: Salary base (minimum 500) multiplied by a person's salary index.
    """
    id: int
    name: str
    domain: str
    base_salary: float

    @classmethod
    def from_dict(cls, data: Any) -> "Job":
        """
        Build a Job from a JSON body using the camelCase wire names.

        Raises:
            ValidationError: If the body is not an object, a field is
                missing, or a numeric field does not parse.
        """
        if not isinstance(data, dict):
            raise ValidationError("Invalid job body - expected a JSON object.")
        missing = [k for k in ("id", "name", "domain", "baseSalary") if data.get(k) is None]
        if missing:
            raise ValidationError(f"Missing required field(s): {', '.join(missing)}")
        return cls(
            id=parse_int(data["id"], "id"),
            name=str(data["name"]),
            domain=str(data["domain"]),
            base_salary=parse_float(data["baseSalary"], "Base Salary"),
        )

    def __str__(self) -> str:
        return job_block(self)
