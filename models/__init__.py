"""
models/ - Domain Models
=======================
Plain dataclasses for the two entities plus the work experience enum.
Instances are transient copies of rows; the database owns the state.
"""

from models.job import Job
from models.person import Person
from models.work_experience import WorkExperience

__all__ = ["Job", "Person", "WorkExperience"]
