"""
models/work_experience.py
-------------------------
Work experience bands derived from a person's salary index.
"""

from enum import Enum


class WorkExperience(Enum):
    """Ordered experience bands, lowest first."""

    ENTRY = "is entry level; they have been working here less than 1 year;"
    ENTRY_TO_MID = "is entry-to-mid level; they have been working more than 1 year;"
    MID = "is mid level; they have been working more than 2 years;"
    SENIOR = "is further than mid level; they have been working here more than 3 years;"

    def describe(self, name: str) -> str:
        """Sentence about a named person, e.g. 'Ana is mid level; ...'."""
        return f"{name} {self.value}"
