"""
Tests for models/ and utils/formatting.py.
"""

import pytest

from models.job import Job
from models.person import Person
from utils.exceptions import ValidationError
from utils.formatting import html_listing, job_line, job_row, person_line, person_row


class TestJobModel:
    """JSON conversion and text rendering of jobs."""

    def test_from_dict(self):
        job = Job.from_dict({"id": 501, "name": "Engineer", "domain": "Tech", "baseSalary": 3000})
        assert job == Job(id=501, name="Engineer", domain="Tech", base_salary=3000.0)

    def test_missing_field(self):
        with pytest.raises(ValidationError, match="baseSalary"):
            Job.from_dict({"id": 1, "name": "Engineer", "domain": "Tech"})

    def test_non_numeric_salary(self):
        with pytest.raises(ValidationError):
            Job.from_dict({"id": 1, "name": "Engineer", "domain": "Tech", "baseSalary": "lots"})

    def test_body_must_be_object(self):
        with pytest.raises(ValidationError):
            Job.from_dict(None)

    def test_str_is_labelled_block(self, engineer):
        text = str(engineer)
        assert text.startswith("Job database entry for:")
        assert " id = 501," in text
        assert " base salary = 3000.0" in text


class TestPersonModel:
    """JSON conversion and text rendering of persons."""

    def test_from_dict(self):
        person = Person.from_dict(
            {"id": 901, "name": "Ana", "email": "ana@x.com", "jobId": 501, "salaryIndex": 2}
        )
        assert person == Person(id=901, name="Ana", email="ana@x.com", job_id=501, salary_index=2.0)

    def test_missing_fields_listed(self):
        with pytest.raises(ValidationError, match="jobId, salaryIndex"):
            Person.from_dict({"id": 1, "name": "Ana", "email": "ana@x.com"})

    def test_str_is_labelled_block(self, ana):
        text = str(ana)
        assert " name = Ana," in text
        assert " job id = 501," in text
        assert " salary index = 2.0" in text


class TestFormatting:
    """Fixed-width lines and the HTML listing."""

    def test_job_row(self, engineer):
        expected = (
            "Job id: 501; name: " + " " * 14 + "Engineer; "
            "domain: " + " " * 11 + "Tech; base salary: 3000.0\n"
        )
        assert job_row(engineer) == expected

    def test_person_row(self, ana):
        row = person_row(ana)
        assert row.startswith("Person id: 901; name:")
        assert row.endswith("salary index: 2.0\n")

    def test_lines_have_fixed_width_fields(self, engineer, ana):
        assert f"{'Engineer':>20}" in job_line(engineer)
        assert f"{'ana@x.com':>25}" in person_line(ana)

    def test_html_listing(self, engineer):
        body = html_listing("Job database retrieved successfully", [job_row(engineer)])
        assert body.startswith("Job database retrieved successfully:\n<pre>\n")
        assert body.endswith("</pre>")
