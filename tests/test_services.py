"""
Tests for services/job_service.py and services/person_service.py.
"""

import pytest

from models.job import Job
from models.person import Person
from utils.exceptions import ConflictError, NotFoundError, ValidationError


class TestJobService:
    """Job CRUD rules on top of the record store."""

    def test_insert_then_get(self, job_service, engineer):
        job_service.insert_job(engineer)
        assert job_service.get_job_by_id(501) == engineer
        assert job_service.job_exists(501)

    def test_duplicate_insert_keeps_original(self, job_service, engineer):
        job_service.insert_job(engineer)
        clash = Job(id=501, name="Other", domain="Tech", base_salary=900.0)
        with pytest.raises(ConflictError, match="Job id already used."):
            job_service.insert_job(clash)
        assert job_service.get_job_by_id(501).name == "Engineer"

    def test_insert_rejects_low_base_salary(self, job_service):
        with pytest.raises(ValidationError):
            job_service.insert_job(Job(id=1, name="Intern", domain="Tech", base_salary=100.0))
        assert not job_service.job_exists(1)

    def test_get_missing(self, job_service):
        with pytest.raises(NotFoundError, match="No job was found"):
            job_service.get_job_by_id(42)

    def test_delete(self, job_service, engineer):
        job_service.insert_job(engineer)
        job_service.delete_job(501)
        assert job_service.get_all_jobs() == []

    def test_delete_missing(self, job_service):
        with pytest.raises(NotFoundError):
            job_service.delete_job(42)

    def test_update_base_salary(self, job_service, engineer):
        job_service.insert_job(engineer)
        updated = job_service.update_base_salary(501, 3500.0)
        assert updated.base_salary == 3500.0
        assert job_service.get_job_by_id(501).base_salary == 3500.0

    def test_update_to_same_value_is_conflict(self, job_service, engineer):
        job_service.insert_job(engineer)
        with pytest.raises(ConflictError, match="already"):
            job_service.update_base_salary(501, 3000.0)

    def test_update_below_minimum_leaves_value(self, job_service, engineer):
        job_service.insert_job(engineer)
        with pytest.raises(ValidationError):
            job_service.update_base_salary(501, 499.0)
        assert job_service.get_job_by_id(501).base_salary == 3000.0

    def test_update_missing(self, job_service):
        with pytest.raises(NotFoundError):
            job_service.update_base_salary(42, 900.0)

    def test_calculate_salary(self, job_service, engineer, ana):
        assert job_service.calculate_salary(ana, engineer) == 6000.0


class TestPersonService:
    """Person CRUD rules and derived lookups."""

    def test_insert_then_get(self, seeded, ana):
        _, person_service = seeded
        assert person_service.get_person_by_id(901) == ana
        assert person_service.person_exists(901)

    def test_insert_requires_existing_job(self, person_service, ana):
        with pytest.raises(NotFoundError, match="No job was found"):
            person_service.insert_person(ana)
        assert not person_service.person_exists(901)

    def test_insert_validates_before_job_lookup(self, person_service, ana):
        ana.email = "nope"
        with pytest.raises(ValidationError):
            person_service.insert_person(ana)

    def test_duplicate_insert(self, seeded):
        _, person_service = seeded
        twin = Person(id=901, name="Bea", email="bea@x.com", job_id=501, salary_index=1.0)
        with pytest.raises(ConflictError, match="Person id already used."):
            person_service.insert_person(twin)

    def test_get_all(self, seeded):
        _, person_service = seeded
        assert [p.id for p in person_service.get_all_persons()] == [901]

    def test_delete_then_get_missing(self, seeded):
        _, person_service = seeded
        person_service.delete_person(901)
        with pytest.raises(NotFoundError, match="No person found with given id."):
            person_service.get_person_by_id(901)

    def test_update_salary_index(self, seeded):
        _, person_service = seeded
        assert person_service.update_salary_index(901, 2.5).salary_index == 2.5

    def test_update_to_same_index_is_conflict(self, seeded):
        _, person_service = seeded
        with pytest.raises(ConflictError, match="already 2.0"):
            person_service.update_salary_index(901, 2.0)

    def test_update_index_out_of_range(self, seeded):
        _, person_service = seeded
        with pytest.raises(ValidationError):
            person_service.update_salary_index(901, 3.5)
        assert person_service.get_person_by_id(901).salary_index == 2.0

    def test_derived_lookups(self, seeded, engineer):
        _, person_service = seeded
        assert person_service.get_person_job(901) == engineer
        assert person_service.get_person_salary(901) == 6000.0
        assert "mid level" in person_service.get_person_work_experience(901)

    def test_dangling_job_after_delete(self, seeded):
        job_service, person_service = seeded
        job_service.delete_job(501)

        # the person row survives, only the job lookups fail
        assert person_service.get_person_by_id(901).job_id == 501
        with pytest.raises(NotFoundError):
            person_service.get_person_job(901)
        with pytest.raises(NotFoundError):
            person_service.get_person_salary(901)
        assert "mid level" in person_service.get_person_work_experience(901)

    def test_derived_lookup_missing_person(self, person_service):
        with pytest.raises(NotFoundError, match="No person found"):
            person_service.get_person_salary(1)
