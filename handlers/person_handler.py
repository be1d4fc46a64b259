"""
handlers/person_handler.py
--------------------------
REST endpoints for the person table, plus the derived views
(job, salary, work experience). Delegates all logic to PersonService.
"""

from flask import Blueprint, request

from handlers.common import failed, ok
from models.person import Person
from services.person_service import PersonService
from utils.exceptions import DatabaseOperationError
from utils.formatting import html_listing, person_row
from utils.parsing import parse_float, parse_int


def create_person_blueprint(person_service: PersonService) -> Blueprint:
    """Build the /person blueprint around an already constructed PersonService."""
    bp = Blueprint("person", __name__, url_prefix="/person")

    @bp.get("/all")
    def get_all_persons():
        try:
            persons = person_service.get_all_persons()
        except DatabaseOperationError as e:
            return failed("retrieve person database", e)
        body = html_listing("Person database retrieved successfully", (person_row(p) for p in persons))
        return ok(body, mimetype="text/html")

    @bp.get("/<person_id>")
    def get_person_by_id(person_id: str):
        try:
            person = person_service.get_person_by_id(parse_int(person_id))
        except DatabaseOperationError as e:
            return failed("get person by id", e)
        return ok(f"Person retrieved by id successfully: \n{person}")

    @bp.post("")
    def insert_person():
        try:
            person = Person.from_dict(request.get_json(silent=True))
            person_service.insert_person(person)
        except DatabaseOperationError as e:
            return failed("insert person", e)
        return ok("Person inserted successfully.")

    @bp.delete("/<person_id>")
    def delete_person(person_id: str):
        try:
            person_service.delete_person(parse_int(person_id))
        except DatabaseOperationError as e:
            return failed("delete person", e)
        return ok("Person deleted successfully.")

    @bp.put("/<person_id>/<salary_index>")
    def update_salary_index(person_id: str, salary_index: str):
        try:
            person_service.update_salary_index(
                parse_int(person_id),
                parse_float(salary_index, "Salary Index"),
            )
        except DatabaseOperationError as e:
            return failed("update person's salary index", e)
        return ok("Person's salary index updated successfully.")

    # ── Derived views ─────────────────────────────────────

    @bp.get("/<person_id>/job")
    def get_person_job(person_id: str):
        try:
            pid = parse_int(person_id)
            name = person_service.get_person_by_id(pid).name
            job = person_service.get_person_job(pid)
        except DatabaseOperationError as e:
            return failed("retrieve person's job", e)
        return ok(f"{name}'s job retrieved successfully:\n{job}")

    @bp.get("/<person_id>/salary")
    def get_person_salary(person_id: str):
        try:
            pid = parse_int(person_id)
            name = person_service.get_person_by_id(pid).name
            salary = person_service.get_person_salary(pid)
        except DatabaseOperationError as e:
            return failed("retrieve person's salary", e)
        return ok(f"{name}'s salary retrieved successfully: \n{salary}")

    @bp.get("/<person_id>/workexperience")
    def get_person_work_experience(person_id: str):
        try:
            pid = parse_int(person_id)
            name = person_service.get_person_by_id(pid).name
            experience = person_service.get_person_work_experience(pid)
        except DatabaseOperationError as e:
            return failed("retrieve person's work experience", e)
        return ok(f"{name}'s work experience retrieved successfully: \n{experience}")

    return bp
