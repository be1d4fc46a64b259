"""
handlers/job_handler.py
-----------------------
REST endpoints for the job table.
Delegates all logic to JobService.
"""

from flask import Blueprint, request

from handlers.common import failed, ok
from models.job import Job
from services.job_service import JobService
from utils.exceptions import DatabaseOperationError
from utils.formatting import html_listing, job_row
from utils.parsing import parse_float, parse_int


def create_job_blueprint(job_service: JobService) -> Blueprint:
    """Build the /job blueprint around an already constructed JobService."""
    bp = Blueprint("job", __name__, url_prefix="/job")

    @bp.get("/all")
    def get_all_jobs():
        try:
            jobs = job_service.get_all_jobs()
        except DatabaseOperationError as e:
            return failed("retrieve job database", e)
        body = html_listing("Job database retrieved successfully", (job_row(j) for j in jobs))
        return ok(body, mimetype="text/html")

    @bp.get("/<job_id>")
    def get_job_by_id(job_id: str):
        try:
            job = job_service.get_job_by_id(parse_int(job_id))
        except DatabaseOperationError as e:
            return failed("get job by id", e)
        return ok(f"Job retrieved by id successfully: \n{job}")

    @bp.post("")
    def insert_job():
        try:
            job = Job.from_dict(request.get_json(silent=True))
            job_service.insert_job(job)
        except DatabaseOperationError as e:
            return failed("insert job", e)
        return ok("Job inserted successfully.")

    @bp.delete("/<job_id>")
    def delete_job(job_id: str):
        try:
            job_service.delete_job(parse_int(job_id))
        except DatabaseOperationError as e:
            return failed("delete job", e)
        return ok("Job deleted successfully.")

    @bp.put("/<job_id>/<base_salary>")
    def update_base_salary(job_id: str, base_salary: str):
        try:
            job_service.update_base_salary(
                parse_int(job_id),
                parse_float(base_salary, "Base Salary"),
            )
        except DatabaseOperationError as e:
            return failed("update job base salary", e)
        return ok("Job base salary updated successfully.")

    return bp
