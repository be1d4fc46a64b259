"""
handlers/ - Presentation Layer
================================
Flask blueprints. Each handler parses the request, delegates to the
appropriate Service, and renders the text response. No business logic lives here.
"""

from flask import Flask

from handlers.info_handler import create_info_blueprint
from handlers.job_handler import create_job_blueprint
from handlers.person_handler import create_person_blueprint
from services.job_service import JobService
from services.person_service import PersonService


def create_app(
    job_service: JobService,
    person_service: PersonService,
    strict_status_codes: bool = False,
) -> Flask:
    """
    Build the Flask application around already constructed services.

    Args:
        job_service: Service backing the /job endpoints.
        person_service: Service backing the /person endpoints.
        strict_status_codes: Use 404/409/400/503 instead of a flat 500 on failure.
    """
    app = Flask(__name__)
    app.config["STRICT_STATUS_CODES"] = strict_status_codes
    app.register_blueprint(create_info_blueprint())
    app.register_blueprint(create_job_blueprint(job_service))
    app.register_blueprint(create_person_blueprint(person_service))
    return app
