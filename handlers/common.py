"""
handlers/common.py
------------------
Response helpers shared by the blueprints.
Every failure is rendered as "Failed to <action>: <message>".
"""

from flask import Response, current_app

from utils.exceptions import DatabaseOperationError
from utils.logger import get_logger

logger = get_logger(__name__)


def ok(body: str, mimetype: str = "text/plain") -> Response:
    return Response(body, status=200, mimetype=mimetype)


def failed(action: str, error: DatabaseOperationError) -> Response:
    """
    Build the error response for a failed operation.

    The status is a flat 500 unless the app runs with STRICT_STATUS_CODES,
    in which case the error's own code (404/409/400/503) is used.
    """
    status = error.status_code if current_app.config.get("STRICT_STATUS_CODES") else 500
    logger.warning(f"Failed to {action}: {error.message} ({type(error).__name__})")
    return Response(f"Failed to {action}: {error.message}", status=status, mimetype="text/plain")
