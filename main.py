"""
main.py
-------
Entry point for the personnel management service.

Responsibilities:
    - Build the database handle, repositories and services once.
    - Hand them to the Flask app or the interactive console.
    - Create the schema on demand.

Usage:
    python main.py serve [--host HOST] [--port PORT]
    python main.py console {person,job}
    python main.py init-db
"""

import argparse
from dataclasses import dataclass

from config import APP_HOST, APP_PORT, DATABASE_URL, DB_POOL_MAX, STRICT_STATUS_CODES
from console.interactive import InteractiveConsole
from db.connection import Database
from db.init_db import create_tables
from handlers import create_app
from repositories.job_repo import JobRepository
from repositories.person_repo import PersonRepository
from services.job_service import JobService
from services.person_manager import PersonManager
from services.person_service import PersonService
from utils.exceptions import DatabaseOperationError
from utils.logger import get_logger

logger = get_logger(__name__)


@dataclass
class Services:
    """Everything a front end needs, wired once per process."""
    db: Database
    job_service: JobService
    person_service: PersonService


def build_services(db: Database) -> Services:
    """Wire repositories and services around one Database handle."""
    job_repo = JobRepository(db)
    person_repo = PersonRepository(db)
    job_service = JobService(job_repo)
    person_service = PersonService(person_repo, job_repo, PersonManager(job_repo))
    return Services(db=db, job_service=job_service, person_service=person_service)


def cmd_serve(args: argparse.Namespace, services: Services) -> None:
    services.db.open()
    app = create_app(
        services.job_service,
        services.person_service,
        strict_status_codes=STRICT_STATUS_CODES,
    )
    logger.info(f"Serving on http://{args.host}:{args.port}")
    app.run(host=args.host, port=args.port)


def cmd_console(args: argparse.Namespace, services: Services) -> None:
    console = InteractiveConsole(services.person_service, services.job_service)
    if args.entity == "person":
        console.run_person_console()
    else:
        console.run_job_console()


def cmd_init_db(args: argparse.Namespace, services: Services) -> None:
    create_tables(services.db)
    print("Database schema created successfully.")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="personnel", description="Person and job management service")
    subparsers = parser.add_subparsers(dest="command", required=True)

    srv = subparsers.add_parser("serve", help="Run the HTTP API")
    srv.add_argument("--host", default=APP_HOST, help=f"Bind address (default: {APP_HOST})")
    srv.add_argument("--port", type=int, default=APP_PORT, help=f"Port (default: {APP_PORT})")
    srv.set_defaults(func=cmd_serve)

    con = subparsers.add_parser("console", help="Run the interactive console")
    con.add_argument("entity", choices=["person", "job"], help="Table to manage")
    con.set_defaults(func=cmd_console)

    init = subparsers.add_parser("init-db", help="Create the person and job tables")
    init.set_defaults(func=cmd_init_db)
    return parser


def main(argv: list[str] | None = None) -> None:
    """Parse arguments, wire services and run the chosen front end."""
    args = build_parser().parse_args(argv)

    # ── 1. Wiring ─────────────────────────────────────────
    db = Database(DATABASE_URL, max_conn=DB_POOL_MAX)
    services = build_services(db)

    # ── 2. Run ────────────────────────────────────────────
    try:
        args.func(args, services)
    except DatabaseOperationError as e:
        logger.error(f"Stopped: {e.message}")
        raise SystemExit(1)
    finally:
        # ── 3. Cleanup on shutdown ────────────────────────
        db.close()


if __name__ == "__main__":
    main()
