"""
console/interactive.py
----------------------
Line-oriented menus for managing the person and job tables from a terminal.

A non-numeric or unknown menu option ends the session, as does end of input.
Field prompts keep asking until the value is acceptable.
"""

from typing import Callable

from models.job import Job
from models.person import Person
from services.job_service import JobService
from services.person_service import PersonService
from services.validation import (
    is_email,
    is_letters,
    is_valid_base_salary,
    is_valid_salary_index,
)
from utils.exceptions import ConflictError, DatabaseOperationError, ValidationError
from utils.formatting import job_line, person_line
from utils.parsing import parse_float, parse_int

EXIT_MESSAGE = "Input value is not an option menu, exiting console."

PERSON_MENU = """
Please select an option, from the following available:
1. Display all persons from the database.
2. Display a certain person, by id.
3. Add a new person.
4. Delete an existing person.
5. Update a person's salary index.
6. Display a certain person's job.
7. Display a certain person's salary.
8. Display a certain person's work experience.
Type any other key to exit!
"""

JOB_MENU = """
Please select an option, from the following available:
1. Display all jobs from the database.
2. Display a certain job, by id.
3. Add a new job.
4. Delete an existing job.
5. Update a job's base salary.
Type any other key to exit!
"""


class InteractiveConsole:
    """
    Menu-driven console over the person and job services.

    Args:
        person_service: Service used by the person menu.
        job_service: Service used by the job menu (and for job lookups when adding persons).
        read: Callable returning the next input line; raises EOFError at end of input.
        write: Callable printing one message.
    """

    def __init__(
        self,
        person_service: PersonService,
        job_service: JobService,
        read: Callable[[], str] = input,
        write: Callable[[str], None] = print,
    ):
        self.person_service = person_service
        self.job_service = job_service
        self._read = read
        self._write = write

    # ── Sessions ──────────────────────────────────────────

    def run_person_console(self) -> None:
        self._write(
            "Welcome to the user management system interactive console!\n"
            'This interactive console offers the possibility of manipulating the "person" database'
        )
        self._run(PERSON_MENU, {
            1: self._list_persons,
            2: self._show_person,
            3: self._add_person,
            4: self._delete_person,
            5: self._update_salary_index,
            6: self._show_person_job,
            7: self._show_person_salary,
            8: self._show_person_work_experience,
        })

    def run_job_console(self) -> None:
        self._write(
            "Welcome to the user management system interactive console!\n"
            'This interactive console offers the possibility of manipulating the "job" database'
        )
        self._run(JOB_MENU, {
            1: self._list_jobs,
            2: self._show_job,
            3: self._add_job,
            4: self._delete_job,
            5: self._update_base_salary,
        })

    def _run(self, menu: str, actions: dict[int, Callable[[], None]]) -> None:
        while True:
            self._write(menu)
            try:
                line = self._read()
            except EOFError:
                self._write(EXIT_MESSAGE)
                return
            try:
                action = actions.get(parse_int(line, "menu option"))
            except ValidationError:
                action = None
            if action is None:
                self._write(EXIT_MESSAGE)
                return
            try:
                action()
            except DatabaseOperationError as e:
                self._write(e.message)
            except EOFError:
                self._write(EXIT_MESSAGE)
                return

    # ── Person actions ────────────────────────────────────

    def _list_persons(self) -> None:
        persons = self.person_service.get_all_persons()
        if not persons:
            self._write("The person database is empty.")
        for p in persons:
            self._write(person_line(p))

    def _show_person(self) -> None:
        person_id = self._read_int("Please specify the person's id, to have it retrieved.")
        self._write(str(self.person_service.get_person_by_id(person_id)))

    def _add_person(self) -> None:
        self._list_persons()
        person_id = self._read_int("PLEASE SPECIFY THE PERSON'S ID, MANDATORY DIFFERENT FROM THE ABOVE LISTED!")
        if self.person_service.person_exists(person_id):
            raise ConflictError("Person id already used.")
        name = self._read_text(
            "Please specify the person's name.",
            is_letters,
            "Input error! Please insert letters only for name: ",
        )
        email = self._read_text(
            "Please specify the person's email.",
            is_email,
            "Input error! Please insert a valid email (example123@email.com): ",
        )
        self._list_jobs()
        job_id = self._read_existing_job_id()
        salary_index = self._read_number(
            "Please specify the person's salary index.",
            is_valid_salary_index,
            "Input error! Please insert real numbers (between 1 and 3) for salary index: ",
        )
        person = self.person_service.insert_person(
            Person(id=person_id, name=name, email=email, job_id=job_id, salary_index=salary_index)
        )
        self._write("Person inserted successfully.")
        self._write(str(person))

    def _delete_person(self) -> None:
        person_id = self._read_int("Please specify the person's id, to be deleted.")
        self.person_service.delete_person(person_id)
        self._write(f"Person deleted successfully, for id = {person_id}")

    def _update_salary_index(self) -> None:
        person_id = self._read_int("Please specify the person's id, to be updated by salary index.")
        salary_index = self._read_number(
            "Please specify the person's new salary index.",
            is_valid_salary_index,
            "Input error! Please insert real numbers (between 1 and 3) for salary index: ",
        )
        person = self.person_service.update_salary_index(person_id, salary_index)
        self._write("Person's salary index updated successfully.")
        self._write(str(person))

    def _show_person_job(self) -> None:
        person_id = self._read_int("Please specify the person's id, to retrieve their job.")
        self._write(str(self.person_service.get_person_job(person_id)))

    def _show_person_salary(self) -> None:
        person_id = self._read_int("Please specify the person's id, to retrieve their salary.")
        person = self.person_service.get_person_by_id(person_id)
        salary = self.person_service.get_person_salary(person_id)
        self._write(f"{person.name}'s salary is: {salary}")

    def _show_person_work_experience(self) -> None:
        person_id = self._read_int("Please specify the person's id, to retrieve their work experience.")
        self._write(self.person_service.get_person_work_experience(person_id))

    # ── Job actions ───────────────────────────────────────

    def _list_jobs(self) -> None:
        jobs = self.job_service.get_all_jobs()
        if not jobs:
            self._write("The job database is empty.")
        for j in jobs:
            self._write(job_line(j))

    def _show_job(self) -> None:
        job_id = self._read_int("Please specify the job id, to have it retrieved.")
        self._write(str(self.job_service.get_job_by_id(job_id)))

    def _add_job(self) -> None:
        self._list_jobs()
        job_id = self._read_int("PLEASE SPECIFY THE JOB ID, MANDATORY DIFFERENT FROM THE ABOVE LISTED!")
        if self.job_service.job_exists(job_id):
            raise ConflictError("Job id already used.")
        name = self._read_text(
            "Please specify the job name.",
            is_letters,
            "Input error! Please insert letters only for name: ",
        )
        domain = self._read_text(
            "Please specify the job domain.",
            is_letters,
            "Input error! Please insert letters only for domain: ",
        )
        base_salary = self._read_number(
            "Please specify the job base salary.",
            is_valid_base_salary,
            "Input error! Please insert real numbers (greater than 500) for base salary: ",
        )
        job = self.job_service.insert_job(
            Job(id=job_id, name=name, domain=domain, base_salary=base_salary)
        )
        self._write("Job inserted successfully.")
        self._write(str(job))

    def _delete_job(self) -> None:
        job_id = self._read_int("Please specify the job id, to be deleted.")
        self.job_service.delete_job(job_id)
        self._write(f"Job deleted successfully, for id = {job_id}")

    def _update_base_salary(self) -> None:
        job_id = self._read_int("Please specify the job id, to be updated by base salary.")
        base_salary = self._read_number(
            "Please specify the job's new base salary.",
            is_valid_base_salary,
            "Input error! Please insert real numbers (greater than 500) for base salary: ",
        )
        job = self.job_service.update_base_salary(job_id, base_salary)
        self._write("Job base salary updated successfully.")
        self._write(str(job))

    # ── Prompts ───────────────────────────────────────────

    def _read_int(self, prompt: str) -> int:
        self._write(prompt)
        while True:
            try:
                return parse_int(self._read())
            except ValidationError:
                self._write("Input error! Please insert whole numbers for id: ")

    def _read_text(self, prompt: str, accept: Callable[[str], bool], retry: str) -> str:
        self._write(prompt)
        while True:
            value = self._read().strip()
            if accept(value):
                return value
            self._write(retry)

    def _read_number(self, prompt: str, accept: Callable[[float], bool], retry: str) -> float:
        self._write(prompt)
        while True:
            try:
                value = parse_float(self._read())
            except ValidationError:
                value = None
            if value is not None and accept(value):
                return value
            self._write(retry)

    def _read_existing_job_id(self) -> int:
        self._write("PLEASE SPECIFY THE PERSON'S JOB ID, MANDATORY ONE OF THE ABOVE LISTED!")
        while True:
            try:
                job_id = parse_int(self._read(), "job id")
            except ValidationError:
                self._write("Input error! Please insert whole numbers for job id: ")
                continue
            if self.job_service.job_exists(job_id):
                return job_id
            self._write("Input error! Please enter a valid, existent job id: ")
