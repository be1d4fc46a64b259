"""
utils/formatting.py
-------------------
Text renderings of jobs and persons for the console and HTTP responses.
Purely cosmetic: no business rules live here.
"""

from typing import Iterable


# ── Job ───────────────────────────────────────────────────

def job_block(job) -> str:
    """Multi-line labelled description of a single job."""
    return (
        f"Job database entry for:\n"
        f" {job.name},\n"
        f" id = {job.id},\n"
        f" domain = {job.domain},\n"
        f" base salary = {job.base_salary:.1f}\n"
    )


def job_line(job) -> str:
    """One fixed-width line, used when listing jobs in the console."""
    return (
        f"Job database entry for: {job.name:>20}, id = {job.id:>4}, "
        f"domain = {job.domain:>10}, base salary = {job.base_salary:>5.1f}"
    )


def job_row(job) -> str:
    """One fixed-width row of the HTTP job listing."""
    return (
        f"Job id: {job.id:>2}; name: {job.name:>22}; "
        f"domain: {job.domain:>15}; base salary: {job.base_salary:.1f}\n"
    )


# ── Person ────────────────────────────────────────────────

def person_block(person) -> str:
    """Multi-line labelled description of a single person."""
    return (
        f"Person database entry for:\n"
        f" name = {person.name},\n"
        f" id = {person.id},\n"
        f" email = {person.email},\n"
        f" job id = {person.job_id},\n"
        f" salary index = {person.salary_index:.1f}\n"
    )


def person_line(person) -> str:
    """One fixed-width line, used when listing persons in the console."""
    return (
        f"Person database entry for: name = {person.name:>18}, id = {person.id:>4}, "
        f"email = {person.email:>25}, job id = {person.job_id:>3}, "
        f"salary index = {person.salary_index:>5.1f}"
    )


def person_row(person) -> str:
    """One fixed-width row of the HTTP person listing."""
    return (
        f"Person id: {person.id:>2}; name: {person.name:>18}; email: {person.email:>25}; "
        f"job id: {person.job_id:>3}; salary index: {person.salary_index:.1f}\n"
    )


# ── Listings ──────────────────────────────────────────────

def html_listing(title: str, rows: Iterable[str]) -> str:
    """Wrap pre-formatted rows in a <pre> block under a title line."""
    return f"{title}:\n<pre>\n{''.join(rows)}</pre>"
