"""
handlers/info_handler.py
------------------------
Usage instruction pages: welcome, job and person endpoint overviews.
"""

from flask import Blueprint, render_template_string

INFO_TEMPLATE = """
<!doctype html>
<html>
<head><title>{{ title }}</title></head>
<body>
  <h1>{{ title }}</h1>
  <p>{{ intro }}</p>
  <ul>
  {% for method, path, text in endpoints %}
    <li><code>{{ method }} {{ path }}</code> - {{ text }}</li>
  {% endfor %}
  </ul>
  {% if links %}
  <p>
  {% for href, label in links %}
    <a href="{{ href }}">{{ label }}</a>{% if not loop.last %} | {% endif %}
  {% endfor %}
  </p>
  {% endif %}
</body>
</html>
"""

JOB_ENDPOINTS = [
    ("GET", "/job/all", "list every job"),
    ("GET", "/job/{id}", "show one job"),
    ("POST", "/job", "add a job (JSON: id, name, domain, baseSalary >= 500)"),
    ("DELETE", "/job/{id}", "delete a job"),
    ("PUT", "/job/{id}/{baseSalary}", "change a job's base salary"),
]

PERSON_ENDPOINTS = [
    ("GET", "/person/all", "list every person"),
    ("GET", "/person/{id}", "show one person"),
    ("POST", "/person", "add a person (JSON: id, name, email, jobId, salaryIndex 1-3)"),
    ("DELETE", "/person/{id}", "delete a person"),
    ("PUT", "/person/{id}/{salaryIndex}", "change a person's salary index"),
    ("GET", "/person/{id}/job", "show the person's job"),
    ("GET", "/person/{id}/salary", "show the person's salary (index x base salary)"),
    ("GET", "/person/{id}/workexperience", "show the person's work experience band"),
]


def create_info_blueprint() -> Blueprint:
    bp = Blueprint("info", __name__)

    @bp.get("/")
    def welcome():
        return render_template_string(
            INFO_TEMPLATE,
            title="Personnel management system",
            intro="Manage the person and job databases through the endpoints below.",
            endpoints=[],
            links=[("/person-info", "Person endpoints"), ("/job-info", "Job endpoints")],
        )

    @bp.get("/job-info")
    def job_info():
        return render_template_string(
            INFO_TEMPLATE,
            title="Job database",
            intro="Jobs carry a name, a domain and a base salary of at least 500.",
            endpoints=JOB_ENDPOINTS,
            links=[("/", "Home")],
        )

    @bp.get("/person-info")
    def person_info():
        return render_template_string(
            INFO_TEMPLATE,
            title="Person database",
            intro="Persons hold one job; their salary is salary index x the job's base salary.",
            endpoints=PERSON_ENDPOINTS,
            links=[("/", "Home")],
        )

    return bp
