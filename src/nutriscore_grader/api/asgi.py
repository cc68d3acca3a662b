"""ASGI entrypoint for the grading API."""

from nutriscore_grader.api.app import create_app
from nutriscore_grader.containers import build_container

app = create_app(build_container())
