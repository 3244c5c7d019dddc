"""Demo command: a student's metadata cannot be changed from outside."""

import logging
import sys

import cyclopts
import logfire

from dds.cli.console import get_console
from dds.config import Config
from dds.domain.student.model import Student

logger = logging.getLogger(__name__)

app = cyclopts.App(name="demo", help="Show that a student's metadata is insulated from callers")


@app.default
def demo() -> None:
    """Build a student, tamper with the caller's mappings, print the result.

    The student is built from the configured demo data. Both the mapping it
    was built from and a mapping it returned are then modified.
    """
    console = get_console()
    settings = Config().demo
    original = dict(settings.metadata)

    with logfire.span("StudentDemo"):
        student = Student(settings.name, settings.id, original)
        logger.debug("Created student %s (%d)", student.name, student.id)

        original["City"] = "Stockholm"
        original.pop("Company", None)
        student.metadata.clear()
        logfire.info("Caller-held metadata modified", student_id=student.id)

    console.print(f"[bold]{student.name}[/bold] (id {student.id})")
    console.mapping(original, title="Caller's mapping")
    console.mapping(student.metadata, title="Student metadata")

    if student.metadata != settings.metadata:
        console.error("Student metadata changed through a caller-held reference")
        sys.exit(1)
    console.success("Student metadata unchanged")
