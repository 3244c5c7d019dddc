"""ISBN command for checking and canonicalising ISBNs."""

import sys

import cyclopts

from dds.cli.console import get_console
from dds.domain.book.model import ISBN
from dds.domain.shared.error import ValidationError

app = cyclopts.App(name="isbn", help="Validate ISBNs and print their canonical form")


@app.default
def isbn(*values: str) -> None:
    """Validate each ISBN and print its canonical digits.

    Exits with status 1 if any value is invalid.

    Args:
        values: ISBNs as written, e.g. "ISBN 978-0-596-52068-7"
    """
    console = get_console()
    invalid = 0
    for value in values:
        try:
            parsed = ISBN.parse(value)
        except ValidationError as e:
            invalid += 1
            console.error(f"{value}: {e.message}")
            continue
        console.success(f"{value} -> {parsed}")

    if invalid:
        sys.exit(1)
