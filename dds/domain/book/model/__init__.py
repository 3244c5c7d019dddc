"""Book domain model."""

from dds.domain.book.model.aggregate import Book
from dds.domain.book.model.value import ISBN

__all__ = ["Book", "ISBN"]
