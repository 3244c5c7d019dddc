"""Book aggregate - an entity keyed by a validated ISBN."""

from typing import Self

from pydantic import Field

from dds.domain.book.model.value import ISBN
from dds.domain.shared.model.aggregate import Aggregate


class Book(Aggregate):
    """A book. Its ISBN is a domain primitive, never a bare string."""

    isbn: ISBN = Field(frozen=True)

    @classmethod
    def from_isbn(cls, isbn: str) -> Self:
        return cls(isbn=ISBN.parse(isbn))

    def __str__(self) -> str:
        return str(self.isbn)
