"""Book domain primitives."""

import re
from typing import Any, ClassVar, Self

import pydantic
from pydantic import field_validator

from dds.domain.shared.error import ValidationError
from dds.domain.shared.model.value import RootValueObject


class ISBN(RootValueObject[str]):
    """
    International Standard Book Number, valid by construction.

    Accepts the common written forms of ISBN-10 and ISBN-13 and stores the
    canonical digits (a trailing ``X`` is kept for ISBN-10).
    Examples: 0-596-52068-9, ISBN 978-0-596-52068-7, ISBN-10: 0-596-52068-9
    """

    # https://howtodoinjava.com/java/regex/java-regex-validate-international-standard-book-number-isbns/
    _re: ClassVar[re.Pattern] = re.compile(
        r"^(?:ISBN(?:-1[03])?:? )?"
        r"(?=[0-9X]{10}$|(?=(?:[0-9]+[- ]){3})[- 0-9X]{13}$|97[89][0-9]{10}$|(?=(?:[0-9]+[- ]){4})[- 0-9]{17}$)"
        r"(?:97[89][- ]?)?[0-9]{1,5}[- ]?[0-9]+[- ]?[0-9]+[- ]?[0-9X]$"
    )
    _non_digits: ClassVar[re.Pattern] = re.compile(r"[^0-9X]")

    @field_validator("root", mode="before")
    @classmethod
    def _validate(cls, v: Any) -> str:
        if not isinstance(v, str) or not v:
            raise ValueError("invalid ISBN (empty)")
        if not cls._re.match(v):
            raise ValueError("invalid ISBN (unrecognised format)")
        digits = cls.trim_to_digits(v)
        if len(digits) == 10:
            ok = _isbn10_checksum_ok(digits)
        elif len(digits) == 13:
            ok = _isbn13_checksum_ok(digits)
        else:
            raise ValueError("invalid ISBN (expected 10 or 13 digits)")
        if not ok:
            raise ValueError("invalid ISBN (checksum mismatch)")
        return digits

    def __str__(self) -> str:
        return self.root

    # ---------- factory & helpers ----------

    @classmethod
    def parse(cls, isbn: str) -> Self:
        """Build an ISBN, raising the domain ValidationError if it is invalid."""
        try:
            return cls(isbn)
        except pydantic.ValidationError as e:
            message = e.errors()[0]["msg"].removeprefix("Value error, ")
            raise ValidationError(message, field="isbn") from e

    @classmethod
    def is_valid(cls, isbn: str | None) -> bool:
        try:
            cls(isbn)
        except pydantic.ValidationError:
            return False
        return True

    @classmethod
    def trim_to_digits(cls, isbn: str) -> str:
        """Canonicalise: drop an ISBN-10/ISBN-13 designator, keep digits and X."""
        if isbn.startswith("ISBN-"):
            isbn = isbn[:5] + isbn[7:]
        return cls._non_digits.sub("", isbn)


def _digit(c: str) -> int:
    return 10 if c == "X" else int(c)


def _isbn10_checksum_ok(digits: str) -> bool:
    total = sum(_digit(c) * weight for c, weight in zip(digits, range(10, 0, -1)))
    return total % 11 == 0


def _isbn13_checksum_ok(digits: str) -> bool:
    total = sum(int(c) * (3 if i % 2 else 1) for i, c in enumerate(digits))
    return total % 10 == 0
