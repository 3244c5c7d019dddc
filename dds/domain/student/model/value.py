"""Student record - immutable value object with privately owned metadata."""

from collections.abc import Mapping

from pydantic import PrivateAttr, StrictInt, StrictStr, TypeAdapter, computed_field

from dds.domain.shared.model.value import ValueObject

_metadata_adapter: TypeAdapter[dict[str, str]] = TypeAdapter(dict[str, str])


def copy_metadata(metadata: Mapping[str, str]) -> dict[str, str]:
    """Return a new dict holding the same pairs as ``metadata``.

    Keys and values are checked to be strings, so the one-level copy shares
    no mutable storage with the source. Anything else, ``None`` included,
    raises ``pydantic.ValidationError``.
    """
    return _metadata_adapter.validate_python(metadata)


class Student(ValueObject):
    """A registered student.

    ``name`` and ``id`` are frozen fields. ``metadata`` is held privately and
    copied whenever it crosses the object boundary: once on construction and
    once per read. Callers can mutate neither the record's mapping nor each
    other's copies.

    Example:
        meta = {"City": "Vallentuna", "Company": "Truesec"}
        student = Student("Johan", 1234, meta)
        del meta["Company"]
        student.metadata["Company"]  # "Truesec"
    """

    # Strict: values are stored exactly as supplied, never coerced
    name: StrictStr
    id: StrictInt

    _metadata: dict[str, str] = PrivateAttr(default_factory=dict)

    def __init__(self, name: str, id: int, metadata: Mapping[str, str]) -> None:
        super().__init__(name=name, id=id)
        self._metadata = copy_metadata(metadata)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def metadata(self) -> dict[str, str]:
        """A fresh copy of the record's metadata on every access."""
        return dict(self._metadata)
