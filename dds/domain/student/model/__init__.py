"""Student domain model."""

from dds.domain.student.model.value import Student, copy_metadata

__all__ = ["Student", "copy_metadata"]
