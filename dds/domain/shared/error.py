"""Error hierarchy for DDS.

Error layers:
- DDSError: Base class for all DDS errors
- DomainError: Business rule violations, validation failures
- InfrastructureError: System-level failures like misconfiguration

The CLI maps these errors to a message on stderr and a non-zero exit status.
"""


class DDSError(Exception):
    """Base class for all DDS errors."""

    def __init__(self, message: str, code: str | None = None) -> None:
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(message)


# =============================================================================
# Domain Errors (business logic violations)
# =============================================================================


class DomainError(DDSError):
    """Base class for domain/business errors."""


class ValidationError(DomainError):
    """Input validation failed."""

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message, code="VALIDATION_ERROR")
        self.field = field


# =============================================================================
# Infrastructure Errors (system-level failures)
# =============================================================================


class InfrastructureError(DDSError):
    """Base class for infrastructure/system errors."""


class ConfigurationError(InfrastructureError):
    """System misconfiguration detected."""
