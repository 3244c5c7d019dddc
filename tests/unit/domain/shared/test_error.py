from dds.domain.shared.error import (
    ConfigurationError,
    DDSError,
    DomainError,
    InfrastructureError,
    ValidationError,
)


class TestErrorHierarchy:
    def test_code_defaults_to_class_name(self):
        error = ConfigurationError("bad config")

        assert error.code == "ConfigurationError"
        assert error.message == "bad config"
        assert str(error) == "bad config"
        assert isinstance(error, InfrastructureError)
        assert isinstance(error, DDSError)

    def test_validation_error_carries_field(self):
        error = ValidationError("invalid ISBN (empty)", field="isbn")

        assert error.code == "VALIDATION_ERROR"
        assert error.field == "isbn"
        assert isinstance(error, DomainError)
