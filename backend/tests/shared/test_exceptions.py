"""Tests for shared/exceptions.py."""

import pytest

from shared.exceptions import (
    ConsoleError,
    NotFoundError,
    ValidationError,
    AuthenticationError,
    AuthorizationError,
    ExternalServiceError,
    RecordStoreError,
)


class TestConsoleError:
    def test_console_error_message(self):
        """ConsoleError should store message."""
        error = ConsoleError("Test error")
        assert error.message == "Test error"
        assert str(error) == "Test error"

    def test_console_error_default_code(self):
        """ConsoleError should default code to class name."""
        error = ConsoleError("Test error")
        assert error.code == "ConsoleError"

    def test_console_error_custom_code_and_details(self):
        """ConsoleError should accept custom code and details."""
        error = ConsoleError("Test error", code="CUSTOM", details={"key": "value"})
        assert error.code == "CUSTOM"
        assert error.details == {"key": "value"}

    def test_to_dict(self):
        """to_dict should produce the API error body."""
        error = ConsoleError("Test error", code="CUSTOM", details={"key": "value"})
        assert error.to_dict() == {
            "error": "CUSTOM",
            "message": "Test error",
            "details": {"key": "value"},
        }


class TestExceptionHierarchy:
    @pytest.mark.parametrize(
        "cls",
        [NotFoundError, ValidationError, AuthenticationError, AuthorizationError],
    )
    def test_subclasses_console_error(self, cls):
        """All base errors should be ConsoleErrors."""
        assert issubclass(cls, ConsoleError)

    def test_external_service_error_records_service(self):
        """ExternalServiceError should add service to details."""
        error = ExternalServiceError("Down", service="supabase")
        assert error.service == "supabase"
        assert error.details["service"] == "supabase"

    def test_record_store_error(self):
        """RecordStoreError should describe table and operation."""
        error = RecordStoreError("duplicate key", table="profiles", operation="update")
        assert isinstance(error, ExternalServiceError)
        assert error.code == "RECORD_STORE_ERROR"
        assert error.details == {
            "table": "profiles",
            "operation": "update",
            "service": "supabase",
        }
