"""Tests for domain exceptions (error_code, message, details)."""

from access_control.domain.exceptions import (
    AccessControlException,
    AuthenticationException,
    DuplicateRoleCodeException,
    LinkingFailedException,
    PersistenceException,
    ResourceNotFoundException,
    SqlNotConfiguredException,
    ValidationException,
)


def test_base_exception_default_error_code() -> None:
    """AccessControlException uses class name as error_code when not provided."""
    exc = AccessControlException("Something failed")
    assert exc.message == "Something failed"
    assert exc.error_code == "AccessControlException"
    assert exc.details == {}


def test_to_dict_shape() -> None:
    exc = AccessControlException("Oops", error_code="CUSTOM", details={"key": "value"})
    assert exc.to_dict() == {
        "error": "CUSTOM",
        "message": "Oops",
        "details": {"key": "value"},
    }


def test_validation_exception() -> None:
    """ValidationException sets VALIDATION_ERROR and optional field in details."""
    exc = ValidationException("Invalid format", field="code")
    assert exc.error_code == "VALIDATION_ERROR"
    assert exc.details == {"field": "code"}
    assert ValidationException("Bad").details == {}


def test_authentication_exception() -> None:
    exc = AuthenticationException()
    assert exc.message == "Authentication failed"
    assert exc.error_code == "AUTHENTICATION_ERROR"


def test_resource_not_found() -> None:
    exc = ResourceNotFoundException("role", "r1")
    assert exc.error_code == "RESOURCE_NOT_FOUND"
    assert exc.details == {"resource_type": "role", "resource_id": "r1"}
    assert "r1" in exc.message


def test_duplicate_role_code() -> None:
    exc = DuplicateRoleCodeException("admin")
    assert exc.error_code == "DUPLICATE_ROLE_CODE"
    assert exc.details == {"code": "admin"}


def test_persistence_exception_carries_operation_and_reason() -> None:
    exc = PersistenceException("permission.get_or_create", "disk full")
    assert exc.error_code == "PERSISTENCE_ERROR"
    assert exc.details == {"operation": "permission.get_or_create", "reason": "disk full"}


def test_linking_failed_exposes_progress() -> None:
    """LinkingFailedException names the failed code and how many were processed before it."""
    exc = LinkingFailedException("r1", "users:delete", 2, "fk violation")
    assert exc.error_code == "LINKING_FAILED"
    assert exc.role_id == "r1"
    assert exc.permission_code == "users:delete"
    assert exc.processed_count == 2
    assert exc.details["reason"] == "fk violation"


def test_sql_not_configured() -> None:
    assert SqlNotConfiguredException().error_code == "SERVICE_UNAVAILABLE"
