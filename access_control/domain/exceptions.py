"""Domain exceptions for the access-control service.

Defines domain-level exceptions that represent business rule violations.
These exceptions are independent of infrastructure concerns. Presentation
layer maps them to HTTP responses in exception handlers.
"""

from typing import Any


class AccessControlException(Exception):
    """Base exception for all access-control errors.

    All custom exceptions should inherit from this class to allow
    consistent error handling and logging. Presentation layer maps
    these to HTTP responses using message, error_code, and details.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. field, resource_id).
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Optional machine-readable code; defaults to class name.
            details: Optional dict of extra context.
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON body used by the HTTP exception handler."""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class ValidationException(AccessControlException):
    """Raised when input validation fails (e.g. invalid format or range)."""

    def __init__(self, message: str, field: str | None = None) -> None:
        """Initialize with message and optional field name.

        Args:
            message: Description of the validation failure.
            field: Optional field or attribute that failed validation.
        """
        details = {"field": field} if field else {}
        super().__init__(message, "VALIDATION_ERROR", details)


class AuthenticationException(AccessControlException):
    """Raised when the acting user cannot be resolved (no valid session)."""

    def __init__(self, message: str = "Authentication failed") -> None:
        """Initialize with optional message.

        Args:
            message: Description of the authentication failure.
        """
        super().__init__(message, "AUTHENTICATION_ERROR")


class ResourceNotFoundException(AccessControlException):
    """Raised when a requested resource is not found."""

    def __init__(self, resource_type: str, resource_id: str) -> None:
        """Initialize with resource type and id.

        Args:
            resource_type: Type of resource (e.g. 'role', 'permission').
            resource_id: The ID that was not found.
        """
        super().__init__(
            f"{resource_type} not found: {resource_id}",
            "RESOURCE_NOT_FOUND",
            {"resource_type": resource_type, "resource_id": resource_id},
        )


class DuplicateRoleCodeException(AccessControlException):
    """Raised when creating a role whose code already exists."""

    def __init__(self, code: str) -> None:
        """Initialize with the duplicate role code.

        Args:
            code: The role code that already exists.
        """
        super().__init__(
            f"Role with code '{code}' already exists",
            "DUPLICATE_ROLE_CODE",
            {"code": code},
        )


class PersistenceException(AccessControlException):
    """Raised when a storage operation fails for a reason other than a duplicate."""

    def __init__(self, operation: str, reason: str) -> None:
        """Initialize with the failing operation and reason.

        Args:
            operation: Short name of the storage operation (e.g. 'permission.get_or_create').
            reason: Underlying error text.
        """
        super().__init__(
            f"Storage operation failed: {operation}",
            "PERSISTENCE_ERROR",
            {"operation": operation, "reason": reason},
        )


class LinkingFailedException(AccessControlException):
    """Raised when the permission phase of role creation aborts mid-sequence.

    The role and everything processed before ``permission_code`` stay
    persisted; callers must not assume the role is absent.
    """

    def __init__(
        self,
        role_id: str,
        permission_code: str,
        processed_count: int,
        reason: str,
    ) -> None:
        """Initialize with the failing identifier and progress.

        Args:
            role_id: The role that was created before the failure.
            permission_code: Canonical permission identifier that failed.
            processed_count: Identifiers fully processed before the failure.
            reason: Underlying error text.
        """
        super().__init__(
            f"Linking permission '{permission_code}' to role failed",
            "LINKING_FAILED",
            {
                "role_id": role_id,
                "permission_code": permission_code,
                "processed_count": processed_count,
                "reason": reason,
            },
        )
        self.role_id = role_id
        self.permission_code = permission_code
        self.processed_count = processed_count


class SqlNotConfiguredException(AccessControlException):
    """Raised when an operation requires the SQL database but it is not configured."""

    def __init__(self) -> None:
        super().__init__(
            message="This operation requires a SQL database that is not configured.",
            error_code="SERVICE_UNAVAILABLE",
        )
