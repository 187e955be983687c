"""Error Hierarchy - typed, categorized exceptions for the user registry.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - ValidationError is 400-level (caller fault); PersistenceError is 500-level
    - to_response() produces the flat REST envelope {"error": <description>}
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with UserRegistryError base: one FastAPI handler catches all
    - code/category/severity kept on the exception for logs, not for the body
"""

from enum import Enum


class ErrorSeverity(str, Enum):
    """Error severity for observability."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    PERSISTENCE = "persistence"


class UserRegistryError(Exception):
    """Base exception for all user registry errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to REST error body."""
        return {"error": self.message}


class ValidationError(UserRegistryError):
    """Request body malformed or missing required fields."""
    def __init__(self, message: str):
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, 400,
        )


class PersistenceError(UserRegistryError):
    """Storage collaborator reported a failure."""
    def __init__(self, message: str, operation: str = "create"):
        super().__init__(
            message, "PERSISTENCE_ERROR", ErrorCategory.PERSISTENCE,
            ErrorSeverity.CRITICAL, 500,
        )
        self.operation = operation
