"""Error Hierarchy — typed, categorized exceptions for the Products API.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - to_response() always produces {"error": "<message>"} (singular string)
    - Validation failures are NOT exceptions: the input-error gate answers them
      with {"errors": [...]} directly
    - A missing product is NOT an exception: handlers answer 404 explicitly
"""

from enum import Enum


class ErrorSeverity(str, Enum):
    """Error severity for observability."""
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    CORS = "cors"
    DATABASE = "database"


class ProductApiError(Exception):
    """Base exception for all Products API errors."""

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
        """Convert to the REST error envelope."""
        return {"error": self.message}


# ─── Request Errors (400-level) ─────────────────────────────────

class MalformedBodyError(ProductApiError):
    """Request body could not be parsed as JSON."""
    def __init__(self):
        super().__init__(
            "JSON no valido", "MALFORMED_BODY", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, 400,
        )


class CorsOriginError(ProductApiError):
    """Cross-origin caller is not on the allow-list."""
    def __init__(self, origin: str):
        super().__init__(
            "Error de cors", "CORS_REJECTED", ErrorCategory.CORS,
            ErrorSeverity.WARNING, 403,
        )
        self.origin = origin


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(ProductApiError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, 500,
        )
        self.operation = operation
