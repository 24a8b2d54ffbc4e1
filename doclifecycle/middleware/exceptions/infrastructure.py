"""Infrastructure-related exceptions."""

from typing import Any, Dict, Optional

from . import DocumentLifecycleError, ErrorKind


class InfrastructureError(DocumentLifecycleError):
    """Failure attributable to an external collaborator.

    Wraps the original failure as ``cause`` (also chained as ``__cause__``)
    together with a short label of the operation that was invoked.
    """

    kind = ErrorKind.INFRASTRUCTURE
    prefix = ""

    def __init__(
        self,
        operation: str,
        cause: Optional[BaseException] = None,
        message: Optional[str] = None,
        code: str = "INFRASTRUCTURE_ERROR",
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(
            message=message or f"{self.prefix}{operation}",
            code=code,
            details={"operation": operation, **(details or {})},
            status_code=500,  # Internal Server Error
        )
        self.operation = operation
        self.cause = cause
        self.__cause__ = cause

    @classmethod
    def unexpected(
        cls, operation: str, cause: Optional[BaseException] = None
    ) -> "InfrastructureError":
        """Generic fallback for failures no collaborator family recognizes."""
        return InfrastructureError(
            operation,
            cause,
            message=f"Unexpected error in {operation}",
            code="UNEXPECTED_ERROR",
        )


class StorageError(InfrastructureError):
    """Object storage client failure."""

    kind = ErrorKind.STORAGE
    prefix = "Storage error: "

    def __init__(
        self,
        operation: str,
        cause: Optional[BaseException] = None,
        code: str = "STORAGE_ERROR",
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(operation, cause, code=code, details=details)


class SearchError(InfrastructureError):
    """Search index client failure."""

    kind = ErrorKind.SEARCH
    prefix = "Search error: "

    def __init__(
        self,
        operation: str,
        cause: Optional[BaseException] = None,
        code: str = "SEARCH_ERROR",
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(operation, cause, code=code, details=details)


class OcrError(InfrastructureError):
    """OCR engine failure."""

    kind = ErrorKind.OCR
    prefix = "OCR error: "

    def __init__(
        self,
        operation: str,
        cause: Optional[BaseException] = None,
        code: str = "OCR_ERROR",
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(operation, cause, code=code, details=details)


class MessagingError(InfrastructureError):
    """Message broker client failure."""

    kind = ErrorKind.MESSAGING
    prefix = "Messaging error: "

    def __init__(
        self,
        operation: str,
        cause: Optional[BaseException] = None,
        code: str = "MESSAGING_ERROR",
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(operation, cause, code=code, details=details)
