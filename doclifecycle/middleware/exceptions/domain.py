"""Domain logic related exceptions."""

from enum import Enum
from typing import Any, Dict, Optional, Union

from . import DocumentLifecycleError, ErrorKind


def _name(value: Union[str, Enum]) -> str:
    return value.name if isinstance(value, Enum) else str(value)


class DomainError(DocumentLifecycleError):
    """Base class for caller and logic errors. Never retryable."""

    def __init__(
        self,
        message: str,
        code: str,
        details: Optional[Dict[str, Any]] = None,
        status_code: int = 422,  # Unprocessable Entity
    ):
        super().__init__(
            message=message,
            code=code,
            details=details,
            status_code=status_code,
        )


class DocumentNotFoundError(DomainError):
    """Error when a document does not exist."""

    kind = ErrorKind.NOT_FOUND

    def __init__(
        self,
        document_id: Any,
        code: str = "DOCUMENT_NOT_FOUND",
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(
            message=f"Document not found: {document_id}",
            code=code,
            details={"document_id": str(document_id), **(details or {})},
            status_code=404,
        )
        self.document_id = document_id


class IllegalStateTransitionError(DomainError):
    """Errors for events that are not accepted in the current state."""

    kind = ErrorKind.ILLEGAL_STATE_TRANSITION

    def __init__(
        self,
        state: Union[str, Enum],
        event: Union[str, Enum],
        code: str = "ILLEGAL_STATE_TRANSITION",
        details: Optional[Dict[str, Any]] = None,
    ):
        self.state = _name(state)
        self.event = _name(event)
        super().__init__(
            message=f"Cannot transition from state '{self.state}' with event '{self.event}'",
            code=code,
            details={"state": self.state, "event": self.event, **(details or {})},
        )


class DocumentValidationError(DomainError):
    """Errors for invalid caller input."""

    kind = ErrorKind.VALIDATION

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        code: str = "VALIDATION_ERROR",
        details: Optional[Dict[str, Any]] = None,
    ):
        text = f"{field}: {message}" if field else message
        super().__init__(
            message=f"Validation error: {text}",
            code=code,
            details={"field": field, **(details or {})} if field else details,
            status_code=400,
        )
        self.field = field
        self.reason = message
