"""Exception handling for the document lifecycle core."""

from enum import Enum
from typing import Any, Dict, Optional


class ErrorKind(str, Enum):
    """Closed set of error categories raised by the lifecycle core.

    Inherits from str to ensure JSON serialization works correctly.
    """

    # Infrastructure errors
    STORAGE = "storage"
    SEARCH = "search"
    OCR = "ocr"
    MESSAGING = "messaging"
    INFRASTRUCTURE = "infrastructure"

    # Domain errors
    NOT_FOUND = "not_found"
    ILLEGAL_STATE_TRANSITION = "illegal_state_transition"
    VALIDATION = "validation"

    @property
    def is_infrastructure(self) -> bool:
        return self in _INFRASTRUCTURE_KINDS

    @property
    def retryable(self) -> bool:
        """Infrastructure failures may be transient, domain failures never are."""
        return self.is_infrastructure

    @classmethod
    def from_exception(cls, e: BaseException) -> "ErrorKind":
        """Map an exception to its kind, unknown exceptions are infrastructure."""
        if isinstance(e, DocumentLifecycleError) and e.kind is not None:
            return e.kind
        return ErrorKind.INFRASTRUCTURE


_INFRASTRUCTURE_KINDS = frozenset(
    {
        ErrorKind.STORAGE,
        ErrorKind.SEARCH,
        ErrorKind.OCR,
        ErrorKind.MESSAGING,
        ErrorKind.INFRASTRUCTURE,
    }
)


class DocumentLifecycleError(Exception):
    """Base exception for all document lifecycle errors."""

    # Set by each concrete error; the bare root is unclassified
    kind: Optional[ErrorKind] = None

    def __init__(
        self,
        message: str,
        code: str,
        details: Optional[Dict[str, Any]] = None,
        status_code: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}
        self.status_code = status_code

    @property
    def retryable(self) -> bool:
        return self.kind is not None and self.kind.retryable


from .domain import (
    DocumentNotFoundError,
    DocumentValidationError,
    DomainError,
    IllegalStateTransitionError,
)
from .infrastructure import (
    InfrastructureError,
    MessagingError,
    OcrError,
    SearchError,
    StorageError,
)

__all__ = [
    # Base
    "ErrorKind",
    "DocumentLifecycleError",
    # Infrastructure Errors
    "InfrastructureError",
    "StorageError",
    "SearchError",
    "OcrError",
    "MessagingError",
    # Domain Errors
    "DomainError",
    "DocumentNotFoundError",
    "IllegalStateTransitionError",
    "DocumentValidationError",
]
