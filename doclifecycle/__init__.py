"""Document lifecycle state machine and infrastructure error classification."""

from .lifecycle import allowed_events, can_transition, replay, transition
from .middleware.error_classifier import (
    InfrastructureClient,
    classify,
    infrastructure_boundary,
)
from .middleware.exceptions import (
    DocumentLifecycleError,
    DocumentNotFoundError,
    DocumentValidationError,
    DomainError,
    ErrorKind,
    IllegalStateTransitionError,
    InfrastructureError,
    MessagingError,
    OcrError,
    SearchError,
    StorageError,
)
from .models.domain import DocumentEvent, DocumentEventType, DocumentLifecycleState
from .models.domain.document import Document

__version__ = "0.1.0"

__all__ = [
    "transition",
    "can_transition",
    "allowed_events",
    "replay",
    "classify",
    "infrastructure_boundary",
    "InfrastructureClient",
    "Document",
    "DocumentEvent",
    "DocumentEventType",
    "DocumentLifecycleState",
    "ErrorKind",
    "DocumentLifecycleError",
    "InfrastructureError",
    "StorageError",
    "SearchError",
    "OcrError",
    "MessagingError",
    "DomainError",
    "DocumentNotFoundError",
    "IllegalStateTransitionError",
    "DocumentValidationError",
]
