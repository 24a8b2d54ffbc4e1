"""Domain models for the document lifecycle."""

from .enums import DocumentEventType, DocumentLifecycleState
from .event import DocumentEvent

__all__ = [
    "DocumentLifecycleState",
    "DocumentEventType",
    "DocumentEvent",
]
