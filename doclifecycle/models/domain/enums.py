"""Domain enums for the document lifecycle."""

from enum import Enum


class DocumentLifecycleState(str, Enum):
    """Stage a document occupies in its save/process/index pipeline.

    Inherits from str to ensure JSON serialization works correctly.
    """

    CREATED = "created"
    PERSISTING_DATABASE = "persisting_database"
    PERSISTING_STORAGE = "persisting_storage"
    SAVED = "saved"
    PROCESSING = "processing"
    PROCESSED = "processed"
    INDEXED = "indexed"
    FAILED = "failed"

    @property
    def is_terminal(self) -> bool:
        """Terminal states accept no events."""
        return self in (DocumentLifecycleState.INDEXED, DocumentLifecycleState.FAILED)


class DocumentEventType(str, Enum):
    """Notification that a save, process or index step started, finished or failed.

    Inherits from str to ensure JSON serialization works correctly.
    """

    SAVE_TO_DATABASE = "save_to_database"
    SAVE_TO_STORAGE = "save_to_storage"
    SAVE_COMPLETE = "save_complete"
    PROCESS_START = "process_start"
    PROCESS_COMPLETE = "process_complete"
    PROCESS_FAILED = "process_failed"
    INDEX_COMPLETE = "index_complete"
