"""Document domain model."""

from datetime import datetime, timezone
from uuid import UUID

from pydantic import BaseModel, Field

from ...lifecycle.state_machine import transition
from ...middleware.exceptions import DocumentValidationError
from .enums import DocumentLifecycleState
from .event import DocumentEvent


class Document(BaseModel):
    """A document moving through the save/process/index pipeline.

    Attributes:
        id: Unique document identifier
        state: Current lifecycle state
        updated_at: Timestamp of the last applied event
    """

    id: UUID = Field(..., description="Unique document identifier")
    state: DocumentLifecycleState = Field(
        default=DocumentLifecycleState.CREATED, description="Current lifecycle state"
    )
    updated_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Timestamp of the last applied event",
    )

    def apply(self, event: DocumentEvent) -> "Document":
        """Return a copy of the document with ``event`` applied.

        Args:
            event: Event addressed to this document

        Returns:
            New Document in the next lifecycle state

        Raises:
            DocumentValidationError: If the event belongs to another document
            IllegalStateTransitionError: If the event is not accepted in the current state
        """
        if event.document_id != self.id:
            raise DocumentValidationError(
                f"event for {event.document_id} applied to document {self.id}",
                field="document_id",
            )
        return self.model_copy(
            update={
                "state": transition(self.state, event.event_type),
                "updated_at": datetime.now(timezone.utc),
            }
        )

    @property
    def is_terminal(self) -> bool:
        return self.state.is_terminal
