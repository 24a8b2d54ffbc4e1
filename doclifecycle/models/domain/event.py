"""Document event value type."""

from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

from .enums import DocumentEventType


class DocumentEvent(BaseModel):
    """An event about a single document.

    Attributes:
        document_id: Unique document identifier
        event_type: What happened to the document
        metadata: Event-specific payload (failure reason, storage path, ...).
            Carried for downstream consumers, never inspected by the state machine.
    """

    model_config = ConfigDict(frozen=True)

    document_id: UUID = Field(..., description="Unique document identifier")
    event_type: DocumentEventType = Field(..., description="Type of the event")
    metadata: Mapping[str, Any] = Field(
        default_factory=dict,
        validate_default=True,
        description="Event-specific payload",
    )

    @field_validator("metadata")
    @classmethod
    def freeze_metadata(cls, value: Mapping[str, Any]) -> Mapping[str, Any]:
        return MappingProxyType(dict(value))

    @field_serializer("metadata")
    def serialize_metadata(self, value: Mapping[str, Any]) -> Dict[str, Any]:
        return dict(value)

    @classmethod
    def of(
        cls,
        document_id: UUID,
        event_type: DocumentEventType,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> "DocumentEvent":
        """Build an event, defaulting to empty metadata."""
        return cls(
            document_id=document_id,
            event_type=event_type,
            metadata=metadata or {},
        )
