"""Messaging collaborator."""

import asyncio
from abc import ABC, abstractmethod
from typing import Optional

from aiokafka import AIOKafkaProducer

from ..config.app import AppConfig
from ..middleware.error_classifier import InfrastructureClient
from ..middleware.logging import logger
from ..models.domain.event import DocumentEvent


class EventPublisher(InfrastructureClient, ABC):
    """Interface for publishing document events to a broker."""

    @abstractmethod
    async def publish(self, event: DocumentEvent) -> None:
        """Publish ``event`` for downstream consumers."""

    @abstractmethod
    async def close(self) -> None:
        """Release broker connections."""


class KafkaEventPublisher(EventPublisher):
    """Kafka event publisher, keyed by document id."""

    def __init__(self, config: AppConfig) -> None:
        self.config = config
        self.topic = config.event_topic
        self._producer: Optional[AIOKafkaProducer] = None
        self._lock = asyncio.Lock()

    async def _ensure_producer(self) -> AIOKafkaProducer:
        async with self._lock:
            if self._producer is None:
                producer = AIOKafkaProducer(
                    bootstrap_servers=self.config.kafka_bootstrap_servers
                )
                try:
                    await producer.start()
                except Exception:
                    await producer.stop()
                    raise
                self._producer = producer
        return self._producer

    async def publish(self, event: DocumentEvent) -> None:
        """Send the JSON-encoded event and wait for the broker acknowledgement.

        Args:
            event: Event to publish
        """
        producer = await self._ensure_producer()
        await producer.send_and_wait(
            self.topic,
            value=event.model_dump_json().encode("utf-8"),
            key=str(event.document_id).encode("utf-8"),
        )
        logger.debug(
            "Published document event",
            extra={
                "topic": self.topic,
                "document_id": str(event.document_id),
                "event_type": event.event_type.value,
            },
        )

    async def close(self) -> None:
        if self._producer is not None:
            await self._producer.stop()
            self._producer = None
