"""Search index collaborator."""

from abc import ABC, abstractmethod
from typing import Any, Dict
from uuid import UUID

from elasticsearch import Elasticsearch

from ..config.app import AppConfig
from ..middleware.error_classifier import InfrastructureClient
from ..middleware.logging import logger


class SearchClient(InfrastructureClient, ABC):
    """Interface for search index operations."""

    @abstractmethod
    def index_document(self, document_id: UUID, body: Dict[str, Any]) -> None:
        """Add or replace the searchable representation of a document."""

    @abstractmethod
    def delete_document(self, document_id: UUID) -> None:
        """Remove a document from the index."""


class ElasticsearchSearchClient(SearchClient):
    """Client wrapper for Elasticsearch operations."""

    def __init__(self, config: AppConfig) -> None:
        self.config = config
        self.es = Elasticsearch(config.elasticsearch_url)
        self.index = config.search_index_name

    def index_document(self, document_id: UUID, body: Dict[str, Any]) -> None:
        """Index a document.

        Args:
            document_id: Document identifier, used as the index document id
            body: Searchable fields
        """
        self.es.index(
            index=self.index,
            id=str(document_id),
            document={"document_id": str(document_id), **body},
        )
        logger.debug(
            "Indexed document",
            extra={"index": self.index, "document_id": str(document_id)},
        )

    def delete_document(self, document_id: UUID) -> None:
        self.es.delete(index=self.index, id=str(document_id))
