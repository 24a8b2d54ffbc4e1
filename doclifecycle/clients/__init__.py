"""Infrastructure collaborator clients."""

from .messaging import EventPublisher, KafkaEventPublisher
from .ocr import OcrEngine, TesseractOcrEngine
from .search import ElasticsearchSearchClient, SearchClient
from .storage import S3StorageClient, StorageClient

__all__ = [
    "StorageClient",
    "S3StorageClient",
    "SearchClient",
    "ElasticsearchSearchClient",
    "OcrEngine",
    "TesseractOcrEngine",
    "EventPublisher",
    "KafkaEventPublisher",
]
