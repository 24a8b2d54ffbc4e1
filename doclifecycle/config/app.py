import os
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, Field

from ..middleware.logging import logger


class AppConfig(BaseModel):
    """Application configuration."""

    app_env: str = Field(
        description="Application environment (local, dev or prod)"
    )
    version: str = Field(default="unknown", description="Application version")
    document_bucket_name: str = Field(
        default="document-lifecycle-store",
        description="Name of the S3 bucket for document storage",
    )
    elasticsearch_url: str = Field(
        default="http://localhost:9200", description="Elasticsearch endpoint"
    )
    search_index_name: str = Field(
        default="documents", description="Name of the search index"
    )
    ocr_language: str = Field(default="eng", description="Tesseract language code")
    kafka_bootstrap_servers: str = Field(
        default="localhost:9092", description="Kafka bootstrap servers"
    )
    event_topic: str = Field(
        default="document-events", description="Topic for document lifecycle events"
    )

    @classmethod
    def from_env(cls) -> "AppConfig":
        """Build the collaborator settings (bucket, search index, OCR language,
        event topic) from the environment.

        APP_ENV=local, the default, overlays a .env file for running against
        local storage, search and Kafka containers. dev and prod read the
        process environment as is. Unset variables keep the field defaults.
        """

        app_env = os.getenv("APP_ENV", "local").lower()
        logger.debug("App environment", extra={"app_env": app_env})
        if app_env == "local":
            dotenv_path = Path(".env")
            load_dotenv(dotenv_path=dotenv_path, override=True)
            logger.debug("Loaded .env file", extra={"dotenv_path": str(dotenv_path)})
        elif app_env not in ["dev", "prod"]:
            raise ValueError(f"Invalid app environment: {app_env}")

        defaults = cls.model_fields
        return cls(
            app_env=app_env,
            version=os.getenv("VERSION", "unknown"),
            document_bucket_name=os.getenv(
                "DOCUMENT_BUCKET_NAME", defaults["document_bucket_name"].default
            ),
            elasticsearch_url=os.getenv(
                "ELASTICSEARCH_URL", defaults["elasticsearch_url"].default
            ),
            search_index_name=os.getenv(
                "SEARCH_INDEX_NAME", defaults["search_index_name"].default
            ),
            ocr_language=os.getenv("OCR_LANGUAGE", defaults["ocr_language"].default),
            kafka_bootstrap_servers=os.getenv(
                "KAFKA_BOOTSTRAP_SERVERS", defaults["kafka_bootstrap_servers"].default
            ),
            event_topic=os.getenv("EVENT_TOPIC", defaults["event_topic"].default),
        )
