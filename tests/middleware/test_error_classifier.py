"""Unit tests for the infrastructure error classifier."""

import unittest
from abc import ABC, abstractmethod
from unittest.mock import MagicMock, patch

import elasticsearch
import pytesseract
from aiokafka.errors import KafkaConnectionError
from botocore.exceptions import ClientError, EndpointConnectionError

from doclifecycle.middleware.error_classifier import (
    InfrastructureClient,
    classify,
    infrastructure_boundary,
)
from doclifecycle.middleware.exceptions import (
    DocumentNotFoundError,
    IllegalStateTransitionError,
    InfrastructureError,
    MessagingError,
    OcrError,
    SearchError,
    StorageError,
)


def _client_error() -> ClientError:
    return ClientError(
        {"Error": {"Code": "NoSuchBucket", "Message": "The bucket does not exist"}},
        "PutObject",
    )


class TestClassify(unittest.TestCase):
    """Test cases for classify()."""

    def test_already_classified_passes_through(self):
        """Test a prior domain error is returned unchanged."""
        error = DocumentNotFoundError("doc-1")

        self.assertIs(error, classify(error, "Repo.get"))

    def test_already_classified_infrastructure_passes_through(self):
        error = StorageError("Inner.call", _client_error())

        result = classify(error, "Outer.call")

        self.assertIs(error, result)
        self.assertEqual("Storage error: Inner.call", result.message)

    def test_storage_failures(self):
        for cause in (_client_error(), EndpointConnectionError(endpoint_url="http://s3")):
            with self.subTest(cause=type(cause).__name__):
                result = classify(cause, "StorageClient.putObject")

                self.assertIsInstance(result, StorageError)
                self.assertTrue(result.message.startswith("Storage error: "))
                self.assertEqual("Storage error: StorageClient.putObject", result.message)
                self.assertIs(cause, result.cause)
                self.assertIs(cause, result.__cause__)

    def test_search_failures(self):
        causes = (
            elasticsearch.ConnectionError("Connection refused"),
            elasticsearch.ApiError("index_not_found", meta=MagicMock(status=404), body={}),
        )
        for cause in causes:
            with self.subTest(cause=type(cause).__name__):
                result = classify(cause, "SearchClient.index")

                self.assertIsInstance(result, SearchError)
                self.assertEqual("Search error: SearchClient.index", result.message)
                self.assertIs(cause, result.cause)

    def test_ocr_failures(self):
        causes = (
            pytesseract.TesseractError(1, "Error opening data file"),
            pytesseract.TesseractNotFoundError(),
        )
        for cause in causes:
            with self.subTest(cause=type(cause).__name__):
                result = classify(cause, "OcrEngine.extract_text")

                self.assertIsInstance(result, OcrError)
                self.assertEqual("OCR error: OcrEngine.extract_text", result.message)
                self.assertIs(cause, result.cause)

    def test_messaging_failures(self):
        cause = KafkaConnectionError("broker unavailable")

        result = classify(cause, "EventPublisher.publish")

        self.assertIsInstance(result, MessagingError)
        self.assertEqual("Messaging error: EventPublisher.publish", result.message)
        self.assertIs(cause, result.cause)

    def test_unrecognized_failure(self):
        cause = ZeroDivisionError("division by zero")

        result = classify(cause, "Worker.compute")

        self.assertIs(type(result), InfrastructureError)
        self.assertEqual("Unexpected error in Worker.compute", result.message)
        self.assertIs(cause, result.cause)

    def test_custom_rules(self):
        """Test the rule set can be supplied explicitly."""
        result = classify(KeyError("k"), "Cache.get", rules=(((KeyError,), StorageError),))

        self.assertIsInstance(result, StorageError)


class TestInfrastructureBoundary(unittest.TestCase):
    """Test cases for the infrastructure_boundary decorator."""

    def setUp(self):
        self.logger_patch = patch("doclifecycle.middleware.error_classifier.logger")
        self.mock_logger = self.logger_patch.start()

    def tearDown(self):
        self.logger_patch.stop()

    def test_result_passes_through(self):
        sentinel = object()

        @infrastructure_boundary("Store.read")
        def read():
            return sentinel

        self.assertIs(sentinel, read())
        self.mock_logger.error.assert_not_called()

    def test_storage_failure_surfaces_classified_with_cause(self):
        """Test a storage-client failure reaches the caller as StorageError."""
        cause = _client_error()

        @infrastructure_boundary("StorageClient.putObject")
        def put():
            raise cause

        with self.assertRaises(StorageError) as context:
            put()

        self.assertIs(cause, context.exception.__cause__)
        self.assertIs(cause, context.exception.cause)
        self.mock_logger.error.assert_called_once()
        args, kwargs = self.mock_logger.error.call_args
        self.assertIn("Storage error: StorageClient.putObject", args[0])
        self.assertIs(context.exception, kwargs["exc_info"])
        self.assertEqual("StorageClient.putObject", kwargs["extra"]["operation"])

    def test_domain_error_is_not_logged(self):
        error = IllegalStateTransitionError("FAILED", "PROCESS_START")

        @infrastructure_boundary("Orchestrator.step")
        def step():
            raise error

        with self.assertRaises(IllegalStateTransitionError) as context:
            step()

        self.assertIs(error, context.exception)
        self.mock_logger.error.assert_not_called()

    def test_nested_boundaries_log_once(self):
        """Test re-propagation through an outer boundary neither wraps nor logs again."""
        cause = pytesseract.TesseractError(1, "failed")

        @infrastructure_boundary("Ocr.inner")
        def inner():
            raise cause

        @infrastructure_boundary("Pipeline.outer")
        def outer():
            return inner()

        with self.assertRaises(OcrError) as context:
            outer()

        self.assertEqual("OCR error: Ocr.inner", context.exception.message)
        self.assertIs(cause, context.exception.cause)
        self.mock_logger.error.assert_called_once()

    def test_wraps_preserves_metadata(self):
        @infrastructure_boundary("Store.read")
        def read():
            """Read docstring."""

        self.assertEqual("read", read.__name__)
        self.assertEqual("Read docstring.", read.__doc__)
        self.assertEqual("Store.read", read.__infrastructure_operation__)


class TestInfrastructureBoundaryAsync(unittest.IsolatedAsyncioTestCase):
    """Test cases for infrastructure_boundary on coroutine functions."""

    def setUp(self):
        self.logger_patch = patch("doclifecycle.middleware.error_classifier.logger")
        self.mock_logger = self.logger_patch.start()

    def tearDown(self):
        self.logger_patch.stop()

    async def test_async_result_passes_through(self):
        @infrastructure_boundary("Publisher.publish")
        async def publish():
            return 42

        self.assertEqual(42, await publish())

    async def test_async_failure_is_classified(self):
        cause = KafkaConnectionError("broker unavailable")

        @infrastructure_boundary("Publisher.publish")
        async def publish():
            raise cause

        with self.assertRaises(MessagingError) as context:
            await publish()

        self.assertIs(cause, context.exception.__cause__)
        self.mock_logger.error.assert_called_once()


class _Store(InfrastructureClient, ABC):
    @abstractmethod
    def fetch(self, key): ...


class _FailingStore(_Store):
    def __init__(self, error):
        self.error = error

    def fetch(self, key):
        raise self.error

    def ping(self):
        return "pong"

    def _internal(self):
        raise self.error


class TestInfrastructureClient(unittest.TestCase):
    """Test cases for automatic wrapping of client subclasses."""

    def setUp(self):
        self.logger_patch = patch("doclifecycle.middleware.error_classifier.logger")
        self.mock_logger = self.logger_patch.start()

    def tearDown(self):
        self.logger_patch.stop()

    def test_public_methods_are_wrapped_with_class_label(self):
        store = _FailingStore(_client_error())

        with self.assertRaises(StorageError) as context:
            store.fetch("key")

        self.assertEqual("Storage error: _FailingStore.fetch", context.exception.message)
        self.assertEqual(
            "_FailingStore.fetch", _FailingStore.fetch.__infrastructure_operation__
        )

    def test_successful_calls_untouched(self):
        self.assertEqual("pong", _FailingStore(RuntimeError()).ping())

    def test_private_methods_are_not_wrapped(self):
        store = _FailingStore(RuntimeError("raw"))

        with self.assertRaises(RuntimeError):
            store._internal()

    def test_abstract_interface_still_enforced(self):
        with self.assertRaises(TypeError):
            _Store()


if __name__ == "__main__":
    unittest.main()
