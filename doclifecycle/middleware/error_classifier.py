"""Boundary interceptor that classifies failures of infrastructure collaborators."""

import functools
import inspect
from typing import Any, Callable, Sequence, Tuple, Type, TypeVar

from aiokafka.errors import KafkaError
from botocore.exceptions import BotoCoreError, ClientError
from elasticsearch import ApiError
from elasticsearch import TransportError as SearchTransportError
from pytesseract import TesseractError, TesseractNotFoundError

from .exceptions import (
    DocumentLifecycleError,
    InfrastructureError,
    MessagingError,
    OcrError,
    SearchError,
    StorageError,
)
from .logging import logger

F = TypeVar("F", bound=Callable[..., Any])

ClassificationRule = Tuple[Tuple[Type[BaseException], ...], Type[InfrastructureError]]

# Evaluated in order, first match wins
CLASSIFICATION_RULES: Sequence[ClassificationRule] = (
    ((ClientError, BotoCoreError), StorageError),
    ((ApiError, SearchTransportError), SearchError),
    ((TesseractError, TesseractNotFoundError), OcrError),
    ((KafkaError,), MessagingError),
)


def classify(
    error: BaseException,
    operation: str,
    rules: Sequence[ClassificationRule] = CLASSIFICATION_RULES,
) -> DocumentLifecycleError:
    """Translate ``error`` into the lifecycle error taxonomy.

    Already classified errors are returned unchanged so that nested
    boundaries never wrap twice.

    Args:
        error: The failure raised by the collaborator
        operation: Short label of the invoked operation, e.g. "S3StorageClient.put_object"
        rules: Ordered (exception types, error class) pairs

    Returns:
        The classified error, with the original failure preserved as its cause
    """
    if isinstance(error, DocumentLifecycleError):
        return error

    for exception_types, error_class in rules:
        if isinstance(error, exception_types):
            return error_class(operation, error)

    return InfrastructureError.unexpected(operation, error)


def _translate(error: Exception, operation: str) -> DocumentLifecycleError:
    classified = classify(error, operation)
    if classified is not error:
        logger.error(
            f"Operation failed: {classified.message}",
            exc_info=classified,
            extra={
                "operation": operation,
                "code": classified.code,
                "kind": classified.kind.value,
                "cause": f"{error.__class__.__name__}: {error}",
            },
        )
    return classified


def infrastructure_boundary(operation: str) -> Callable[[F], F]:
    """Decorator classifying any failure raised by the wrapped callable.

    Works for both plain and coroutine functions. Results pass through
    untouched; failures are logged once and re-raised in classified form.

    Args:
        operation: Label used in error messages and logs
    """

    def decorator(func: F) -> F:
        if inspect.iscoroutinefunction(func):

            @functools.wraps(func)
            async def async_wrapper(*args, **kwargs):
                try:
                    return await func(*args, **kwargs)
                except Exception as e:
                    classified = _translate(e, operation)
                    if classified is e:
                        raise
                    raise classified from e

            async_wrapper.__infrastructure_operation__ = operation  # type: ignore[attr-defined]
            return async_wrapper  # type: ignore[return-value]

        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except Exception as e:
                classified = _translate(e, operation)
                if classified is e:
                    raise
                raise classified from e

        wrapper.__infrastructure_operation__ = operation  # type: ignore[attr-defined]
        return wrapper  # type: ignore[return-value]

    return decorator


class InfrastructureClient:
    """Base class for collaborator clients.

    Every public method defined on a subclass is wrapped with
    :func:`infrastructure_boundary` once, when the class is created, using
    ``ClassName.method`` as the operation label.
    """

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        for name, attr in list(vars(cls).items()):
            if name.startswith("_") or not inspect.isfunction(attr):
                continue
            if getattr(attr, "__isabstractmethod__", False):
                continue
            if hasattr(attr, "__infrastructure_operation__"):
                continue
            setattr(cls, name, infrastructure_boundary(f"{cls.__name__}.{name}")(attr))
