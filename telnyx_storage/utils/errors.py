"""Error handling utilities for the storage client."""

import logging
from enum import Enum
from functools import wraps
from typing import Optional

from ..metrics import track_operation

logger = logging.getLogger(__name__)


class ErrorKind(Enum):
    """Tag carried by every storage error so callers can branch without isinstance chains."""
    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    ALREADY_EXISTS = "already_exists"
    PROVIDER = "provider"
    UNEXPECTED = "unexpected"


class StorageError(Exception):
    """Base class for storage client errors."""
    def __init__(self, message, kind=ErrorKind.UNEXPECTED):
        super().__init__(message)
        self.message = message
        self.kind = kind


class ValidityFailure(StorageError):
    """A request argument failed syntactic validation before any network call."""
    def __init__(self, message):
        super().__init__(message, ErrorKind.VALIDATION)


class TargetNotFound(StorageError):
    """Bucket, object or bucket endpoint does not exist or is not accessible."""
    def __init__(self, target):
        super().__init__(f"The specified target does not exist: {target}", ErrorKind.NOT_FOUND)
        self.target = target


class TargetAlreadyExists(StorageError):
    """Create conflicted with an existing bucket or object."""
    def __init__(self, target):
        super().__init__(f"The requested target already exists: {target}", ErrorKind.ALREADY_EXISTS)
        self.target = target


class ProviderError(StorageError):
    """The provider answered with an <Error> envelope.

    The code, request id and host id are the provider's own diagnostic
    identifiers and are kept verbatim.
    """
    def __init__(self, code: str, request_id: Optional[str] = None, host_id: Optional[str] = None):
        super().__init__(code, ErrorKind.PROVIDER)
        self.code = code
        self.request_id = request_id
        self.host_id = host_id

    def __str__(self):
        return f"{self.code} (request id: {self.request_id}, host id: {self.host_id})"


class UnexpectedResponse(StorageError):
    """Any other non-success status; the raw body is surfaced as-is."""
    def __init__(self, status: int, body: str):
        super().__init__(body or f"Unexpected response status {status}", ErrorKind.UNEXPECTED)
        self.status = status
        self.body = body


def log_storage_errors(f):
    """Decorator that logs storage errors raised by a client coroutine and re-raises them.

    Latency and outcome of every call are recorded as operation metrics.
    """
    @wraps(f)
    async def wrapped(*args, **kwargs):
        with track_operation(f.__name__):
            try:
                return await f(*args, **kwargs)
            except StorageError as e:
                logger.error(f"Storage error in {f.__name__}: {e.kind.value}: {str(e)}")
                raise
    return wrapped
