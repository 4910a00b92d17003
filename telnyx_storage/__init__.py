"""Async client for Telnyx Cloud Storage, an S3-compatible object store."""

from .client import TelnyxStorageClient
from .config import StorageConfig
from .models import (
    ConditionalValue,
    LocationConstraint,
    ListAllMyBucketsResult,
    ListBucketResult,
    HeadObjectResponse
)
from .transport import AiohttpTransport, TransportResponse
from .utils.errors import (
    ErrorKind,
    StorageError,
    ValidityFailure,
    TargetNotFound,
    TargetAlreadyExists,
    ProviderError,
    UnexpectedResponse
)

__version__ = "0.1.0"

__all__ = [
    'TelnyxStorageClient',
    'StorageConfig',
    'ConditionalValue',
    'LocationConstraint',
    'ListAllMyBucketsResult',
    'ListBucketResult',
    'HeadObjectResponse',
    'AiohttpTransport',
    'TransportResponse',
    'ErrorKind',
    'StorageError',
    'ValidityFailure',
    'TargetNotFound',
    'TargetAlreadyExists',
    'ProviderError',
    'UnexpectedResponse'
]
