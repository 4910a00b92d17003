"""Utility modules for the storage client."""

from .xml import (
    S3_NAMESPACE,
    parse_xml,
    unparse_xml,
    get_nested_value,
    parse_location_constraint,
    parse_timestamp,
    parse_http_date
)

from .errors import (
    ErrorKind,
    StorageError,
    ValidityFailure,
    TargetNotFound,
    TargetAlreadyExists,
    ProviderError,
    UnexpectedResponse,
    log_storage_errors
)

from .validation import (
    BUCKET_NAME_VALIDITY_MESSAGE,
    is_bucket_name_valid
)

__all__ = [
    # XML handling
    'S3_NAMESPACE',
    'parse_xml',
    'unparse_xml',
    'get_nested_value',
    'parse_location_constraint',
    'parse_timestamp',
    'parse_http_date',

    # Error handling
    'ErrorKind',
    'StorageError',
    'ValidityFailure',
    'TargetNotFound',
    'TargetAlreadyExists',
    'ProviderError',
    'UnexpectedResponse',
    'log_storage_errors',

    # Validation
    'BUCKET_NAME_VALIDITY_MESSAGE',
    'is_bucket_name_valid'
]
