"""Data models for the storage client."""

from .conditional import ConditionalValue
from .constraints import LocationConstraint
from .requests import CreateBucketConfiguration, DeleteObjectsRequest
from .responses import (
    Owner,
    Bucket,
    ListAllMyBucketsResult,
    Content,
    ListBucketResult,
    ErrorResponse,
    HeadObjectResponse
)

__all__ = [
    'ConditionalValue',
    'LocationConstraint',
    'CreateBucketConfiguration',
    'DeleteObjectsRequest',
    'Owner',
    'Bucket',
    'ListAllMyBucketsResult',
    'Content',
    'ListBucketResult',
    'ErrorResponse',
    'HeadObjectResponse'
]
