"""Bucket-location-aware request routing."""

from .cache import EndpointCache, normalize_bucket_name
from .location import LocationLookup
from .resolver import EndpointResolver

__all__ = [
    'EndpointCache',
    'normalize_bucket_name',
    'LocationLookup',
    'EndpointResolver'
]
