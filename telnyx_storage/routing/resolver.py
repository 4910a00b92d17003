"""Resolution of the regional base URL a bucket's requests must target."""
import asyncio
import logging
from typing import Dict, Optional

from ..metrics import record_cache_access
from ..models.conditional import ConditionalValue
from ..utils.errors import StorageError
from .cache import EndpointCache, normalize_bucket_name
from .location import LocationLookup

logger = logging.getLogger(__name__)


class EndpointResolver:
    """Maps a bucket name to the base URL of the regional endpoint serving it.

    Only buckets with a cached region are resolvable; a cache miss yields no
    value without contacting the provider. With ``verify_cached=True`` a cache
    hit is confirmed by a fresh location lookup before it is used, and the
    cached token is refreshed from the answer. Concurrent lookups for the same
    bucket share a single request.
    """

    def __init__(
        self,
        lookup: LocationLookup,
        cache: EndpointCache,
        domain: str,
        scheme: str = "https",
        verify_cached: bool = True
    ):
        self.lookup = lookup
        self.cache = cache
        self.domain = domain
        self.scheme = scheme
        self.verify_cached = verify_cached
        self._inflight: Dict[str, asyncio.Future] = {}

    def endpoint_for(self, region: str, bucket_name: Optional[str] = None) -> str:
        """Build the base URL for a region, optionally with the bucket as leading host label."""
        if bucket_name:
            return f"{self.scheme}://{normalize_bucket_name(bucket_name)}.{region}.{self.domain}"
        return f"{self.scheme}://{region}.{self.domain}"

    async def resolve(self, bucket_name: str, include_bucket_label: bool = True) -> ConditionalValue[str]:
        """Resolve the base URL for a bucket.

        Args:
            bucket_name: Name of the bucket
            include_bucket_label: Whether the bucket name leads the host name

        Returns:
            ConditionalValue holding the base URL, or empty if the bucket cannot be
            routed (including when the verifying lookup fails)
        """
        region = self.cache.get(bucket_name)
        record_cache_access(region is not None)
        if region is None:
            logger.debug(f"No cached endpoint for bucket {bucket_name}")
            return ConditionalValue()

        if self.verify_cached:
            try:
                region = await self._lookup_once(bucket_name)
            except StorageError as e:
                logger.debug(f"Location lookup for bucket {bucket_name} failed: {e.kind.value}: {str(e)}")
                return ConditionalValue()
            if region is None:
                return ConditionalValue()
            if not self.cache.refresh(bucket_name, region):
                logger.debug(f"Bucket {bucket_name} was invalidated during lookup")
                return ConditionalValue()

        label = bucket_name if include_bucket_label else None
        return ConditionalValue(self.endpoint_for(region, label))

    async def _lookup_once(self, bucket_name: str) -> Optional[str]:
        key = normalize_bucket_name(bucket_name)
        pending = self._inflight.get(key)
        if pending is None:
            pending = asyncio.ensure_future(self.lookup.lookup_region(key))
            self._inflight[key] = pending
            pending.add_done_callback(lambda done: self._forget(key, done))
        else:
            logger.debug(f"Joining in-flight location lookup for bucket {bucket_name}")
        return await asyncio.shield(pending)

    def _forget(self, key: str, done: asyncio.Future):
        # waiters may all have been cancelled; consume the outcome
        if not done.cancelled():
            done.exception()
        if self._inflight.get(key) is done:
            del self._inflight[key]
