"""Process-local cache of bucket name -> region token."""
import logging
import threading
from typing import Dict, Optional

logger = logging.getLogger(__name__)


def normalize_bucket_name(bucket_name: str) -> str:
    return bucket_name.lower()


class EndpointCache:
    """Thread-safe mapping of bucket names to the region token serving them.

    Keys are normalized to lower case. Only the region token is stored; the
    base URL is derived per request because its shape depends on the
    operation.
    """

    def __init__(self):
        self._cache: Dict[str, str] = {}
        self._lock = threading.RLock()

    def get(self, bucket_name: str) -> Optional[str]:
        """Get the cached region token for a bucket.

        Args:
            bucket_name: Bucket name in any case

        Returns:
            Region token if cached, None otherwise
        """
        with self._lock:
            return self._cache.get(normalize_bucket_name(bucket_name))

    def set(self, bucket_name: str, region: str):
        with self._lock:
            self._cache[normalize_bucket_name(bucket_name)] = region
        logger.debug(f"Cached region {region} for bucket {bucket_name}")

    def refresh(self, bucket_name: str, region: str) -> bool:
        """Update an existing entry; never recreates one removed in the meantime.

        Returns:
            True if the entry was present and updated
        """
        key = normalize_bucket_name(bucket_name)
        with self._lock:
            if key not in self._cache:
                return False
            self._cache[key] = region
            return True

    def remove(self, bucket_name: str) -> bool:
        """Invalidate the entry for a bucket; removing an absent entry is a no-op.

        Returns:
            True if an entry was found and removed
        """
        with self._lock:
            removed = self._cache.pop(normalize_bucket_name(bucket_name), None) is not None
        if removed:
            logger.debug(f"Invalidated cached region for bucket {bucket_name}")
        return removed

    def clear(self):
        with self._lock:
            self._cache.clear()

    def __contains__(self, bucket_name: str) -> bool:
        with self._lock:
            return normalize_bucket_name(bucket_name) in self._cache

    def __len__(self) -> int:
        with self._lock:
            return len(self._cache)
