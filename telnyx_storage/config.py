"""Configuration for the storage client."""
import os
from dataclasses import dataclass

from dotenv import load_dotenv

DEFAULT_DOMAIN = "telnyxcloudstorage.com"
DEFAULT_SCHEME = "https"
DEFAULT_REGION = "us-central-1"


@dataclass
class StorageConfig:
    """Settings used to build a storage client."""
    api_key: str
    domain: str = DEFAULT_DOMAIN
    scheme: str = DEFAULT_SCHEME
    default_region: str = DEFAULT_REGION

    # Re-verify a cached bucket location with a lookup before every request
    verify_cached_endpoints: bool = True

    @property
    def default_endpoint(self) -> str:
        """Endpoint for account-wide requests (list buckets, location lookups)."""
        return f"{self.scheme}://{self.default_region}.{self.domain}"

    @classmethod
    def from_env(cls) -> "StorageConfig":
        """Load settings from environment variables (and a .env file if present).

        Raises:
            ValueError: If TELNYX_API_KEY is not set
        """
        load_dotenv()

        api_key = os.getenv('TELNYX_API_KEY')
        if not api_key:
            raise ValueError(
                'Telnyx API key not found. Please set the TELNYX_API_KEY environment variable.'
            )

        return cls(
            api_key=api_key,
            domain=os.getenv('TELNYX_STORAGE_DOMAIN', DEFAULT_DOMAIN),
            scheme=os.getenv('TELNYX_STORAGE_SCHEME', DEFAULT_SCHEME),
            default_region=os.getenv('TELNYX_STORAGE_DEFAULT_REGION', DEFAULT_REGION),
            verify_cached_endpoints=os.getenv('TELNYX_STORAGE_VERIFY_CACHED_ENDPOINTS', 'True').lower() == 'true'
        )
