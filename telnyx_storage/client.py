"""Telnyx Cloud Storage client.

Every bucket- and object-scoped operation asks the endpoint resolver for the
regional base URL of its bucket before building the request. Listing buckets
and location lookups always go to the default endpoint.
"""

import base64
import hashlib
import logging
from pathlib import Path
from typing import Dict, List, Optional, Union
from urllib.parse import quote

from .config import StorageConfig
from .metrics import record_cache_invalidation
from .models.conditional import ConditionalValue
from .models.constraints import LocationConstraint
from .models.requests import CreateBucketConfiguration, DeleteObjectsRequest
from .models.responses import HeadObjectResponse, ListAllMyBucketsResult, ListBucketResult
from .routing.cache import EndpointCache
from .routing.location import LocationLookup
from .routing.resolver import EndpointResolver
from .transport import AiohttpTransport, TransportResponse
from .utils.errors import (
    TargetAlreadyExists,
    TargetNotFound,
    UnexpectedResponse,
    ValidityFailure,
    log_storage_errors
)
from .utils.validation import BUCKET_NAME_VALIDITY_MESSAGE, is_bucket_name_valid

logger = logging.getLogger(__name__)

AUTHORIZATION_TEMPLATE = "AWS4-HMAC-SHA256 Credential={api_key}/useast-1-execute-api-aws2_request"
OCTET_STREAM = "application/octet-stream"
SERVER_SIDE_ENCRYPTION = {"x-amz-server-side-encryption": "1"}
XML_CONTENT_TYPE = "application/xml"


class TelnyxStorageClient:
    """Async client for the Telnyx S3-compatible storage API."""

    def __init__(self, config: StorageConfig, transport=None):
        """Initialize the client.

        Args:
            config: Credentials and endpoint settings
            transport: Object with an async ``request(method, url, headers, data)``;
                defaults to an aiohttp transport
        """
        self.config = config
        self.transport = transport or AiohttpTransport()
        self.endpoint_cache = EndpointCache()
        self.location_lookup = LocationLookup(self._send, config.default_endpoint)
        self.resolver = EndpointResolver(
            self.location_lookup,
            self.endpoint_cache,
            domain=config.domain,
            scheme=config.scheme,
            verify_cached=config.verify_cached_endpoints
        )

    @classmethod
    def from_api_key(cls, api_key: str, transport=None, **settings) -> "TelnyxStorageClient":
        """Build a client for an API key resolved at run time."""
        return cls(StorageConfig(api_key=api_key, **settings), transport=transport)

    @classmethod
    def from_env(cls, transport=None) -> "TelnyxStorageClient":
        return cls(StorageConfig.from_env(), transport=transport)

    # Bucket requests

    @log_storage_errors
    async def list_buckets(self) -> ConditionalValue[ListAllMyBucketsResult]:
        """List all buckets on the account.

        Returns:
            ConditionalValue holding the listing, empty if the account has none to report
        """
        response = await self._send("GET", f"{self.config.default_endpoint}/")
        if response.status == 404:
            return ConditionalValue()
        self._raise_for_status(response, "buckets")
        return ConditionalValue(ListAllMyBucketsResult.from_xml(response.body))

    @log_storage_errors
    async def get_bucket_location(self, bucket_name: str) -> ConditionalValue[str]:
        """Look up a bucket's region token and remember it for routing.

        Raises:
            ProviderError: If the provider returned an error envelope (e.g. NoSuchBucket)
        """
        region = await self.location_lookup.lookup_region(bucket_name)
        if region is None:
            return ConditionalValue()
        self.endpoint_cache.set(bucket_name, region)
        return ConditionalValue(region)

    @log_storage_errors
    async def create_bucket(
        self,
        bucket_name: str,
        location_constraint: LocationConstraint = LocationConstraint.CENTRAL
    ):
        """Create a bucket in the given region.

        Raises:
            ValidityFailure: If the bucket name is not valid
            TargetAlreadyExists: If the bucket already exists
            UnexpectedResponse: For any other unsuccessful status
        """
        if not is_bucket_name_valid(bucket_name):
            raise ValidityFailure(BUCKET_NAME_VALIDITY_MESSAGE)

        region = location_constraint.token
        url = f"{self.resolver.endpoint_for(region)}/{bucket_name}"
        body = CreateBucketConfiguration(location_constraint).to_xml()

        response = await self._send("PUT", url, {"Content-Type": XML_CONTENT_TYPE}, body.encode("utf-8"))
        self._raise_for_status(response, bucket_name, conflict=True)

        self.endpoint_cache.set(bucket_name, region)
        logger.info(f"Created bucket {bucket_name} in {region}")

    @log_storage_errors
    async def delete_bucket(self, bucket_name: str) -> bool:
        """Delete a bucket and, once the provider confirms, forget its cached endpoint.

        The bucket must be empty. Deletion is best-effort: the status is not
        translated into an error, so confirm with ``head_bucket`` if needed.

        Returns:
            True if the provider answered with a success status

        Raises:
            TargetNotFound: If the bucket's endpoint cannot be resolved
        """
        base = await self._base_address(bucket_name)
        response = await self._send("DELETE", f"{base}/")

        if not response.ok:
            logger.warning(f"Delete of bucket {bucket_name} answered {response.status}")
            return False

        if self.endpoint_cache.remove(bucket_name):
            record_cache_invalidation()
        logger.info(f"Deleted bucket {bucket_name}")
        return True

    @log_storage_errors
    async def head_bucket(self, bucket_name: str) -> bool:
        """Determine if a bucket exists and is accessible."""
        resolved = await self.resolver.resolve(bucket_name)
        if not resolved:
            return False
        response = await self._send("HEAD", f"{resolved.value}/")
        return response.ok

    # Object requests

    @log_storage_errors
    async def list_objects(self, bucket_name: str) -> ListBucketResult:
        """List all objects in a bucket.

        Raises:
            TargetNotFound: If the bucket does not exist or cannot be resolved
        """
        base = await self._base_address(bucket_name)
        response = await self._send("GET", f"{base}/?list-type=2")
        self._raise_for_status(response, bucket_name)
        return ListBucketResult.from_xml(response.body)

    @log_storage_errors
    async def get_object(self, bucket_name: str, object_name: str, upload_id: Optional[str] = None) -> bytes:
        """Download an object.

        Returns:
            The bytes comprising the object

        Raises:
            TargetNotFound: If the bucket or object does not exist
        """
        base = await self._base_address(bucket_name)
        url = f"{base}/{self._object_path(object_name)}"
        if upload_id is not None:
            url += f"?uploadId={quote(upload_id, safe='')}"

        response = await self._send("GET", url, {"Accept": OCTET_STREAM})
        self._raise_for_status(response, f"{bucket_name}/{object_name}")
        return response.body

    @log_storage_errors
    async def head_object(self, bucket_name: str, object_name: str) -> HeadObjectResponse:
        """Retrieve an object's metadata without the object itself.

        Raises:
            TargetNotFound: If the bucket or object does not exist
        """
        base = await self._base_address(bucket_name)
        response = await self._send("HEAD", f"{base}/{self._object_path(object_name)}")
        self._raise_for_status(response, f"{bucket_name}/{object_name}")
        return HeadObjectResponse.from_headers(response.headers)

    @log_storage_errors
    async def put_object(self, bucket_name: str, object_name: str, file_path: Union[str, Path]):
        """Upload a local file as an object.

        Raises:
            TargetNotFound: If the bucket cannot be resolved
            TargetAlreadyExists: If the provider refuses to overwrite the object
        """
        base = await self._base_address(bucket_name)
        url = f"{base}/{self._object_path(object_name)}"
        headers = {"Content-Type": OCTET_STREAM, **SERVER_SIDE_ENCRYPTION}

        with open(file_path, "rb") as source:
            response = await self._send("PUT", url, headers, source)
        self._raise_for_status(response, f"{bucket_name}/{object_name}", conflict=True)
        logger.debug(f"Uploaded {file_path} to {bucket_name}/{object_name}")

    @log_storage_errors
    async def put_object_bytes(self, bucket_name: str, object_name: str, file_name: str, content: bytes):
        """Upload an in-memory buffer as an object.

        Args:
            bucket_name: The bucket name
            object_name: Key the object is stored under
            file_name: Name of the originating file, without its path
            content: The bytes comprising the object
        """
        base = await self._base_address(bucket_name)
        url = f"{base}/{self._object_path(object_name)}"
        headers = {
            "Content-Type": OCTET_STREAM,
            "Content-Disposition": f'attachment; filename="{file_name}"',
            **SERVER_SIDE_ENCRYPTION
        }

        response = await self._send("PUT", url, headers, bytes(content))
        self._raise_for_status(response, f"{bucket_name}/{object_name}", conflict=True)

    @log_storage_errors
    async def delete_object(self, bucket_name: str, object_name: str) -> bool:
        """Delete an object. Best-effort like ``delete_bucket``.

        Returns:
            True if the provider answered with a success status
        """
        base = await self._base_address(bucket_name, include_bucket_label=False)
        url = f"{base}/{bucket_name}/{self._object_path(object_name)}"
        response = await self._send("DELETE", url)

        if not response.ok:
            logger.warning(f"Delete of object {bucket_name}/{object_name} answered {response.status}")
            return False
        return True

    @log_storage_errors
    async def delete_objects(self, bucket_name: str, keys: List[str]):
        """Delete several objects in one request.

        Raises:
            TargetNotFound: If the bucket does not exist or cannot be resolved
            UnexpectedResponse: For any other unsuccessful status
        """
        base = await self._base_address(bucket_name, include_bucket_label=False)
        body = DeleteObjectsRequest(list(keys)).to_xml().encode("utf-8")
        headers = {
            "Content-Type": XML_CONTENT_TYPE,
            "Content-MD5": base64.b64encode(hashlib.md5(body).digest()).decode("ascii")
        }

        response = await self._send("POST", f"{base}/{bucket_name}?delete=true", headers, body)
        self._raise_for_status(response, bucket_name)

    # Utility methods

    def _auth_headers(self) -> Dict[str, str]:
        return {"Authorization": AUTHORIZATION_TEMPLATE.format(api_key=self.config.api_key)}

    async def _send(self, method: str, url: str, headers: Optional[Dict[str, str]] = None, data=None) -> TransportResponse:
        request_headers = self._auth_headers()
        if headers:
            request_headers.update(headers)
        return await self.transport.request(method, url, headers=request_headers, data=data)

    async def _base_address(self, bucket_name: str, include_bucket_label: bool = True) -> str:
        resolved = await self.resolver.resolve(bucket_name, include_bucket_label)
        if not resolved:
            raise TargetNotFound(bucket_name)
        return resolved.value

    @staticmethod
    def _object_path(object_name: str) -> str:
        return quote(object_name, safe="/")

    @staticmethod
    def _raise_for_status(response: TransportResponse, target: str, conflict: bool = False):
        if response.ok:
            return
        if response.status == 404:
            raise TargetNotFound(target)
        if conflict and response.status == 409:
            raise TargetAlreadyExists(target)
        raise UnexpectedResponse(response.status, response.text)
