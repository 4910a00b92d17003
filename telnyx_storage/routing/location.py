"""Bucket location lookups against the default endpoint."""
import logging
from typing import Awaitable, Callable, Optional
from urllib.parse import quote

from ..metrics import record_location_lookup
from ..models.constraints import LocationConstraint
from ..models.responses import ErrorResponse
from ..transport import TransportResponse
from ..utils.errors import ProviderError, UnexpectedResponse
from ..utils.xml import parse_location_constraint

logger = logging.getLogger(__name__)


class LocationLookup:
    """Asks the provider which region serves a bucket."""

    def __init__(
        self,
        send: Callable[..., Awaitable[TransportResponse]],
        default_endpoint: str
    ):
        """Initialize the lookup.

        Args:
            send: Coroutine issuing an authenticated request, ``send(method, url)``
            default_endpoint: Endpoint that answers location queries for any bucket
        """
        self._send = send
        self.default_endpoint = default_endpoint.rstrip("/")

    def location_url(self, bucket_name: str) -> str:
        return f"{self.default_endpoint}/{quote(bucket_name, safe='')}?location"

    async def lookup_region(self, bucket_name: str) -> Optional[str]:
        """Look up the region token for a bucket.

        Args:
            bucket_name: Name of the bucket

        Returns:
            The region token, or None if the response carried none or an unknown one

        Raises:
            ProviderError: If the provider returned an <Error> envelope
            UnexpectedResponse: If the status is not a success and no envelope was returned
        """
        response = await self._send("GET", self.location_url(bucket_name))
        return self.parse_response(bucket_name, response)

    def parse_response(self, bucket_name: str, response: TransportResponse) -> Optional[str]:
        error = ErrorResponse.from_xml(response.body)
        if error is not None:
            logger.debug(f"Location lookup for {bucket_name} failed: {error.code}")
            record_location_lookup("error")
            raise ProviderError(error.code, error.request_id, error.host_id)

        if not response.ok:
            record_location_lookup("error")
            raise UnexpectedResponse(response.status, response.text)

        token = parse_location_constraint(response.body)
        if token is None:
            logger.debug(f"No location constraint in response for bucket {bucket_name}")
            record_location_lookup("empty")
            return None

        if LocationConstraint.from_token(token) is None:
            logger.warning(f"Unrecognised region token {token!r} for bucket {bucket_name}")
            record_location_lookup("empty")
            return None

        record_location_lookup("found")
        return token
