"""HTTP transport used by the storage client."""
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

import aiohttp

logger = logging.getLogger(__name__)


@dataclass
class TransportResponse:
    """A fully read HTTP response. Header names are lower-cased."""
    status: int
    headers: Dict[str, str] = field(default_factory=dict)
    body: bytes = b""

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300

    @property
    def text(self) -> str:
        return self.body.decode("utf-8", errors="replace")


class AiohttpTransport:
    """Issues requests through aiohttp.

    A caller-supplied session is reused and left open; otherwise a session is
    opened for each request.
    """

    def __init__(self, session: Optional[aiohttp.ClientSession] = None):
        self._session = session

    async def request(
        self,
        method: str,
        url: str,
        headers: Optional[Dict[str, str]] = None,
        data: Any = None
    ) -> TransportResponse:
        logger.debug(f"{method} {url}")
        if self._session is not None:
            return await self._send(self._session, method, url, headers, data)
        async with aiohttp.ClientSession() as session:
            return await self._send(session, method, url, headers, data)

    async def _send(self, session, method, url, headers, data) -> TransportResponse:
        async with session.request(method, url, headers=headers, data=data) as response:
            body = await response.read()
            response_headers = {}
            for name, value in response.headers.items():
                response_headers.setdefault(name.lower(), value)
            return TransportResponse(status=response.status, headers=response_headers, body=body)
