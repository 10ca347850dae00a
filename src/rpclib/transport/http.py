import logging

import httpx

from rpclib.shared.exceptions import TransportError
from rpclib.transport.base import Transport, TransportResponse

logger = logging.getLogger(__name__)


class HTTPXTransport(Transport):
    """Blocking HTTP transport backed by `httpx.Client`.

    Timeouts are httpx's defaults unless a preconfigured client is passed in.
    The transport only closes clients it created itself.
    """

    def __init__(self, client: httpx.Client | None = None):
        self._owns_client = client is None
        self.client = client or httpx.Client()

    def post(self, url: str, headers: dict[str, str], body: bytes) -> TransportResponse:
        logger.debug("POST %s (%d bytes)", url, len(body))
        try:
            response = self.client.post(url, headers=headers, content=body)
        except (httpx.HTTPError, httpx.InvalidURL, UnicodeEncodeError) as e:
            raise TransportError(f"{type(e).__name__}: {e}") from e

        logger.debug(
            "HTTP %d from %s (%d bytes)",
            response.status_code,
            url,
            len(response.content),
        )
        return TransportResponse(
            status_code=response.status_code,
            body=response.content,
            headers=dict(response.headers),
        )

    def close(self) -> None:
        if self._owns_client:
            self.client.close()
