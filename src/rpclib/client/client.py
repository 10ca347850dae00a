import base64
import logging
from types import TracebackType
from typing import Any, Self

from rpclib.protocol import RequestId, decode_response, decode_result, encode_request
from rpclib.shared.exceptions import (
    EmptyResultError,
    ProtocolError,
    RPCError,
    SerializationError,
    TransportError,
)
from rpclib.transport.base import Transport, TransportResponse
from rpclib.transport.http import HTTPXTransport
from rpclib.version import __version__

logger = logging.getLogger(__name__)

JSON_MIME = "application/json"
DEFAULT_USER_AGENT = f"rpclib/{__version__}"


class Client:
    """
    JSON-RPC 2.0 client for a single HTTP endpoint.

    Configuration is fixed at construction. The `with_*` builders return a new
    client sharing the same transport and leave the original untouched, so a
    configured client can be shared freely.

    Example:
        client = Client("http://localhost:4000/rpc").with_basic_auth("me", "pw")
        total = client.call("1", "Calc.Add", {"a": 2, "b": 3}, result_type=int)
    """

    def __init__(
        self,
        url: str,
        transport: Transport | None = None,
        headers: dict[str, str] | None = None,
    ):
        self.url = url
        self.transport = transport or HTTPXTransport()
        if headers is None:
            headers = {
                "User-Agent": DEFAULT_USER_AGENT,
                "Accept": JSON_MIME,
                "Content-Type": JSON_MIME,
            }
        self._headers = dict(headers)

    @property
    def headers(self) -> dict[str, str]:
        """A copy of the headers sent with every call."""
        return dict(self._headers)

    def _with_header(self, name: str, value: str) -> Self:
        headers = self.headers
        headers[name] = value
        return type(self)(self.url, transport=self.transport, headers=headers)

    def with_basic_auth(self, username: str, password: str | None = None) -> Self:
        """Return a client that authenticates with HTTP Basic auth.

        Replaces any Authorization header already configured.
        """
        credentials = f"{username}:{password or ''}".encode("utf-8")
        token = base64.b64encode(credentials).decode("ascii")
        return self._with_header("Authorization", f"Basic {token}")

    def with_user_agent(self, user_agent: str) -> Self:
        """Return a client that identifies itself as `user_agent`."""
        return self._with_header("User-Agent", user_agent)

    def call(
        self,
        id: RequestId,
        method: str,
        params: Any = None,
        *,
        result_type: Any = Any,
    ) -> Any:
        """Invoke `method` on the server and return its result.

        Exactly one HTTP request is made. Nothing is retried.

        Args:
            id: Identifier echoed back by the server. Uniqueness is the caller's
                concern.
            method: Remote method name, e.g. `Calc.Add`.
            params: Parameters, anything pydantic can serialize.
            result_type: Type to validate the result against. Defaults to the raw
                decoded JSON value.

        Returns:
            The server's `result`, validated as `result_type`.

        Raises:
            SerializationError: If the request can't be encoded, or the response
                or its result can't be decoded.
            TransportError: If the HTTP exchange fails, including non-2xx
                responses that don't carry a JSON-RPC error.
            ProtocolError: If the server returned a non-null `error`. Takes
                precedence over any `result` in the same response.
            EmptyResultError: If the response has neither `result` nor `error`.
        """
        body = encode_request(id, method, params)
        logger.debug("Calling %s (id=%s) at %s", method, id, self.url)

        try:
            raw = self.transport.post(self.url, self.headers, body)
        except RPCError:
            raise
        except OSError as e:
            raise TransportError(f"{type(e).__name__}: {e}") from e

        return self._handle_response(raw, result_type)

    def _handle_response(self, raw: TransportResponse, result_type: Any) -> Any:
        try:
            response = decode_response(raw.body)
        except SerializationError as e:
            if raw.is_success:
                raise
            raise TransportError(
                f"HTTP {raw.status_code}: {_snippet(raw.body)}",
                status_code=raw.status_code,
            ) from e

        if response.error is not None:
            raise ProtocolError(response.error, status_code=raw.status_code)

        if not raw.is_success:
            raise TransportError(
                f"HTTP {raw.status_code}: {_snippet(raw.body)}",
                status_code=raw.status_code,
            )

        if response.is_empty:
            raise EmptyResultError()

        return decode_result(response.result, result_type)

    def close(self) -> None:
        self.transport.close()

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self.close()
        return None


def _snippet(body: bytes, limit: int = 200) -> str:
    text = body.decode("utf-8", errors="replace").strip()
    if len(text) > limit:
        return text[:limit] + "..."
    return text or "<empty body>"
