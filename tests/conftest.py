import json
import logging
from typing import Any

import pytest

from rpclib import log_setup
from rpclib.shared.exceptions import TransportError
from rpclib.transport.base import Transport, TransportResponse


class MockTransport(Transport):
    """Mock transport for testing."""

    def __init__(self):
        self.sent_requests: list[dict[str, Any]] = []
        self.responses: list[TransportResponse] = []
        self.failure: Exception | None = None
        self.closed = False

    def queue_body(self, body: bytes | str, status_code: int = 200) -> None:
        """Queue a raw response body."""
        if isinstance(body, str):
            body = body.encode("utf-8")
        self.responses.append(TransportResponse(status_code=status_code, body=body))

    def queue_payload(self, payload: Any, status_code: int = 200) -> None:
        """Helper: queue a JSON response payload."""
        self.queue_body(json.dumps(payload), status_code=status_code)

    def fail_with(self, exc: Exception) -> None:
        """Make every post raise `exc`."""
        self.failure = exc

    def post(self, url: str, headers: dict[str, str], body: bytes) -> TransportResponse:
        if self.closed:
            raise TransportError("Transport closed")
        self.sent_requests.append(
            {"url": url, "headers": headers, "body": json.loads(body)}
        )
        if self.failure is not None:
            raise self.failure
        return self.responses.pop(0)

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def transport() -> MockTransport:
    return MockTransport()


@pytest.fixture
def restore_logging():
    """Undo the root logger changes log_setup.init makes."""
    root = logging.getLogger()
    level = root.level
    httpcore_level = logging.getLogger("httpcore").level
    yield
    for handler in list(root.handlers):
        if isinstance(handler.formatter, log_setup._UtcFormatter):
            root.removeHandler(handler)
    root.setLevel(level)
    logging.getLogger("httpcore").setLevel(httpcore_level)
