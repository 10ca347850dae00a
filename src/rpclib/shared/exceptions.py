from enum import Enum

from rpclib.protocol.base import Error


class ErrorKind(str, Enum):
    """Every way a call can fail."""

    TRANSPORT = "transport"
    SERIALIZATION = "serialization"
    PROTOCOL = "protocol"
    EMPTY_RESULT = "empty_result"


class RPCError(Exception):
    """
    Base for every error raised by a call.

    Branch on the subclass or on `kind`. The underlying library exception, if
    any, is chained as `__cause__`.
    """

    kind: ErrorKind

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class TransportError(RPCError):
    """
    The exchange failed below the JSON-RPC layer: DNS, connect, TLS, timeout or
    an HTTP error status without a usable JSON-RPC error body.
    """

    kind = ErrorKind.TRANSPORT

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class SerializationError(RPCError):
    """The request or response could not be encoded or decoded as JSON."""

    kind = ErrorKind.SERIALIZATION


class ProtocolError(RPCError):
    """
    The server answered with a non-null `error` payload.
    """

    kind = ErrorKind.PROTOCOL

    def __init__(self, error: Error, status_code: int | None = None):
        super().__init__(error.message)
        self.error = error
        self.status_code = status_code

    @property
    def code(self) -> int:
        return self.error.code

    def __str__(self) -> str:
        return f"[{self.error.code}] {self.error.message}"


class EmptyResultError(RPCError):
    """The server returned neither `result` nor `error`."""

    kind = ErrorKind.EMPTY_RESULT

    def __init__(self, message: str = "response contained neither result nor error"):
        super().__init__(message)
