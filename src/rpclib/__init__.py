from rpclib.client import Client
from rpclib.protocol import (
    JSONRPC_VERSION,
    Error,
    JSONRPCRequest,
    JSONRPCResponse,
    decode_response,
    encode_request,
)
from rpclib.shared.exceptions import (
    EmptyResultError,
    ErrorKind,
    ProtocolError,
    RPCError,
    SerializationError,
    TransportError,
)
from rpclib.transport import HTTPXTransport, Transport, TransportResponse
from rpclib.version import __version__

__all__ = [
    "JSONRPC_VERSION",
    "Client",
    "EmptyResultError",
    "Error",
    "ErrorKind",
    "HTTPXTransport",
    "JSONRPCRequest",
    "JSONRPCResponse",
    "ProtocolError",
    "RPCError",
    "SerializationError",
    "Transport",
    "TransportError",
    "TransportResponse",
    "__version__",
    "decode_response",
    "encode_request",
]
