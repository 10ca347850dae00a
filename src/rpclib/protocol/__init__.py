from rpclib.protocol.base import (
    ADHOC_ERROR_CODE,
    INTERNAL_ERROR,
    INVALID_PARAMS,
    INVALID_REQUEST,
    JSONRPC_VERSION,
    METHOD_NOT_FOUND,
    PARSE_ERROR,
    Error,
    ProtocolModel,
    RequestId,
    ResponseId,
)
from rpclib.protocol.jsonrpc import (
    JSONRPCRequest,
    JSONRPCResponse,
    decode_response,
    decode_result,
    encode_request,
)

__all__ = [
    "ADHOC_ERROR_CODE",
    "INTERNAL_ERROR",
    "INVALID_PARAMS",
    "INVALID_REQUEST",
    "JSONRPC_VERSION",
    "METHOD_NOT_FOUND",
    "PARSE_ERROR",
    "Error",
    "JSONRPCRequest",
    "JSONRPCResponse",
    "ProtocolModel",
    "RequestId",
    "ResponseId",
    "decode_response",
    "decode_result",
    "encode_request",
]
