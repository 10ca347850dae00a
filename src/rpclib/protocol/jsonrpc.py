from typing import Any

from pydantic import (
    ConfigDict,
    Field,
    TypeAdapter,
    ValidationError,
    field_validator,
)
from pydantic_core import PydanticSerializationError

from rpclib.protocol.base import (
    JSONRPC_VERSION,
    Error,
    ProtocolModel,
    RequestId,
    ResponseId,
)
from rpclib.shared.exceptions import SerializationError


class JSONRPCRequest(ProtocolModel):
    """
    JSON-RPC 2.0 request envelope.

    Wire format for a call that expects a response. Built once per call and
    never reused.
    """

    model_config = ConfigDict(frozen=True)

    jsonrpc: str = Field(default=JSONRPC_VERSION, frozen=True)
    method: str
    """
    Name of the remote method, e.g. `Calc.Add`.
    """

    params: Any = None
    """
    Caller-supplied parameters. Anything pydantic can serialize.
    """

    id: RequestId
    """
    Identifier the server echoes back in its response.
    """

    def to_wire(self) -> bytes:
        """Serialize to JSON-RPC 2.0 wire bytes."""
        return self.model_dump_json().encode("utf-8")


class JSONRPCResponse(ProtocolModel):
    """
    JSON-RPC 2.0 response envelope.

    The protocol says exactly one of `result` and `error` is set, but nothing on
    the wire enforces it. Both, or neither, may arrive.
    """

    jsonrpc: Any = None
    result: Any = None
    """
    Raw result value. `None` when absent or `null` on the wire.
    """

    error: Error | None = None
    """
    Error payload, if the server sent a non-null one.
    """

    id: ResponseId = None

    @field_validator("error", mode="before")
    @classmethod
    def decode_error(cls, value: Any) -> Error | None:
        return Error.from_protocol(value)

    @property
    def is_empty(self) -> bool:
        return self.error is None and self.result is None


def encode_request(id: RequestId, method: str, params: Any = None) -> bytes:
    """
    Serialize a request envelope.

    Raises:
        SerializationError: If `params` can't be represented as JSON.
    """
    try:
        return JSONRPCRequest(id=id, method=method, params=params).to_wire()
    except (PydanticSerializationError, ValidationError, ValueError) as e:
        raise SerializationError(f"failed to encode request: {e}") from e


def decode_response(body: bytes | str) -> JSONRPCResponse:
    """
    Parse a response body.

    Raises:
        SerializationError: If the body isn't JSON, isn't an object, or carries an
            `error` field of the wrong shape.
    """
    try:
        return JSONRPCResponse.model_validate_json(body)
    except ValidationError as e:
        raise SerializationError(f"failed to decode response: {e}") from e


def decode_result(value: Any, result_type: Any = Any) -> Any:
    """
    Validate a raw result against the type the caller asked for.

    Raises:
        SerializationError: If the value doesn't fit `result_type`.
    """
    if result_type is Any:
        return value
    try:
        return TypeAdapter(result_type).validate_python(value)
    except ValidationError as e:
        raise SerializationError(f"failed to decode result: {e}") from e
