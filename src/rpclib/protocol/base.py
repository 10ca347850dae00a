from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, StrictInt

JSONRPC_VERSION = "2.0"

RequestId = Annotated[
    str, "Caller-supplied identifier correlating a request with its response."
]
ResponseId = Annotated[
    int | str | None,
    "Identifier echoed by the server. Servers in the wild send strings, numbers"
    " or null.",
]


class ProtocolModel(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)


PARSE_ERROR = -32700
INVALID_REQUEST = -32600
METHOD_NOT_FOUND = -32601
INVALID_PARAMS = -32602
INTERNAL_ERROR = -32603

ADHOC_ERROR_CODE = -1
"""
Code assigned to errors the server sent as a bare string.
"""


class Error(ProtocolModel):
    """
    JSON-RPC error payload.

    Example:
        Error(code=METHOD_NOT_FOUND, message="Method not found")
    """

    code: StrictInt
    """
    Error type code.
    """

    message: str
    """
    Human readable error message.
    """

    data: Any = None
    """
    Additional error details, passed through as sent by the server.
    """

    @classmethod
    def from_protocol(cls, data: Any) -> "Error | None":
        """
        Decode the wire `error` field.

        The field is not uniformly typed: `null` means no error, a string is an
        ad-hoc message without a code, and an object is a structured error.
        Anything else is rejected.
        """
        if data is None or isinstance(data, cls):
            return data
        if isinstance(data, str):
            return cls(code=ADHOC_ERROR_CODE, message=data)
        if isinstance(data, dict):
            return cls.model_validate(data)
        raise ValueError(
            f"error must be a string, object or null, got {type(data).__name__}"
        )
