"""Transport layer abstraction for JSON-RPC over HTTP."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from types import TracebackType
from typing import Self


@dataclass
class TransportResponse:
    """Raw outcome of one HTTP exchange."""

    status_code: int
    body: bytes
    headers: dict[str, str] = field(default_factory=dict)

    @property
    def is_success(self) -> bool:
        return 200 <= self.status_code < 300


class Transport(ABC):
    """Abstract blocking transport.

    Performs exactly one POST per call without knowledge of JSON-RPC semantics.
    Implementations raise `TransportError` for anything that prevents a
    response from arriving.
    """

    @abstractmethod
    def post(self, url: str, headers: dict[str, str], body: bytes) -> TransportResponse:
        """Send `body` to `url` and return the raw response."""

    @abstractmethod
    def close(self) -> None:
        """Release any underlying connections."""

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
