from rpclib.transport.base import Transport, TransportResponse
from rpclib.transport.http import HTTPXTransport

__all__ = ["HTTPXTransport", "Transport", "TransportResponse"]
