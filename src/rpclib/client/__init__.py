from rpclib.client.client import Client

__all__ = ["Client"]
