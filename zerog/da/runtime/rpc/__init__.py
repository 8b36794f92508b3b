"""RPC runtime abstractions."""

from .transport import DisperserTransport

__all__ = ["DisperserTransport"]
