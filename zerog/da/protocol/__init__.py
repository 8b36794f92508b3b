"""Wire contract of the disperser service (protobuf messages and gRPC stub)."""

from . import messages
from .stub import DisperserStub, add_disperser_servicer

__all__ = ["messages", "DisperserStub", "add_disperser_servicer"]
