"""0G DA client - submit, track and retrieve blobs on a data-availability disperser."""

from .clients import DAClient
from .core import (
    DEFAULT_POLL_TIMEOUT_SECONDS,
    MAX_CHUNK_SIZE,
    MAX_MESSAGE_SIZE,
    POLL_INTERVAL_SECONDS,
    BlobStatus,
    ClientConfig,
    DAConnectionError,
    DAError,
    Endpoint,
    FinalizationTimeoutError,
    ProtocolViolationError,
    SizeExceededError,
    TerminalFailureError,
    TransportError,
    parse_endpoint,
)
from .models import BlobHeader, BlobInfo, BlobStatusReply
from .runtime import (
    ChunkExecutor,
    ChunkPlan,
    ChunkPlanner,
    ChunkPolicy,
    DisperserTransport,
    FinalizationPoller,
    split_blob,
)

__version__ = "0.1.0"

__all__ = [
    # Client
    "DAClient",
    # Constants
    "MAX_CHUNK_SIZE",
    "MAX_MESSAGE_SIZE",
    "DEFAULT_POLL_TIMEOUT_SECONDS",
    "POLL_INTERVAL_SECONDS",
    # Config
    "ClientConfig",
    "Endpoint",
    "parse_endpoint",
    # Models
    "BlobHeader",
    "BlobInfo",
    "BlobStatusReply",
    "BlobStatus",
    # Runtime
    "ChunkExecutor",
    "ChunkPlan",
    "ChunkPlanner",
    "ChunkPolicy",
    "DisperserTransport",
    "FinalizationPoller",
    "split_blob",
    # Exceptions
    "DAError",
    "DAConnectionError",
    "SizeExceededError",
    "TransportError",
    "ProtocolViolationError",
    "TerminalFailureError",
    "FinalizationTimeoutError",
]
