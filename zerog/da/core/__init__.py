"""Core constants, configuration, enums and exceptions."""

from .config import ClientConfig, Endpoint, parse_endpoint
from .constants import (
    DEFAULT_POLL_TIMEOUT_SECONDS,
    MAX_CHUNK_SIZE,
    MAX_MESSAGE_SIZE,
    POLL_INTERVAL_SECONDS,
)
from .enums import BlobStatus
from .exceptions import (
    DAConnectionError,
    DAError,
    FinalizationTimeoutError,
    ProtocolViolationError,
    SizeExceededError,
    TerminalFailureError,
    TransportError,
)

__all__ = [
    # Constants
    "DEFAULT_POLL_TIMEOUT_SECONDS",
    "MAX_CHUNK_SIZE",
    "MAX_MESSAGE_SIZE",
    "POLL_INTERVAL_SECONDS",
    # Config
    "ClientConfig",
    "Endpoint",
    "parse_endpoint",
    # Enums
    "BlobStatus",
    # Exceptions
    "DAError",
    "DAConnectionError",
    "SizeExceededError",
    "TransportError",
    "ProtocolViolationError",
    "TerminalFailureError",
    "FinalizationTimeoutError",
]
