"""Protocol-level constants shared with the disperser service."""

from __future__ import annotations

# gRPC message ceiling negotiated with the disperser (32 MiB)
MAX_MESSAGE_SIZE = 1024 * 1024 * 32

# Largest payload accepted by a single DisperseBlob call. One MiB of the
# message ceiling plus a 4 byte length prefix are reserved for framing.
MAX_CHUNK_SIZE = 1024 * 1024 * 31 - 4

DEFAULT_POLL_TIMEOUT_SECONDS = 300

POLL_INTERVAL_SECONDS = 1.0

UINT64_MAX = 2**64 - 1
