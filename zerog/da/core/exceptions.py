"""Custom exception hierarchy."""

from __future__ import annotations


class DAError(Exception):
    """Base exception for all library errors."""

    pass


class DAConnectionError(DAError):
    """Endpoint could not be parsed into a valid service address."""

    def __init__(self, message: str, endpoint: str | None = None) -> None:
        super().__init__(message)
        self.endpoint = endpoint


class SizeExceededError(DAError):
    """Payload is larger than a single submission allows.

    Raised before any request is sent to the service.
    """

    def __init__(self, max_size: int, actual_size: int) -> None:
        super().__init__(
            f"maximum blob size {max_size} exceeded, current blob size {actual_size}"
        )
        self.max_size = max_size
        self.actual_size = actual_size


class TransportError(DAError):
    """Round trip to the service failed (network, status or decode error)."""

    def __init__(
        self,
        message: str,
        code: str | None = None,
        details: str | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.details = details


class ProtocolViolationError(DAError):
    """Service reply does not match the disperser contract.

    Covers status values outside the known enumeration and finalized
    replies that are missing their info record or blob header.
    """

    pass


class TerminalFailureError(DAError):
    """Service reported the submission as failed."""

    def __init__(self, message: str, request_id: bytes | None = None) -> None:
        super().__init__(message)
        self.request_id = request_id


class FinalizationTimeoutError(DAError, TimeoutError):
    """Submission did not reach a terminal status before the poll timeout."""

    def __init__(
        self,
        message: str,
        request_id: bytes | None = None,
        timeout: float | None = None,
    ) -> None:
        super().__init__(message)
        self.request_id = request_id
        self.timeout = timeout
