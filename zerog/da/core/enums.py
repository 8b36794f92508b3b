"""Core enumerations.

Architecture:
    ``BlobStatus`` mirrors the ``disperser.BlobStatus`` wire enum. The wire
    enum is open (proto3 keeps unknown integers), so decoding goes through
    ``BlobStatus.from_wire`` which turns anything outside the closed set into
    a ``ProtocolViolationError`` instead of letting a poll loop spin on it.

See Also:
    - FinalizationPoller: Drives waiting off these states
    - BlobStatusReply: Carries the raw integer as received
"""

from enum import IntEnum

from .exceptions import ProtocolViolationError


class BlobStatus(IntEnum):
    """Processing status of one submission, as reported by the disperser."""

    UNKNOWN = 0
    PROCESSING = 1
    CONFIRMED = 2
    FAILED = 3
    FINALIZED = 4
    INSUFFICIENT_SIGNATURES = 5

    @classmethod
    def from_wire(cls, value: int) -> "BlobStatus":
        """Decode a raw status integer.

        Raises:
            ProtocolViolationError: If value is not a known status
        """
        try:
            return cls(value)
        except ValueError:
            raise ProtocolViolationError(f"unknown blob status {value!r}") from None

    @property
    def is_terminal(self) -> bool:
        """Whether the service will not move this submission any further."""
        return self in (BlobStatus.FINALIZED, BlobStatus.FAILED)
