"""Finalization poller.

Architecture:
    A submission moves through the disperser's pipeline on its own; the
    client can only observe it. ``FinalizationPoller`` queries the status of
    one request id at a fixed cadence until the service reports a terminal
    status or the wall-clock budget runs out:

    - FINALIZED: the reply must carry an info record with a blob header,
      which is returned. A missing record is a protocol violation.
    - FAILED: raises ``TerminalFailureError`` at once.
    - any other known status: keep waiting.
    - unknown status: raises ``ProtocolViolationError``.

    Errors raised by ``fetch_status`` (transport failures) propagate on the
    first occurrence. Cancelling the awaiting task stops the loop.

Design Decisions:
    - Fixed interval: no backoff, the timeout is a hard ceiling
    - Event loop clock: monotonic, and the one ``asyncio.sleep`` uses
    - ``elapsed >= timeout``: at most ``ceil(timeout / interval) + 1`` queries
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable

from ..core.constants import DEFAULT_POLL_TIMEOUT_SECONDS, POLL_INTERVAL_SECONDS
from ..core.enums import BlobStatus
from ..core.exceptions import (
    FinalizationTimeoutError,
    ProtocolViolationError,
    TerminalFailureError,
)
from ..models import BlobHeader, BlobStatusReply

logger = logging.getLogger(__name__)

FetchStatus = Callable[[bytes], Awaitable[BlobStatusReply]]


class FinalizationPoller:
    """Waits for one submission to finalize."""

    def __init__(
        self,
        fetch_status: FetchStatus,
        *,
        timeout: float = DEFAULT_POLL_TIMEOUT_SECONDS,
        interval: float = POLL_INTERVAL_SECONDS,
    ) -> None:
        """Initialize poller.

        Args:
            fetch_status: Async function returning the status reply for a request id
            timeout: Seconds to keep polling while the status is non-terminal
            interval: Seconds to sleep between status queries
        """
        if timeout < 0:
            raise ValueError("timeout must be >= 0")
        if interval <= 0:
            raise ValueError("interval must be positive")
        self._fetch_status = fetch_status
        self._timeout = timeout
        self._interval = interval

    @property
    def timeout(self) -> float:
        return self._timeout

    @property
    def interval(self) -> float:
        return self._interval

    async def wait(self, request_id: bytes) -> BlobHeader:
        """Poll until ``request_id`` is finalized.

        Returns:
            Blob header of the finalized submission

        Raises:
            TerminalFailureError: Service reported FAILED
            ProtocolViolationError: Unknown status or incomplete FINALIZED reply
            FinalizationTimeoutError: Still pending after ``timeout`` seconds
            TransportError: A status round trip failed
        """
        loop = asyncio.get_running_loop()
        started = loop.time()
        attempt = 0

        while True:
            attempt += 1
            reply = await self._fetch_status(request_id)
            status = reply.blob_status
            elapsed = loop.time() - started

            logger.debug(
                "poll_attempt",
                extra={
                    "request_id": request_id.hex(),
                    "attempt": attempt,
                    "status": status.name,
                    "elapsed_s": elapsed,
                },
            )

            if status is BlobStatus.FINALIZED:
                if reply.info is None:
                    raise ProtocolViolationError("blob info is none")
                if reply.info.blob_header is None:
                    raise ProtocolViolationError("blob header is none")
                logger.info(
                    "poll_finalized",
                    extra={
                        "request_id": request_id.hex(),
                        "attempts": attempt,
                        "elapsed_s": elapsed,
                        "epoch": reply.info.blob_header.epoch,
                        "quorum_id": reply.info.blob_header.quorum_id,
                    },
                )
                return reply.info.blob_header

            if status is BlobStatus.FAILED:
                logger.warning(
                    "poll_failed",
                    extra={"request_id": request_id.hex(), "attempts": attempt},
                )
                raise TerminalFailureError(
                    f"blob {request_id.hex()} failed to disperse", request_id=request_id
                )

            if elapsed >= self._timeout:
                logger.warning(
                    "poll_timeout",
                    extra={
                        "request_id": request_id.hex(),
                        "attempts": attempt,
                        "timeout_s": self._timeout,
                        "last_status": status.name,
                    },
                )
                raise FinalizationTimeoutError(
                    f"blob {request_id.hex()} not finalized after {self._timeout}s "
                    f"(last status {status.name})",
                    request_id=request_id,
                    timeout=self._timeout,
                )

            await asyncio.sleep(self._interval)
