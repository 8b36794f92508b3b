"""High-level client for the data-availability disperser.

Architecture:
    DAClient composes three pieces:
    - DisperserTransport: one lazily opened gRPC channel, RPC errors mapped
      to TransportError
    - ChunkPlanner/ChunkExecutor: cut oversized blobs into ordered chunks and
      run a per-chunk step over them, failing fast
    - FinalizationPoller: wait for one request id to reach FINALIZED

    Multi-chunk calls are sequential unless ``ClientConfig.max_concurrency``
    is raised; returned lists always follow chunk order. If any chunk fails,
    the whole call raises that chunk's error. Chunks that were already
    submitted stay pending on the service; there is no rollback.

Usage:
    async with DAClient("http://0.0.0.0:51001") as client:
        header = await client.submit_and_wait(b"\\x01\\x04")
        data = await client.retrieve(header.storage_root, header.epoch, header.quorum_id)
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from dataclasses import replace
from typing import TypeVar

from ..core.config import ClientConfig, Endpoint
from ..core.constants import MAX_CHUNK_SIZE, POLL_INTERVAL_SECONDS
from ..core.exceptions import DAConnectionError, SizeExceededError
from ..models import BlobHeader, BlobStatusReply
from ..runtime.chunking import ChunkExecutor, ChunkPlan, ChunkPlanner, ChunkPolicy
from ..runtime.polling import FinalizationPoller
from ..runtime.rpc import DisperserTransport

logger = logging.getLogger(__name__)

T = TypeVar("T")


class DAClient:
    """Client for submitting, tracking and retrieving blobs.

    Construction parses the endpoint but opens no connection. The client
    holds no state between calls other than its transport and config.
    """

    def __init__(
        self,
        endpoint: str | Endpoint | None = None,
        *,
        config: ClientConfig | None = None,
        transport: DisperserTransport | None = None,
    ) -> None:
        """Initialize client.

        Args:
            endpoint: Disperser address, e.g. ``http://0.0.0.0:51001``
            config: Poll timeout and concurrency settings
            transport: Existing transport to share (endpoint is then ignored)

        Raises:
            DAConnectionError: If the endpoint cannot be parsed or neither
                endpoint nor transport is given
        """
        if transport is None:
            if endpoint is None:
                raise DAConnectionError("endpoint or transport is required")
            transport = DisperserTransport(endpoint)
        self._transport = transport
        self._config = config or ClientConfig()
        self._planner = ChunkPlanner(ChunkPolicy(max_chunk_size=MAX_CHUNK_SIZE))

    @property
    def config(self) -> ClientConfig:
        return self._config

    @property
    def timeout(self) -> float:
        """Active finalization timeout in seconds."""
        return self._config.poll_timeout

    def with_timeout(self, seconds: float) -> DAClient:
        """Return a client sharing this transport with a different poll timeout."""
        return DAClient(
            transport=self._transport,
            config=replace(self._config, poll_timeout=seconds),
        )

    def with_concurrency(self, max_concurrency: int) -> DAClient:
        """Return a client that runs up to ``max_concurrency`` chunks at once."""
        return DAClient(
            transport=self._transport,
            config=replace(self._config, max_concurrency=max_concurrency),
        )

    async def submit(self, data: bytes) -> bytes:
        """Submit one chunk and return the service-assigned request id.

        Raises:
            SizeExceededError: If ``data`` exceeds MAX_CHUNK_SIZE (nothing is sent)
            TransportError: If the round trip fails
        """
        if len(data) > MAX_CHUNK_SIZE:
            raise SizeExceededError(max_size=MAX_CHUNK_SIZE, actual_size=len(data))

        reply = await self._transport.disperse_blob(bytes(data))
        request_id = bytes(reply.request_id)
        logger.debug("Submitted %d bytes, request id %s", len(data), request_id.hex())
        return request_id

    async def submit_and_wait(self, data: bytes) -> BlobHeader:
        """Submit one chunk and wait until it is finalized."""
        request_id = await self.submit(data)
        return await self.wait_for_finalization(request_id)

    async def split_and_submit(self, data: bytes) -> list[bytes]:
        """Split ``data`` into chunks and submit each, returning request ids in order."""

        async def run(plan: ChunkPlan, chunk: bytes) -> bytes:
            return await self.submit(chunk)

        return await self._execute("submit", data, run)

    async def split_and_submit_and_wait(self, data: bytes) -> list[BlobHeader]:
        """Split ``data``, submit every chunk and wait for each to finalize.

        Returns:
            One blob header per chunk, in chunk order
        """

        async def run(plan: ChunkPlan, chunk: bytes) -> BlobHeader:
            return await self.submit_and_wait(chunk)

        return await self._execute("submit_and_wait", data, run)

    async def wait_for_finalization(self, request_id: bytes) -> BlobHeader:
        """Poll the status of ``request_id`` until it is finalized."""
        poller = FinalizationPoller(
            self.get_status,
            timeout=self._config.poll_timeout,
            interval=POLL_INTERVAL_SECONDS,
        )
        return await poller.wait(request_id)

    async def get_status(self, request_id: bytes) -> BlobStatusReply:
        """Fetch the raw status of a submission (single round trip)."""
        reply = await self._transport.get_blob_status(bytes(request_id))
        return BlobStatusReply.from_proto(reply)

    async def retrieve(self, storage_root: bytes, epoch: int, quorum_id: int) -> bytes:
        """Fetch stored data by its blob header fields (single round trip)."""
        reply = await self._transport.retrieve_blob(bytes(storage_root), epoch, quorum_id)
        return bytes(reply.data)

    async def retrieve_header(self, header: BlobHeader) -> bytes:
        """Fetch stored data for a finalized chunk."""
        return await self.retrieve(header.storage_root, header.epoch, header.quorum_id)

    async def _execute(
        self, operation: str, data: bytes, run: Callable[[ChunkPlan, bytes], Awaitable[T]]
    ) -> list[T]:
        plans = self._planner.plan(len(data))
        executor = ChunkExecutor(operation=operation, max_concurrency=self._config.max_concurrency)
        result = await executor.execute(plans=plans, data=data, run_chunk=run)
        return result.results

    async def close(self) -> None:
        """Close the underlying channel."""
        await self._transport.close()

    async def __aenter__(self) -> DAClient:
        """Context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        await self.close()
