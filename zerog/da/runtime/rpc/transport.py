"""gRPC transport for the disperser service."""

from __future__ import annotations

import logging
from typing import Any

import grpc

from ...core.config import Endpoint, parse_endpoint
from ...core.constants import MAX_MESSAGE_SIZE
from ...core.exceptions import TransportError
from ...protocol import DisperserStub
from ...protocol import messages as pb

logger = logging.getLogger(__name__)

CHANNEL_OPTIONS = [
    ("grpc.max_send_message_length", MAX_MESSAGE_SIZE),
    ("grpc.max_receive_message_length", MAX_MESSAGE_SIZE),
]


class DisperserTransport:
    """Async gRPC transport wrapper.

    The channel is created lazily on first use, so building a transport
    never touches the network; an unreachable service surfaces as a
    ``TransportError`` on the first call. A ``grpc.aio`` channel multiplexes
    concurrent calls, so one transport may be shared by several clients.
    """

    def __init__(
        self,
        endpoint: str | Endpoint,
        *,
        credentials: grpc.ChannelCredentials | None = None,
        options: list[tuple[str, Any]] | None = None,
    ) -> None:
        self.endpoint = parse_endpoint(endpoint)
        self._credentials = credentials
        self._options = CHANNEL_OPTIONS + list(options or [])
        self._channel: grpc.aio.Channel | None = None
        self._stub: DisperserStub | None = None

    @property
    def stub(self) -> DisperserStub:
        """Get or create the channel and stub."""
        if self._stub is None:
            self._channel = self._create_channel()
            self._stub = DisperserStub(self._channel)
        return self._stub

    def _create_channel(self) -> grpc.aio.Channel:
        target = self.endpoint.target
        if self.endpoint.secure or self._credentials is not None:
            credentials = self._credentials or grpc.ssl_channel_credentials()
            logger.debug("Opening secure channel to %s", target)
            return grpc.aio.secure_channel(target, credentials, options=self._options)
        logger.debug("Opening insecure channel to %s", target)
        return grpc.aio.insecure_channel(target, options=self._options)

    async def disperse_blob(self, data: bytes) -> Any:
        """DisperseBlob round trip."""
        return await self._call(
            "DisperseBlob", self.stub.DisperseBlob, pb.DisperseBlobRequest(data=data)
        )

    async def get_blob_status(self, request_id: bytes) -> Any:
        """GetBlobStatus round trip."""
        return await self._call(
            "GetBlobStatus",
            self.stub.GetBlobStatus,
            pb.BlobStatusRequest(request_id=request_id),
        )

    async def retrieve_blob(self, storage_root: bytes, epoch: int, quorum_id: int) -> Any:
        """RetrieveBlob round trip."""
        return await self._call(
            "RetrieveBlob",
            self.stub.RetrieveBlob,
            pb.RetrieveBlobRequest(storage_root=storage_root, epoch=epoch, quorum_id=quorum_id),
        )

    async def _call(self, method: str, callable_: Any, request: Any) -> Any:
        try:
            reply = await callable_(request)
        except grpc.aio.AioRpcError as e:
            code = e.code()
            code_name = code.name if code is not None else None
            logger.debug("%s failed: %s %s", method, code_name, e.details())
            raise TransportError(
                f"{method} failed: {code_name}: {e.details()}",
                code=code_name,
                details=e.details(),
            ) from e
        if reply is None:
            # grpc.aio logs the decode failure and hands back None
            logger.debug("%s reply could not be decoded", method)
            raise TransportError(f"{method} failed: could not decode reply", code="INTERNAL")
        return reply

    async def close(self) -> None:
        """Close channel."""
        if self._channel is not None:
            channel = self._channel
            self._channel = None
            self._stub = None
            await channel.close()

    async def __aenter__(self) -> DisperserTransport:
        """Context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        await self.close()
