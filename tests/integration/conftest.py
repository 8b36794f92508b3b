"""Shared fixtures for integration tests.

Runs an in-memory disperser behind a real ``grpc.aio`` server on localhost.
"""

from __future__ import annotations

import hashlib
from dataclasses import dataclass, field

import grpc
import pytest
import pytest_asyncio

from zerog.da.core import MAX_MESSAGE_SIZE, BlobStatus
from zerog.da.protocol import add_disperser_servicer
from zerog.da.protocol import messages as pb


@dataclass
class StoredBlob:
    data: bytes
    storage_root: bytes
    epoch: int
    quorum_id: int
    polls: int = 0


@dataclass
class InMemoryDisperser:
    """Disperser servicer that finalizes every blob after ``pending_polls`` queries."""

    pending_polls: int = 1
    epoch: int = 1
    quorum_id: int = 0
    fail: set[bytes] = field(default_factory=set)
    blobs: dict[bytes, StoredBlob] = field(default_factory=dict)
    calls: list[str] = field(default_factory=list)
    endpoint: str = ""

    async def DisperseBlob(self, request, context):
        self.calls.append("DisperseBlob")
        request_id = hashlib.sha256(b"%d:" % len(self.blobs) + request.data).digest()
        self.blobs[request_id] = StoredBlob(
            data=request.data,
            storage_root=hashlib.sha256(request.data).digest(),
            epoch=self.epoch,
            quorum_id=self.quorum_id,
        )
        return pb.DisperseBlobReply(result=BlobStatus.PROCESSING, request_id=request_id)

    async def GetBlobStatus(self, request, context):
        self.calls.append("GetBlobStatus")
        blob = self.blobs.get(request.request_id)
        if blob is None:
            await context.abort(grpc.StatusCode.NOT_FOUND, "unknown request id")
        if request.request_id in self.fail:
            return pb.BlobStatusReply(status=BlobStatus.FAILED)
        blob.polls += 1
        if blob.polls <= self.pending_polls:
            return pb.BlobStatusReply(status=BlobStatus.PROCESSING)
        return pb.BlobStatusReply(
            status=BlobStatus.FINALIZED,
            info=pb.BlobInfo(
                blob_header=pb.BlobHeader(
                    storage_root=blob.storage_root,
                    epoch=blob.epoch,
                    quorum_id=blob.quorum_id,
                )
            ),
        )

    async def RetrieveBlob(self, request, context):
        self.calls.append("RetrieveBlob")
        for blob in self.blobs.values():
            if (blob.storage_root, blob.epoch, blob.quorum_id) == (
                request.storage_root,
                request.epoch,
                request.quorum_id,
            ):
                return pb.RetrieveBlobReply(data=blob.data)
        await context.abort(grpc.StatusCode.NOT_FOUND, "blob not found")


@pytest_asyncio.fixture
async def disperser():
    """Start an in-memory disperser and yield it with its endpoint set."""
    servicer = InMemoryDisperser()
    server = grpc.aio.server(
        options=[
            ("grpc.max_send_message_length", MAX_MESSAGE_SIZE),
            ("grpc.max_receive_message_length", MAX_MESSAGE_SIZE),
        ]
    )
    add_disperser_servicer(servicer, server)
    port = server.add_insecure_port("127.0.0.1:0")
    await server.start()
    servicer.endpoint = f"http://127.0.0.1:{port}"
    try:
        yield servicer
    finally:
        await server.stop(None)


@pytest.fixture(autouse=True)
def fast_polling(monkeypatch):
    from zerog.da.clients import da_client

    monkeypatch.setattr(da_client, "POLL_INTERVAL_SECONDS", 0.01)
