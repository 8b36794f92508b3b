"""Blob header, info and status reply models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from ..core.constants import UINT64_MAX
from ..core.enums import BlobStatus


class BlobHeader(BaseModel):
    """Canonical descriptor of a finalized chunk, used as the retrieval key."""

    storage_root: bytes
    epoch: int = Field(..., ge=0, le=UINT64_MAX)
    quorum_id: int = Field(..., ge=0, le=UINT64_MAX)

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_proto(cls, message: Any) -> BlobHeader:
        return cls(
            storage_root=bytes(message.storage_root),
            epoch=message.epoch,
            quorum_id=message.quorum_id,
        )


class BlobInfo(BaseModel):
    """Info record attached to a status reply."""

    blob_header: BlobHeader | None = None

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_proto(cls, message: Any) -> BlobInfo:
        header = None
        if message.HasField("blob_header"):
            header = BlobHeader.from_proto(message.blob_header)
        return cls(blob_header=header)


class BlobStatusReply(BaseModel):
    """Status of one submission exactly as the service reported it.

    ``status`` keeps the raw wire integer; ``blob_status`` decodes it and
    raises ``ProtocolViolationError`` for values outside ``BlobStatus``.
    """

    status: int
    info: BlobInfo | None = None

    model_config = ConfigDict(frozen=True)

    @property
    def blob_status(self) -> BlobStatus:
        """Decoded status."""
        return BlobStatus.from_wire(self.status)

    @property
    def blob_header(self) -> BlobHeader | None:
        """Header of the finalized chunk, when the reply carries one."""
        return self.info.blob_header if self.info is not None else None

    @classmethod
    def from_proto(cls, message: Any) -> BlobStatusReply:
        info = None
        if message.HasField("info"):
            info = BlobInfo.from_proto(message.info)
        return cls(status=message.status, info=info)
