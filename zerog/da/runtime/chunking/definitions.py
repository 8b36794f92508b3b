"""Chunking policy and plan structures.

This module defines the data structures used to describe how a blob is cut
into submissions that fit the disperser's per-call size limit.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

from ...core.constants import MAX_CHUNK_SIZE

T = TypeVar("T")


@dataclass(frozen=True)
class ChunkPolicy:
    """Chunking policy for blob submission.

    Attributes:
        max_chunk_size: Maximum number of bytes per submission
    """

    max_chunk_size: int = MAX_CHUNK_SIZE

    def __post_init__(self) -> None:
        """Validate chunk policy configuration."""
        if self.max_chunk_size <= 0:
            raise ValueError("max_chunk_size must be positive")


@dataclass(frozen=True)
class ChunkPlan:
    """Plan for a single chunk.

    Attributes:
        chunk_index: Zero-based index of this chunk in the overall plan
        offset: Byte offset of the chunk within the blob
        length: Number of bytes in the chunk
    """

    chunk_index: int
    offset: int
    length: int

    @property
    def end(self) -> int:
        """Exclusive end offset."""
        return self.offset + self.length

    def slice(self, data: bytes) -> bytes:
        """Cut this chunk out of ``data``."""
        return bytes(data[self.offset : self.end])


@dataclass
class ChunkResult(Generic[T]):
    """Result of chunked execution.

    Attributes:
        results: Per-chunk results, in chunk order
        chunks_used: Number of chunks that were executed
        total_bytes: Total payload bytes across all chunks
    """

    results: list[T]
    chunks_used: int
    total_bytes: int = 0
