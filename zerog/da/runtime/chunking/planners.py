"""Chunk planning logic.

This module provides the ChunkPlanner class that determines how to split a
blob into ordered chunks no larger than the policy allows.
"""

from __future__ import annotations

from .definitions import ChunkPlan, ChunkPolicy
from .telemetry import log_chunk_plan


class ChunkPlanner:
    """Plans chunk boundaries for blob submission.

    Planning is pure: the same size always yields the same plans. Every
    chunk is non-empty except for an empty blob, which is planned as a
    single empty chunk.
    """

    def __init__(self, policy: ChunkPolicy | None = None) -> None:
        """Initialize chunk planner.

        Args:
            policy: Chunking policy (defaults to the protocol maximum)
        """
        self._policy = policy or ChunkPolicy()

    @property
    def policy(self) -> ChunkPolicy:
        return self._policy

    def plan(self, total_size: int) -> list[ChunkPlan]:
        """Plan chunks for a blob.

        Args:
            total_size: Blob length in bytes

        Returns:
            List of chunk plans covering ``[0, total_size)`` in order

        Raises:
            ValueError: If total_size is negative
        """
        if total_size < 0:
            raise ValueError("total_size must be >= 0")

        chunk_size = self._policy.max_chunk_size

        # Fast path: one submission is enough
        if total_size <= chunk_size:
            plans = [ChunkPlan(chunk_index=0, offset=0, length=total_size)]
        else:
            plans = [
                ChunkPlan(
                    chunk_index=chunk_index,
                    offset=offset,
                    length=min(chunk_size, total_size - offset),
                )
                for chunk_index, offset in enumerate(range(0, total_size, chunk_size))
            ]

        log_chunk_plan(
            total_chunks=len(plans),
            total_size=total_size,
            max_chunk_size=chunk_size,
        )

        return plans

    def split(self, data: bytes) -> list[bytes]:
        """Split ``data`` into chunks according to :meth:`plan`."""
        return [plan.slice(data) for plan in self.plan(len(data))]


def split_blob(data: bytes, policy: ChunkPolicy | None = None) -> list[bytes]:
    """Split a blob into ordered chunks of at most ``max_chunk_size`` bytes.

    Concatenating the result in order reproduces ``data`` exactly.

    Examples:
        >>> split_blob(b"abcde", ChunkPolicy(max_chunk_size=2))
        [b'ab', b'cd', b'e']
        >>> split_blob(b"")
        [b'']
    """
    return ChunkPlanner(policy).split(data)
