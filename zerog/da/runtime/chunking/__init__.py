"""Chunking layer for blob submission.

This module splits blobs that exceed the per-call size limit into ordered
chunks and runs a per-chunk coroutine over them.

Architecture:
    The chunking layer consists of:
    - definitions.py: Chunk metadata structures (ChunkPolicy, ChunkPlan, ChunkResult)
    - planners.py: Chunk planning logic (determines chunk boundaries)
    - executors.py: Chunk execution logic (runs chunks, keeps order, fails fast)
    - telemetry.py: Structured logging
"""

from __future__ import annotations

from .definitions import ChunkPlan, ChunkPolicy, ChunkResult
from .executors import ChunkExecutor
from .planners import ChunkPlanner, split_blob

__all__ = [
    "ChunkPolicy",
    "ChunkPlan",
    "ChunkResult",
    "ChunkPlanner",
    "ChunkExecutor",
    "split_blob",
]
