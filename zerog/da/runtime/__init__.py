"""Runtime orchestration components."""

from .chunking import ChunkExecutor, ChunkPlan, ChunkPlanner, ChunkPolicy, split_blob
from .polling import FinalizationPoller
from .rpc import DisperserTransport

__all__ = [
    "ChunkExecutor",
    "ChunkPlan",
    "ChunkPlanner",
    "ChunkPolicy",
    "DisperserTransport",
    "FinalizationPoller",
    "split_blob",
]
