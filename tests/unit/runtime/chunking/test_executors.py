"""Unit tests for chunk execution logic."""

from __future__ import annotations

import asyncio

import pytest

from zerog.da.runtime.chunking import ChunkExecutor, ChunkPlan, ChunkPlanner, ChunkPolicy


def _plans(data: bytes, size: int) -> list[ChunkPlan]:
    return ChunkPlanner(ChunkPolicy(max_chunk_size=size)).plan(len(data))


class TestChunkExecutor:
    """Test ChunkExecutor functionality."""

    @pytest.mark.asyncio
    async def test_execute_sequential_in_order(self):
        """Test chunks run one at a time in chunk order."""
        data = b"aabbc"
        seen: list[tuple[int, bytes]] = []
        in_flight = 0
        max_in_flight = 0

        async def run_chunk(plan: ChunkPlan, chunk: bytes) -> int:
            nonlocal in_flight, max_in_flight
            in_flight += 1
            max_in_flight = max(max_in_flight, in_flight)
            await asyncio.sleep(0)
            seen.append((plan.chunk_index, chunk))
            in_flight -= 1
            return plan.chunk_index

        result = await ChunkExecutor().execute(
            plans=_plans(data, 2), data=data, run_chunk=run_chunk
        )

        assert result.results == [0, 1, 2]
        assert result.chunks_used == 3
        assert result.total_bytes == 5
        assert seen == [(0, b"aa"), (1, b"bb"), (2, b"c")]
        assert max_in_flight == 1

    @pytest.mark.asyncio
    async def test_execute_sequential_stops_on_first_error(self):
        """Test a failing chunk aborts the remaining sequence."""
        data = b"aabbcc"
        calls: list[int] = []

        async def run_chunk(plan: ChunkPlan, chunk: bytes) -> int:
            calls.append(plan.chunk_index)
            if plan.chunk_index == 1:
                raise RuntimeError("chunk 1 failed")
            return plan.chunk_index

        with pytest.raises(RuntimeError, match="chunk 1 failed"):
            await ChunkExecutor().execute(plans=_plans(data, 2), data=data, run_chunk=run_chunk)

        assert calls == [0, 1]

    @pytest.mark.asyncio
    async def test_execute_concurrent_keeps_chunk_order(self):
        """Test results follow chunk order regardless of completion order."""
        data = b"abcd"
        in_flight = 0
        max_in_flight = 0

        async def run_chunk(plan: ChunkPlan, chunk: bytes) -> bytes:
            nonlocal in_flight, max_in_flight
            in_flight += 1
            max_in_flight = max(max_in_flight, in_flight)
            # Later chunks finish first
            await asyncio.sleep(0.01 * (4 - plan.chunk_index))
            in_flight -= 1
            return chunk

        executor = ChunkExecutor(max_concurrency=2)
        result = await executor.execute(plans=_plans(data, 1), data=data, run_chunk=run_chunk)

        assert result.results == [b"a", b"b", b"c", b"d"]
        assert max_in_flight == 2

    @pytest.mark.asyncio
    async def test_execute_concurrent_cancels_others_on_failure(self):
        """Test one failure cancels chunks still in flight and surfaces alone."""
        data = b"abc"
        cancelled: list[int] = []

        async def run_chunk(plan: ChunkPlan, chunk: bytes) -> bytes:
            if plan.chunk_index == 1:
                raise ValueError("bad chunk")
            try:
                await asyncio.sleep(10)
            except asyncio.CancelledError:
                cancelled.append(plan.chunk_index)
                raise
            return chunk

        executor = ChunkExecutor(max_concurrency=3)
        with pytest.raises(ValueError, match="bad chunk"):
            await executor.execute(plans=_plans(data, 1), data=data, run_chunk=run_chunk)

        assert sorted(cancelled) == [0, 2]

    @pytest.mark.asyncio
    async def test_execute_requires_plans(self):
        async def run_chunk(plan: ChunkPlan, chunk: bytes) -> None:
            return None

        with pytest.raises(ValueError, match="no chunk plans"):
            await ChunkExecutor().execute(plans=[], data=b"", run_chunk=run_chunk)

    def test_invalid_concurrency(self):
        with pytest.raises(ValueError):
            ChunkExecutor(max_concurrency=0)
