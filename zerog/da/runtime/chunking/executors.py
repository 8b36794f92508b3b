"""Chunk execution logic.

This module provides the ChunkExecutor class that runs one coroutine per
chunk plan and collects the results in chunk order.
"""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable
from time import perf_counter
from typing import TypeVar

from .definitions import ChunkPlan, ChunkResult
from .telemetry import log_chunk_completed, log_chunk_error, log_chunk_execution_complete

T = TypeVar("T")

RunChunk = Callable[[ChunkPlan, bytes], Awaitable[T]]


class ChunkExecutor:
    """Executes chunk plans against a blob and aggregates results.

    Chunks run strictly one after another by default. With
    ``max_concurrency > 1`` up to that many chunks are in flight at once;
    results still come back in chunk order. Either way the first failing
    chunk aborts the run: no further chunks are started, chunks in flight
    are cancelled, and that chunk's error is re-raised unchanged.
    """

    def __init__(self, operation: str = "chunk", max_concurrency: int = 1) -> None:
        """Initialize chunk executor.

        Args:
            operation: Name used in telemetry records
            max_concurrency: Maximum number of chunks in flight
        """
        if max_concurrency < 1:
            raise ValueError("max_concurrency must be >= 1")
        self._operation = operation
        self._max_concurrency = max_concurrency

    async def execute(
        self,
        *,
        plans: list[ChunkPlan],
        data: bytes,
        run_chunk: RunChunk[T],
    ) -> ChunkResult[T]:
        """Execute chunk plans.

        Args:
            plans: Chunk plans covering ``data``
            data: The full blob
            run_chunk: Async function taking a plan and its bytes

        Returns:
            ChunkResult with one result per plan, in plan order
        """
        if not plans:
            raise ValueError("Cannot execute: no chunk plans provided")

        start = perf_counter()
        if self._max_concurrency == 1 or len(plans) == 1:
            results = [await self._run_one(plan, data, run_chunk) for plan in plans]
        else:
            results = await self._run_concurrent(plans, data, run_chunk)

        result = ChunkResult(
            results=results,
            chunks_used=len(plans),
            total_bytes=sum(plan.length for plan in plans),
        )

        log_chunk_execution_complete(
            operation=self._operation,
            result=result,
            total_latency_ms=(perf_counter() - start) * 1000.0,
        )

        return result

    async def _run_one(self, plan: ChunkPlan, data: bytes, run_chunk: RunChunk[T]) -> T:
        chunk_start = perf_counter()
        try:
            value = await run_chunk(plan, plan.slice(data))
        except Exception as e:
            log_chunk_error(
                operation=self._operation,
                chunk_index=plan.chunk_index,
                error_type=type(e).__name__,
                error_message=str(e),
            )
            raise

        log_chunk_completed(
            operation=self._operation,
            chunk_index=plan.chunk_index,
            chunk_size=plan.length,
            latency_ms=(perf_counter() - chunk_start) * 1000.0,
        )
        return value

    async def _run_concurrent(
        self, plans: list[ChunkPlan], data: bytes, run_chunk: RunChunk[T]
    ) -> list[T]:
        semaphore = asyncio.Semaphore(self._max_concurrency)

        async def bounded(plan: ChunkPlan) -> T:
            async with semaphore:
                return await self._run_one(plan, data, run_chunk)

        tasks = [asyncio.create_task(bounded(plan)) for plan in plans]
        try:
            pending = set(tasks)
            while pending:
                done, pending = await asyncio.wait(pending, return_when=asyncio.FIRST_EXCEPTION)
                failed = [
                    task
                    for task in tasks
                    if task in done and not task.cancelled() and task.exception() is not None
                ]
                if failed:
                    # Lowest chunk index wins when several fail together
                    raise failed[0].exception()
            return [task.result() for task in tasks]
        finally:
            for task in tasks:
                if not task.done():
                    task.cancel()
            await asyncio.gather(*tasks, return_exceptions=True)
