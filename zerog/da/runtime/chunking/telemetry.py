"""Structured logging for chunking operations.

This module provides telemetry hooks for chunked submission, emitting
structured log records for observability.
"""

from __future__ import annotations

import logging

from .definitions import ChunkResult

logger = logging.getLogger(__name__)


def log_chunk_plan(
    *,
    total_chunks: int,
    total_size: int,
    max_chunk_size: int,
) -> None:
    """Log chunk plan creation.

    Args:
        total_chunks: Total number of chunks planned
        total_size: Blob size in bytes
        max_chunk_size: Per-chunk size limit
    """
    logger.debug(
        "chunk_plan_created",
        extra={
            "total_chunks": total_chunks,
            "total_size": total_size,
            "max_chunk_size": max_chunk_size,
        },
    )


def log_chunk_completed(
    *,
    operation: str,
    chunk_index: int,
    chunk_size: int,
    latency_ms: float | None = None,
) -> None:
    """Log completion of a single chunk.

    Args:
        operation: Name of the per-chunk operation (e.g. "submit")
        chunk_index: Zero-based index of the chunk
        chunk_size: Chunk length in bytes
        latency_ms: Latency in milliseconds (optional)
    """
    logger.info(
        "chunk_completed",
        extra={
            "operation": operation,
            "chunk_index": chunk_index,
            "chunk_size": chunk_size,
            "latency_ms": latency_ms,
        },
    )


def log_chunk_execution_complete(
    *,
    operation: str,
    result: ChunkResult,
    total_latency_ms: float | None = None,
) -> None:
    """Log completion of chunk execution.

    Args:
        operation: Name of the per-chunk operation
        result: ChunkResult from execution
        total_latency_ms: Total latency in milliseconds (optional)
    """
    logger.info(
        "chunk_execution_complete",
        extra={
            "operation": operation,
            "chunks_used": result.chunks_used,
            "total_bytes": result.total_bytes,
            "total_latency_ms": total_latency_ms,
        },
    )


def log_chunk_error(
    *,
    operation: str,
    chunk_index: int,
    error_type: str,
    error_message: str,
) -> None:
    """Log chunk execution error.

    Args:
        operation: Name of the per-chunk operation
        chunk_index: Zero-based index of the chunk that failed
        error_type: Type of error (e.g., "TransportError", "FinalizationTimeoutError")
        error_message: Error message
    """
    logger.error(
        "chunk_error",
        extra={
            "operation": operation,
            "chunk_index": chunk_index,
            "error_type": error_type,
            "error_message": error_message,
        },
    )
