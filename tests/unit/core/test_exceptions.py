"""Precise unit tests for exception hierarchy.

Tests focus on meaningful behavior, not just field access.
"""

from zerog.da.core import (
    DAConnectionError,
    DAError,
    FinalizationTimeoutError,
    ProtocolViolationError,
    SizeExceededError,
    TerminalFailureError,
    TransportError,
)


def test_size_exceeded_error_carries_sizes():
    """Test SizeExceededError reports limit and actual size."""
    error = SizeExceededError(max_size=10, actual_size=11)
    assert error.max_size == 10
    assert error.actual_size == 11
    assert str(error) == "maximum blob size 10 exceeded, current blob size 11"
    assert isinstance(error, DAError)


def test_transport_error_with_code():
    """Test TransportError keeps the RPC status code."""
    error = TransportError("boom", code="UNAVAILABLE", details="connection refused")
    assert error.code == "UNAVAILABLE"
    assert error.details == "connection refused"
    assert isinstance(error, DAError)


def test_finalization_timeout_is_builtin_timeout():
    """Test FinalizationTimeoutError can be caught as TimeoutError."""
    error = FinalizationTimeoutError("late", request_id=b"\x01", timeout=5)
    assert isinstance(error, TimeoutError)
    assert isinstance(error, DAError)
    assert error.request_id == b"\x01"
    assert error.timeout == 5


def test_terminal_failure_error_with_request_id():
    """Test TerminalFailureError keeps the failed request id."""
    error = TerminalFailureError("failed", request_id=b"abc")
    assert error.request_id == b"abc"
    assert isinstance(error, DAError)


def test_remaining_errors_share_base():
    """Test connection and protocol errors derive from DAError."""
    assert isinstance(DAConnectionError("bad", endpoint="x"), DAError)
    assert isinstance(ProtocolViolationError("bad"), DAError)
