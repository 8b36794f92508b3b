"""Client configuration and endpoint parsing.

This module keeps the connection settings small and immutable: an endpoint
is parsed once when the client is built, and poll settings live in a frozen
``ClientConfig`` that is replaced rather than mutated.
"""

from __future__ import annotations

from dataclasses import dataclass
from urllib.parse import urlsplit

from .constants import DEFAULT_POLL_TIMEOUT_SECONDS
from .exceptions import DAConnectionError

DEFAULT_PORTS = {
    "http": 80,
    "grpc": 80,
    "https": 443,
}

SECURE_SCHEMES = frozenset({"https"})


@dataclass(frozen=True)
class Endpoint:
    """Parsed disperser address.

    Attributes:
        host: Host name or IP address
        port: TCP port
        secure: Whether the channel should use TLS
    """

    host: str
    port: int
    secure: bool = False

    @property
    def target(self) -> str:
        """gRPC target string (``host:port``)."""
        host = self.host
        if ":" in host:
            # IPv6 literal
            host = f"[{host}]"
        return f"{host}:{self.port}"


def parse_endpoint(value: str | Endpoint) -> Endpoint:
    """Parse an endpoint address.

    Accepts ``scheme://host[:port]`` (http, https or grpc) or a bare
    ``host:port``. No network I/O is performed.

    Args:
        value: Endpoint string or an already parsed Endpoint

    Returns:
        Parsed Endpoint

    Raises:
        DAConnectionError: If the value is not a usable address

    Examples:
        >>> parse_endpoint("http://0.0.0.0:51001").target
        '0.0.0.0:51001'
        >>> parse_endpoint("https://da.example.com").port
        443
    """
    if isinstance(value, Endpoint):
        return value
    if not isinstance(value, str) or not value.strip():
        raise DAConnectionError("endpoint must be a non-empty string", endpoint=str(value))

    raw = value.strip()
    if "://" not in raw:
        # Bare host:port, treated as plaintext
        raw = f"http://{raw}"

    try:
        parts = urlsplit(raw)
        port = parts.port
    except ValueError as e:
        raise DAConnectionError(f"invalid endpoint {value!r}: {e}", endpoint=value) from e

    scheme = parts.scheme.lower()
    if scheme not in DEFAULT_PORTS:
        raise DAConnectionError(f"unsupported endpoint scheme {scheme!r}", endpoint=value)
    if not parts.hostname:
        raise DAConnectionError(f"endpoint {value!r} has no host", endpoint=value)
    if parts.path not in ("", "/") or parts.query or parts.fragment:
        raise DAConnectionError(f"endpoint {value!r} must not carry a path", endpoint=value)

    return Endpoint(
        host=parts.hostname,
        port=port if port is not None else DEFAULT_PORTS[scheme],
        secure=scheme in SECURE_SCHEMES,
    )


@dataclass(frozen=True)
class ClientConfig:
    """Per-client settings.

    Attributes:
        poll_timeout: Seconds to wait for a submission to finalize
        max_concurrency: Chunks in flight at once for multi-chunk calls
            (1 = strictly sequential)
    """

    poll_timeout: float = DEFAULT_POLL_TIMEOUT_SECONDS
    max_concurrency: int = 1

    def __post_init__(self) -> None:
        """Validate configuration."""
        if self.poll_timeout < 0:
            raise ValueError("poll_timeout must be >= 0")
        if self.max_concurrency < 1:
            raise ValueError("max_concurrency must be >= 1")
