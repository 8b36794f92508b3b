"""High-level clients."""

from .da_client import DAClient

__all__ = ["DAClient"]
