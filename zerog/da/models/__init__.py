"""Data models returned by the client.

Architecture:
    Wire messages are protobuf; everything handed back to callers is an
    immutable Pydantic v2 model converted with ``from_proto``. Raw status
    integers are preserved so a caller of ``get_status`` sees exactly what
    the service sent.
"""

from .blob import BlobHeader, BlobInfo, BlobStatusReply

__all__ = [
    "BlobHeader",
    "BlobInfo",
    "BlobStatusReply",
]
