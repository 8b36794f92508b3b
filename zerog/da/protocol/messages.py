"""Protobuf message classes for the ``disperser`` package.

The descriptor below mirrors ``disperser.proto`` (shipped alongside this
module). It is registered in a private descriptor pool and the message
classes are produced by the protobuf runtime, so no protoc step is needed.
"""

from __future__ import annotations

from google.protobuf import descriptor_pb2, descriptor_pool, message_factory

from ..core.enums import BlobStatus

PACKAGE = "disperser"
SERVICE_NAME = f"{PACKAGE}.Disperser"

_Field = descriptor_pb2.FieldDescriptorProto

# (name, number, type, type_name)
_MESSAGES: dict[str, list[tuple[str, int, int, str | None]]] = {
    "DisperseBlobRequest": [
        ("data", 1, _Field.TYPE_BYTES, None),
    ],
    "DisperseBlobReply": [
        ("result", 1, _Field.TYPE_ENUM, "BlobStatus"),
        ("request_id", 2, _Field.TYPE_BYTES, None),
    ],
    "BlobStatusRequest": [
        ("request_id", 1, _Field.TYPE_BYTES, None),
    ],
    "BlobStatusReply": [
        ("status", 1, _Field.TYPE_ENUM, "BlobStatus"),
        ("info", 2, _Field.TYPE_MESSAGE, "BlobInfo"),
    ],
    "RetrieveBlobRequest": [
        ("storage_root", 1, _Field.TYPE_BYTES, None),
        ("epoch", 2, _Field.TYPE_UINT64, None),
        ("quorum_id", 3, _Field.TYPE_UINT64, None),
    ],
    "RetrieveBlobReply": [
        ("data", 1, _Field.TYPE_BYTES, None),
    ],
    "BlobInfo": [
        ("blob_header", 1, _Field.TYPE_MESSAGE, "BlobHeader"),
    ],
    "BlobHeader": [
        ("storage_root", 1, _Field.TYPE_BYTES, None),
        ("epoch", 2, _Field.TYPE_UINT64, None),
        ("quorum_id", 3, _Field.TYPE_UINT64, None),
    ],
}

_METHODS = [
    ("DisperseBlob", "DisperseBlobRequest", "DisperseBlobReply"),
    ("GetBlobStatus", "BlobStatusRequest", "BlobStatusReply"),
    ("RetrieveBlob", "RetrieveBlobRequest", "RetrieveBlobReply"),
]


def _build_file_descriptor() -> descriptor_pb2.FileDescriptorProto:
    file_proto = descriptor_pb2.FileDescriptorProto(
        name="disperser.proto",
        package=PACKAGE,
        syntax="proto3",
    )

    status_enum = file_proto.enum_type.add(name="BlobStatus")
    for status in BlobStatus:
        status_enum.value.add(name=status.name, number=status.value)

    for message_name, fields in _MESSAGES.items():
        message = file_proto.message_type.add(name=message_name)
        for name, number, field_type, type_name in fields:
            field = message.field.add(
                name=name,
                number=number,
                type=field_type,
                label=_Field.LABEL_OPTIONAL,
            )
            if type_name is not None:
                field.type_name = f".{PACKAGE}.{type_name}"

    service = file_proto.service.add(name="Disperser")
    for method_name, input_type, output_type in _METHODS:
        service.method.add(
            name=method_name,
            input_type=f".{PACKAGE}.{input_type}",
            output_type=f".{PACKAGE}.{output_type}",
        )

    return file_proto


_POOL = descriptor_pool.DescriptorPool()
DESCRIPTOR = _POOL.AddSerializedFile(_build_file_descriptor().SerializeToString())


def _message_class(name: str) -> type:
    return message_factory.GetMessageClass(_POOL.FindMessageTypeByName(f"{PACKAGE}.{name}"))


DisperseBlobRequest = _message_class("DisperseBlobRequest")
DisperseBlobReply = _message_class("DisperseBlobReply")
BlobStatusRequest = _message_class("BlobStatusRequest")
BlobStatusReply = _message_class("BlobStatusReply")
RetrieveBlobRequest = _message_class("RetrieveBlobRequest")
RetrieveBlobReply = _message_class("RetrieveBlobReply")
BlobInfo = _message_class("BlobInfo")
BlobHeader = _message_class("BlobHeader")


def method_path(method_name: str) -> str:
    """Full gRPC method path, e.g. ``/disperser.Disperser/DisperseBlob``."""
    return f"/{SERVICE_NAME}/{method_name}"
