"""Client stub for the ``disperser.Disperser`` gRPC service."""

from __future__ import annotations

import grpc

from . import messages as pb


class DisperserStub:
    """Unary multicallables bound to one ``grpc.aio`` channel."""

    def __init__(self, channel: grpc.aio.Channel) -> None:
        self.DisperseBlob = channel.unary_unary(
            pb.method_path("DisperseBlob"),
            request_serializer=pb.DisperseBlobRequest.SerializeToString,
            response_deserializer=pb.DisperseBlobReply.FromString,
        )
        self.GetBlobStatus = channel.unary_unary(
            pb.method_path("GetBlobStatus"),
            request_serializer=pb.BlobStatusRequest.SerializeToString,
            response_deserializer=pb.BlobStatusReply.FromString,
        )
        self.RetrieveBlob = channel.unary_unary(
            pb.method_path("RetrieveBlob"),
            request_serializer=pb.RetrieveBlobRequest.SerializeToString,
            response_deserializer=pb.RetrieveBlobReply.FromString,
        )


def add_disperser_servicer(servicer: object, server: grpc.aio.Server) -> None:
    """Register a disperser implementation on a ``grpc.aio`` server.

    The servicer must provide async ``DisperseBlob``, ``GetBlobStatus`` and
    ``RetrieveBlob`` methods taking ``(request, context)``.
    """
    handlers = {
        "DisperseBlob": grpc.unary_unary_rpc_method_handler(
            servicer.DisperseBlob,
            request_deserializer=pb.DisperseBlobRequest.FromString,
            response_serializer=pb.DisperseBlobReply.SerializeToString,
        ),
        "GetBlobStatus": grpc.unary_unary_rpc_method_handler(
            servicer.GetBlobStatus,
            request_deserializer=pb.BlobStatusRequest.FromString,
            response_serializer=pb.BlobStatusReply.SerializeToString,
        ),
        "RetrieveBlob": grpc.unary_unary_rpc_method_handler(
            servicer.RetrieveBlob,
            request_deserializer=pb.RetrieveBlobRequest.FromString,
            response_serializer=pb.RetrieveBlobReply.SerializeToString,
        ),
    }
    server.add_generic_rpc_handlers(
        (grpc.method_handlers_generic_handler(pb.SERVICE_NAME, handlers),)
    )
