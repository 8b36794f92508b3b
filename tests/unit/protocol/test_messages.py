"""Unit tests for the disperser wire messages."""

from zerog.da.core import BlobStatus
from zerog.da.protocol import messages as pb


class TestMessages:
    """Test protobuf message classes built from the descriptor."""

    def test_service_methods(self):
        service = pb.DESCRIPTOR.services_by_name["Disperser"]
        assert [method.name for method in service.methods] == [
            "DisperseBlob",
            "GetBlobStatus",
            "RetrieveBlob",
        ]
        assert pb.method_path("GetBlobStatus") == "/disperser.Disperser/GetBlobStatus"

    def test_enum_matches_blob_status(self):
        enum = pb.DESCRIPTOR.enum_types_by_name["BlobStatus"]
        assert {value.name: value.number for value in enum.values} == {
            status.name: status.value for status in BlobStatus
        }

    def test_status_reply_wire_encoding(self):
        """Test field numbers by checking the encoded bytes."""
        reply = pb.BlobStatusReply(
            status=BlobStatus.FINALIZED,
            info=pb.BlobInfo(blob_header=pb.BlobHeader(storage_root=b"\x01", epoch=2, quorum_id=3)),
        )
        # status=4, info { blob_header { storage_root=01, epoch=2, quorum_id=3 } }
        assert reply.SerializeToString() == bytes.fromhex("080412090a070a010110021803")

    def test_request_id_roundtrip(self):
        request = pb.BlobStatusRequest(request_id=b"\x00\xffid")
        assert pb.BlobStatusRequest.FromString(request.SerializeToString()).request_id == (
            b"\x00\xffid"
        )

    def test_unknown_enum_value_is_kept(self):
        """Test proto3 open enums keep unknown status integers."""
        encoded = bytes.fromhex("082a")  # status = 42
        assert pb.BlobStatusReply.FromString(encoded).status == 42
