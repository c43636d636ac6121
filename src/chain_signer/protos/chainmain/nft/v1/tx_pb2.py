# Generated protocol buffer code for chainmain/nft/v1/tx.proto.
#
# The file descriptor is assembled with descriptor_pb2 instead of being
# embedded as a serialized blob; the message classes are then built by the
# protobuf runtime exactly as protoc output does.
"""Generated protocol buffer code."""
from google.protobuf import descriptor_pb2 as _descriptor_pb2
from google.protobuf import descriptor_pool as _descriptor_pool
from google.protobuf.internal import builder as _builder

_STRING = _descriptor_pb2.FieldDescriptorProto.TYPE_STRING
_OPTIONAL = _descriptor_pb2.FieldDescriptorProto.LABEL_OPTIONAL


def _json_name(name):
    head, *rest = name.split("_")
    return head + "".join(part.capitalize() for part in rest)


def _message(name, *field_names):
    message = _descriptor_pb2.DescriptorProto(name=name)
    for number, field_name in enumerate(field_names, start=1):
        message.field.add(
            name=field_name,
            number=number,
            label=_OPTIONAL,
            type=_STRING,
            json_name=_json_name(field_name),
        )
    return message


_FILE = _descriptor_pb2.FileDescriptorProto(
    name="chainmain/nft/v1/tx.proto",
    package="chainmain.nft.v1",
    syntax="proto3",
    message_type=[
        _message("MsgIssueDenom", "id", "name", "schema", "sender"),
        _message("MsgMintNFT", "id", "denom_id", "name", "uri", "data", "sender", "recipient"),
        _message("MsgTransferNFT", "id", "denom_id", "sender", "recipient"),
    ],
)

DESCRIPTOR = _descriptor_pool.Default().AddSerializedFile(_FILE.SerializeToString())

_globals = globals()
_builder.BuildMessageAndEnumDescriptors(DESCRIPTOR, _globals)
_builder.BuildTopDescriptorsAndMessages(DESCRIPTOR, "chainmain.nft.v1.tx_pb2", _globals)
