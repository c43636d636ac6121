"""
Protobuf helpers over generated message classes.

Binary encoding and decoding are done by the protobuf runtime. These helpers
add the Cosmos ``Any`` type url convention (``"/" + full name``) and map
runtime failures onto ``EncodingError``.
"""

from __future__ import annotations
from typing import Type, TypeVar, Union

from google.protobuf.any_pb2 import Any as ProtoAny
from google.protobuf.message import DecodeError, EncodeError, Message

from ..runtime.errors import EncodingError, ErrorCode

M = TypeVar("M", bound=Message)


def type_url(message: Union[Message, Type[Message]]) -> str:
    """Type url of a message instance or class, e.g. ``/cosmos.bank.v1beta1.MsgSend``."""
    return "/" + message.DESCRIPTOR.full_name


def pack_any(message: Message) -> ProtoAny:
    """Pack a message into a ``google.protobuf.Any`` under its Cosmos type url."""
    packed = ProtoAny()
    try:
        packed.Pack(message, type_url_prefix="/")
    except EncodeError as e:
        raise EncodingError(f"Failed to encode {message.DESCRIPTOR.full_name}: {e}", cause=e)
    return packed


def encode_message(message: Message) -> bytes:
    """
    Serialize a message to protobuf binary.

    Raises:
        EncodingError: If a required part of the message cannot be encoded
    """
    try:
        return message.SerializeToString()
    except EncodeError as e:
        raise EncodingError(f"Failed to encode {message.DESCRIPTOR.full_name}: {e}", cause=e)


def decode_message(cls: Type[M], data: bytes) -> M:
    """
    Parse protobuf binary into ``cls``. Unknown fields are kept by the runtime.

    Raises:
        EncodingError: With ``UNMARSHAL_ERROR`` if the bytes are not a valid
            encoding of ``cls``
    """
    try:
        return cls.FromString(bytes(data))
    except DecodeError as e:
        raise EncodingError(f"Failed to decode {cls.DESCRIPTOR.full_name}: {e}",
                            code=ErrorCode.UNMARSHAL_ERROR, cause=e)


__all__ = [
    "ProtoAny",
    "type_url",
    "pack_any",
    "encode_message",
    "decode_message",
]
