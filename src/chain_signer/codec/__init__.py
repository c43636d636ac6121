"""
Chain Signer Codec Module

Protobuf binary encoding comes from the generated message classes (cosmpy's
Cosmos SDK and ibc-go protos, plus the chain-main NFT protos shipped in
``chain_signer.protos``). This package adds:

- proto.py: Any packing under Cosmos type urls and decode error mapping
- amino.py: Descriptor-driven legacy amino JSON rendering
"""

from .amino import AminoCodec, AminoRule
from .proto import ProtoAny, decode_message, encode_message, pack_any, type_url

__all__ = [
    "ProtoAny",
    "type_url",
    "pack_any",
    "encode_message",
    "decode_message",
    "AminoRule",
    "AminoCodec",
]
