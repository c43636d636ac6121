"""
Signature binding and signed transaction decoding.

A signed transaction is a ``TxRaw``: the body bytes and auth info bytes
exactly as signed, plus one signature per signer. This module packs that
envelope for broadcast and unpacks it again for inspection.
"""

from __future__ import annotations
import binascii
import hashlib
import logging
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from google.protobuf.message import Message

from ..codec.proto import decode_message, encode_message
from ..runtime.errors import EncodingError, ErrorCode
from .proto_types import AuthInfo, TxBody, TxRaw
from .registry import Registry, full_registry

logger = logging.getLogger(__name__)


def compute_tx_hash(tx_bytes: bytes) -> str:
    """Transaction hash as reported by Tendermint nodes: uppercase hex SHA-256."""
    return hashlib.sha256(tx_bytes).hexdigest().upper()


def bind_signatures(body_bytes: bytes, auth_info_bytes: bytes, signatures: Sequence[bytes]) -> bytes:
    """Encode a ``TxRaw`` from already-encoded body and auth info."""
    tx_raw = TxRaw(
        body_bytes=bytes(body_bytes),
        auth_info_bytes=bytes(auth_info_bytes),
        signatures=[bytes(sig) for sig in signatures],
    )
    return encode_message(tx_raw)


def bind_signature(body_bytes: bytes, auth_info_bytes: bytes, signature: bytes) -> str:
    """
    Bind a single signature to its transaction.

    The signature is attached bit-for-bit; the body and auth info are not
    re-encoded.

    Args:
        body_bytes: Encoded ``TxBody`` that was signed over
        auth_info_bytes: Encoded ``AuthInfo`` that was signed over
        signature: Signature returned by the signer

    Returns:
        Lowercase hex of the encoded ``TxRaw``
    """
    encoded = bind_signatures(body_bytes, auth_info_bytes, [signature])
    logger.debug(f"Bound signature, tx hash {compute_tx_hash(encoded)}")
    return encoded.hex()


@dataclass(frozen=True)
class DecodedTransaction:
    """
    Signed transaction unpacked for inspection.

    Attributes:
        messages: Body messages, decoded through the registry
        memo: Body memo
        auth_info: Decoded auth info (signer infos and fee)
        signatures: Raw signatures, in signer order
        tx_hash: Uppercase hex SHA-256 of the encoded envelope
    """

    messages: Tuple[Message, ...]
    memo: str
    auth_info: AuthInfo
    signatures: Tuple[bytes, ...]
    tx_hash: str


def decode_signed_transaction(tx_hex: str, registry: Optional[Registry] = None) -> DecodedTransaction:
    """
    Decode a hex-encoded signed transaction.

    Args:
        tx_hex: Hex string as produced by ``bind_signature``
        registry: Registry used to unpack body messages; defaults to every known type

    Returns:
        DecodedTransaction

    Raises:
        EncodingError: If the hex or any nested encoding is malformed, or a
            message type is not registered
    """
    try:
        tx_bytes = bytes.fromhex(tx_hex)
    except (ValueError, TypeError, binascii.Error) as e:
        raise EncodingError("Signed transaction is not valid hex", code=ErrorCode.UNMARSHAL_ERROR, cause=e)

    if registry is None:
        registry = full_registry()
    tx_raw = decode_message(TxRaw, tx_bytes)
    body = decode_message(TxBody, tx_raw.body_bytes)
    auth_info = decode_message(AuthInfo, tx_raw.auth_info_bytes)

    return DecodedTransaction(
        messages=tuple(registry.decode_any(packed) for packed in body.messages),
        memo=body.memo,
        auth_info=auth_info,
        signatures=tuple(tx_raw.signatures),
        tx_hash=compute_tx_hash(tx_bytes),
    )


__all__ = [
    "compute_tx_hash",
    "bind_signatures",
    "bind_signature",
    "DecodedTransaction",
    "decode_signed_transaction",
]
