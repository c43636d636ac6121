"""
Legacy amino JSON sign documents and auth info assembly.

Provides the pieces a ``SIGN_MODE_LEGACY_AMINO_JSON`` signer needs:
the secp256k1 public key in its amino and ``Any`` forms, the protobuf
auth info bytes, and the canonical JSON sign document whose bytes the
signer actually signs.
"""

from __future__ import annotations
import base64
from dataclasses import dataclass
from typing import Any, Dict, Sequence, Tuple

from ..canonjson import dumps_amino_sign_bytes
from ..codec.proto import ProtoAny, encode_message, pack_any
from ..enums import SignMode
from ..runtime.errors import EncodingError, SignerError, SignerErrorKind
from .messages import Coin
from .proto_types import SECP256K1_PUBKEY_AMINO_TYPE, AuthInfo, Fee, ModeInfo, Secp256k1PubKey, SignerInfo

COMPRESSED_PUBKEY_LENGTH = 33
COMPRESSED_PUBKEY_PREFIXES = (0x02, 0x03)


def strip_public_key_prefix(raw: bytes) -> bytes:
    """
    Drop the one-byte length prefix a hardware signer puts before the key.

    Args:
        raw: Public key as returned by the signer, ``0x21 || key33``

    Returns:
        The 33-byte compressed secp256k1 key

    Raises:
        SignerError: If what remains is not a compressed secp256k1 key
    """
    key = bytes(raw[1:])
    if len(key) != COMPRESSED_PUBKEY_LENGTH or key[0] not in COMPRESSED_PUBKEY_PREFIXES:
        raise SignerError(
            f"Expected a {COMPRESSED_PUBKEY_LENGTH}-byte compressed secp256k1 public key after the prefix, "
            f"got {len(key)} bytes",
            kind=SignerErrorKind.INVALID_PUBLIC_KEY,
            details={"length": len(raw)},
        )
    return key


@dataclass(frozen=True)
class LegacyPubKey:
    """Amino JSON form of a public key: ``{"type": ..., "value": <base64>}``."""

    type: str
    value: str

    def key_bytes(self) -> bytes:
        return base64.b64decode(self.value)

    def to_dict(self) -> Dict[str, str]:
        return {"type": self.type, "value": self.value}


def encode_secp256k1_pubkey(key: bytes) -> LegacyPubKey:
    """Wrap a 33-byte compressed key as ``tendermint/PubKeySecp256k1``."""
    if len(key) != COMPRESSED_PUBKEY_LENGTH or key[0] not in COMPRESSED_PUBKEY_PREFIXES:
        raise SignerError(
            "Public key must be a 33-byte compressed secp256k1 key",
            kind=SignerErrorKind.INVALID_PUBLIC_KEY,
        )
    return LegacyPubKey(
        type=SECP256K1_PUBKEY_AMINO_TYPE,
        value=base64.b64encode(key).decode("ascii"),
    )


def encode_pubkey(pubkey: LegacyPubKey) -> ProtoAny:
    """Convert an amino public key to the ``Any`` carried in ``SignerInfo``."""
    if pubkey.type != SECP256K1_PUBKEY_AMINO_TYPE:
        raise SignerError(
            f"Unsupported public key type: {pubkey.type}",
            kind=SignerErrorKind.INVALID_PUBLIC_KEY,
        )
    return pack_any(Secp256k1PubKey(key=pubkey.key_bytes()))


def make_auth_info_bytes(
    signers: Sequence[Tuple[ProtoAny, int]],
    fee_amount: Sequence[Coin],
    gas_limit: int,
    sign_mode: SignMode = SignMode.DIRECT,
) -> bytes:
    """
    Encode ``AuthInfo`` for the given signers.

    Args:
        signers: ``(public key Any, sequence)`` per signer, in signing order
        fee_amount: Fee coins
        gas_limit: Gas limit
        sign_mode: Mode every signer signs with

    Returns:
        Protobuf-encoded auth info bytes

    Raises:
        EncodingError: If a sequence or the gas limit does not fit a uint64
    """
    try:
        auth_info = AuthInfo(
            signer_infos=[
                SignerInfo(
                    public_key=pubkey,
                    mode_info=ModeInfo(single=ModeInfo.Single(mode=int(sign_mode))),
                    sequence=sequence,
                )
                for pubkey, sequence in signers
            ],
            fee=Fee(amount=list(fee_amount), gas_limit=gas_limit),
        )
    except (ValueError, TypeError) as e:
        raise EncodingError(f"Failed to build auth info: {e}", cause=e)
    return encode_message(auth_info)


@dataclass(frozen=True)
class AminoSignDoc:
    """
    ``StdSignDoc``: the legacy amino JSON document a signer signs.

    Numbers travel as strings to keep 64-bit values exact in JSON.
    """

    chain_id: str
    account_number: str
    sequence: str
    fee: Dict[str, Any]
    msgs: Tuple[Dict[str, Any], ...]
    memo: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "account_number": self.account_number,
            "chain_id": self.chain_id,
            "fee": self.fee,
            "memo": self.memo,
            "msgs": list(self.msgs),
            "sequence": self.sequence,
        }


def make_sign_doc(
    msgs: Sequence[Dict[str, Any]],
    fee: Dict[str, Any],
    chain_id: str,
    memo: str,
    account_number: int,
    sequence: int,
) -> AminoSignDoc:
    """Assemble an amino sign document from amino-rendered messages and fee."""
    return AminoSignDoc(
        chain_id=chain_id,
        account_number=str(account_number),
        sequence=str(sequence),
        fee=fee,
        msgs=tuple(msgs),
        memo=memo,
    )


def serialize_sign_doc(sign_doc: AminoSignDoc) -> bytes:
    """Canonical bytes of a sign document: sorted keys, compact, ``&<>`` escaped."""
    return dumps_amino_sign_bytes(sign_doc.to_dict())


__all__ = [
    "COMPRESSED_PUBKEY_LENGTH",
    "strip_public_key_prefix",
    "LegacyPubKey",
    "encode_secp256k1_pubkey",
    "encode_pubkey",
    "make_auth_info_bytes",
    "AminoSignDoc",
    "make_sign_doc",
    "serialize_sign_doc",
]
