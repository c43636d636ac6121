"""
cosmos.tx.v1beta1 envelope types.

Body, auth info, the signed ``TxRaw`` and the ``SIGN_MODE_DIRECT`` sign
document, plus the secp256k1 public key they reference. All are cosmpy's
generated protobuf classes.
"""

from cosmpy.protos.cosmos.crypto.secp256k1.keys_pb2 import PubKey as Secp256k1PubKey
from cosmpy.protos.cosmos.tx.v1beta1.tx_pb2 import (
    AuthInfo,
    Fee,
    ModeInfo,
    SignDoc,
    SignerInfo,
    TxBody,
    TxRaw,
)

SECP256K1_PUBKEY_AMINO_TYPE = "tendermint/PubKeySecp256k1"

__all__ = [
    "Secp256k1PubKey",
    "SECP256K1_PUBKEY_AMINO_TYPE",
    "ModeInfo",
    "SignerInfo",
    "Fee",
    "AuthInfo",
    "TxBody",
    "TxRaw",
    "SignDoc",
]
