"""
SECP256K1 operations for Cosmos SDK signatures.

Cosmos SDK secp256k1 signatures are the 64-byte concatenation ``r || s``
over the SHA-256 digest of the sign bytes, with ``s`` in the lower half of
the curve order. Public keys travel in 33-byte compressed SEC1 form.
"""

from __future__ import annotations

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import ec
from cryptography.hazmat.primitives.asymmetric.utils import encode_dss_signature

# Order of the secp256k1 group
CURVE_ORDER = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141
SIGNATURE_LENGTH = 64


class Secp256k1Error(Exception):
    """Base exception for SECP256K1 operations."""
    pass


def load_public_key(public_key_bytes: bytes) -> ec.EllipticCurvePublicKey:
    """
    Load a compressed (33-byte) or uncompressed (65-byte) SEC1 public key.

    Raises:
        Secp256k1Error: If the bytes are not a point on the curve
    """
    try:
        return ec.EllipticCurvePublicKey.from_encoded_point(ec.SECP256K1(), bytes(public_key_bytes))
    except ValueError as e:
        raise Secp256k1Error(f"Invalid secp256k1 public key: {e}")


def verify_signature(public_key_bytes: bytes, signature: bytes, message: bytes) -> bool:
    """
    Verify a Cosmos SDK secp256k1 signature.

    Args:
        public_key_bytes: SEC1-encoded public key
        signature: 64-byte ``r || s`` signature
        message: Sign bytes; hashed with SHA-256 before verification

    Returns:
        True if the signature is valid for the message and key
    """
    if len(signature) != SIGNATURE_LENGTH:
        return False
    try:
        public_key = load_public_key(public_key_bytes)
    except Secp256k1Error:
        return False

    r = int.from_bytes(signature[:32], "big")
    s = int.from_bytes(signature[32:], "big")
    if not (0 < r < CURVE_ORDER and 0 < s < CURVE_ORDER):
        return False
    try:
        public_key.verify(encode_dss_signature(r, s), bytes(message), ec.ECDSA(hashes.SHA256()))
        return True
    except InvalidSignature:
        return False


__all__ = [
    "CURVE_ORDER",
    "SIGNATURE_LENGTH",
    "Secp256k1Error",
    "load_public_key",
    "verify_signature",
]
