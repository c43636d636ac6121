"""
Cryptographic primitives for chain signing.
"""

from .secp256k1 import (
    CURVE_ORDER,
    SIGNATURE_LENGTH,
    Secp256k1Error,
    load_public_key,
    verify_signature,
)

__all__ = [
    "CURVE_ORDER",
    "SIGNATURE_LENGTH",
    "Secp256k1Error",
    "load_public_key",
    "verify_signature",
]
