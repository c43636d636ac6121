"""
secp256k1 key and signature tests.

Covers public key loading, the r || s signature layout and low-S
normalization used by Cosmos SDK chains. Keys come from the software
signer in the test helpers.
"""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))
from helpers import Secp256k1PrivateKey

from chain_signer.crypto.secp256k1 import (
    CURVE_ORDER,
    SIGNATURE_LENGTH,
    Secp256k1Error,
    load_public_key,
    verify_signature,
)

GENERATOR_COMPRESSED = bytes.fromhex("0279be667ef9dcbbac55a06295ce870b07029bfcdb2dce28d959f2815b16f81798")


class TestKeys:
    """Test key construction and serialization."""

    def test_scalar_one_is_generator(self):
        key = Secp256k1PrivateKey.from_bytes((1).to_bytes(32, "big"))
        assert key.public_key_bytes() == GENERATOR_COMPRESSED

    def test_uncompressed_form(self):
        key = Secp256k1PrivateKey.from_bytes((1).to_bytes(32, "big"))
        uncompressed = key.public_key_bytes(compressed=False)
        assert len(uncompressed) == 65
        assert uncompressed[0] == 0x04
        assert uncompressed[1:33] == GENERATOR_COMPRESSED[1:]

    @pytest.mark.parametrize("secret", [bytes(32), CURVE_ORDER.to_bytes(32, "big"), b"\x01" * 31])
    def test_invalid_secrets(self, secret):
        with pytest.raises(Secp256k1Error):
            Secp256k1PrivateKey.from_bytes(secret)

    def test_load_public_key_rejects_garbage(self):
        with pytest.raises(Secp256k1Error):
            load_public_key(b"\x02" + bytes(32))


class TestSignatures:
    """Test signing and verification."""

    def test_sign_and_verify(self):
        key = Secp256k1PrivateKey.generate()
        signature = key.sign(b"sign bytes")

        assert len(signature) == SIGNATURE_LENGTH
        assert verify_signature(key.public_key_bytes(), signature, b"sign bytes")
        assert not verify_signature(key.public_key_bytes(), signature, b"other bytes")

    def test_signatures_are_low_s(self):
        key = Secp256k1PrivateKey.from_bytes((7).to_bytes(32, "big"))
        for i in range(16):
            signature = key.sign(f"message {i}".encode())
            assert int.from_bytes(signature[32:], "big") <= CURVE_ORDER // 2

    def test_wrong_key_fails(self):
        signature = Secp256k1PrivateKey.generate().sign(b"msg")
        assert not verify_signature(Secp256k1PrivateKey.generate().public_key_bytes(), signature, b"msg")

    @pytest.mark.parametrize("signature", [b"", b"\x01" * 63, bytes(64), b"\xff" * 64])
    def test_malformed_signatures(self, signature):
        key = Secp256k1PrivateKey.generate()
        assert not verify_signature(key.public_key_bytes(), signature, b"msg")

    def test_malformed_public_key(self):
        key = Secp256k1PrivateKey.generate()
        assert not verify_signature(b"\x05" * 33, key.sign(b"msg"), b"msg")
