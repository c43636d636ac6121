"""
Legacy amino JSON sign document tests.

The signed JSON and the protobuf body and auth info travel separately, so
both renderings must agree on every field the node checks.
"""

import base64
import json
import random
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))
from helpers import (
    ATOM_ADDRESS,
    ATOM_RECIPIENT,
    Secp256k1PrivateKey,
    StubSignerProvider,
    mk_foreign_asset,
    random_amount,
    random_memo,
)

from chain_signer.capability import classify_chain
from chain_signer.codec import type_url
from chain_signer.config import MAINNET_CONFIG
from chain_signer.enums import SignMode
from chain_signer.runtime.errors import SignerError, SignerErrorKind
from chain_signer.signers.schemes import LegacyAminoJsonScheme, SignRequest
from chain_signer.tx.fees import build_fee, sanitize_memo
from chain_signer.tx.messages import Coin, MsgSend, MsgTransfer, to_amino, to_amino_value
from chain_signer.tx.proto_types import AuthInfo, Secp256k1PubKey, TxBody
from chain_signer.tx.registry import Registry
from chain_signer.tx.sign_doc import (
    encode_pubkey,
    encode_secp256k1_pubkey,
    make_sign_doc,
    serialize_sign_doc,
    strip_public_key_prefix,
)

FUZZ_SEEDS = [0, 1, 7, 42, 2024]
FUZZ_ITERATIONS = 50


def _foreign_scheme():
    registry = Registry()
    registry.register(type_url(MsgTransfer), MsgTransfer)
    return LegacyAminoJsonScheme(classify_chain(mk_foreign_asset(), MAINNET_CONFIG), registry)


class TestPublicKeys:

    def test_strip_prefix(self):
        key = Secp256k1PrivateKey.generate().public_key_bytes()
        assert strip_public_key_prefix(bytes([33]) + key) == key

    @pytest.mark.parametrize("raw", [
        b"",
        bytes([33]) + bytes(33),
        bytes([33]) + b"\x02" + bytes(31),
        bytes([65]) + b"\x04" + bytes(64),
    ])
    def test_strip_prefix_rejects_bad_keys(self, raw):
        with pytest.raises(SignerError) as exc_info:
            strip_public_key_prefix(raw)
        assert exc_info.value.kind == SignerErrorKind.INVALID_PUBLIC_KEY

    def test_amino_and_any_forms(self):
        key = b"\x03" + bytes(range(32))
        legacy = encode_secp256k1_pubkey(key)

        assert legacy.type == "tendermint/PubKeySecp256k1"
        assert base64.b64decode(legacy.value) == key

        packed = encode_pubkey(legacy)
        assert packed.type_url == "/cosmos.crypto.secp256k1.PubKey"
        assert Secp256k1PubKey.FromString(packed.value).key == key


class TestSignDocSerialization:

    def test_exact_bytes(self):
        msg = MsgSend(from_address="a", to_address="b", amount=[Coin(denom="uatom", amount="1")])
        doc = make_sign_doc(
            [to_amino(msg)],
            {"amount": [{"denom": "uatom", "amount": "5"}], "gas": "200000"},
            "cosmoshub-4",
            "x&y",
            7,
            2,
        )
        expected = (
            '{"account_number":"7","chain_id":"cosmoshub-4",'
            '"fee":{"amount":[{"amount":"5","denom":"uatom"}],"gas":"200000"},'
            '"memo":"x\\u0026y",'
            '"msgs":[{"type":"cosmos-sdk/MsgSend","value":{"amount":[{"amount":"1","denom":"uatom"}],'
            '"from_address":"a","to_address":"b"}}],'
            '"sequence":"2"}'
        )
        assert serialize_sign_doc(doc) == expected.encode("utf-8")

    def test_numbers_are_strings(self):
        doc = make_sign_doc([], {"amount": [], "gas": "1"}, "c", "", 2 ** 63, 0)
        parsed = json.loads(serialize_sign_doc(doc))
        assert parsed["account_number"] == str(2 ** 63)
        assert parsed["sequence"] == "0"


class TestLegacySchemeAgreement:
    """Sign doc and protobuf envelope agree for randomized inputs."""

    @pytest.mark.parametrize("seed", FUZZ_SEEDS)
    def test_fields_agree(self, seed):
        rng = random.Random(seed)
        scheme = _foreign_scheme()
        public_key = StubSignerProvider().compressed_public_key

        for _ in range(FUZZ_ITERATIONS):
            account_number = rng.randint(0, 2 ** 40)
            account_sequence = rng.randint(0, 2 ** 20)
            fee = build_fee(random_amount(rng), rng.randint(0, 10 ** 7), "uatom")
            memo = sanitize_memo(random_memo(rng))
            messages = (
                MsgSend(from_address=ATOM_ADDRESS, to_address=ATOM_RECIPIENT,
                        amount=[Coin(denom="uatom", amount=random_amount(rng))]),
            )

            prepared = scheme.prepare(public_key, SignRequest(
                messages=messages,
                memo=memo,
                fee=fee,
                account_number=account_number,
                account_sequence=account_sequence,
            ))

            doc = json.loads(prepared.sign_bytes)
            body = TxBody.FromString(prepared.body_bytes)
            auth_info = AuthInfo.FromString(prepared.auth_info_bytes)
            (signer_info,) = auth_info.signer_infos

            assert doc["chain_id"] == "cosmoshub-4"
            assert doc["account_number"] == str(account_number)
            assert doc["sequence"] == str(account_sequence) == str(signer_info.sequence)
            assert doc["memo"] == body.memo == memo
            assert doc["fee"]["gas"] == str(auth_info.fee.gas_limit)
            assert doc["fee"]["amount"] == [to_amino_value(c) for c in auth_info.fee.amount]
            assert doc["msgs"] == [to_amino(m) for m in messages]
            assert scheme.registry.decode_any(body.messages[0]) == messages[0]
            assert signer_info.mode_info.single.mode == SignMode.LEGACY_AMINO_JSON
            assert Secp256k1PubKey.FromString(signer_info.public_key.value).key == public_key

    def test_sign_bytes_never_contain_raw_angle_brackets(self):
        scheme = _foreign_scheme()
        prepared = scheme.prepare(StubSignerProvider().compressed_public_key, SignRequest(
            messages=(MsgSend(from_address="cosmos1<a>", to_address="cosmos1&b",
                              amount=[Coin(denom="uatom", amount="1")]),),
            memo="",
            fee=build_fee("1", 1, "uatom"),
            account_number=1,
            account_sequence=1,
        ))
        for char in (b"&", b"<", b">"):
            assert char not in prepared.sign_bytes
