from .crypto_helpers import Secp256k1PrivateKey
from .mocks import FailingSignerProvider, FixedSignatureProvider, RawPublicKeyProvider, StubSignerProvider
from .factories import (
    ATOM_ADDRESS,
    ATOM_RECIPIENT,
    CRO_ADDRESS,
    CRO_RECIPIENT,
    CRO_VALIDATOR,
    FIXED_NOW_MS,
    mk_coins,
    mk_delegate,
    mk_evm_asset,
    mk_foreign_asset,
    mk_ibc_transfer,
    mk_native_asset,
    mk_restake_all,
    mk_transfer,
    mk_validators,
    random_amount,
    random_memo,
)
from .parity import assert_hex_equal

__all__ = [
    "Secp256k1PrivateKey",
    "FailingSignerProvider",
    "FixedSignatureProvider",
    "RawPublicKeyProvider",
    "StubSignerProvider",
    "ATOM_ADDRESS",
    "ATOM_RECIPIENT",
    "CRO_ADDRESS",
    "CRO_RECIPIENT",
    "CRO_VALIDATOR",
    "FIXED_NOW_MS",
    "mk_coins",
    "mk_delegate",
    "mk_evm_asset",
    "mk_foreign_asset",
    "mk_ibc_transfer",
    "mk_native_asset",
    "mk_restake_all",
    "mk_transfer",
    "mk_validators",
    "random_amount",
    "random_memo",
    "assert_hex_equal",
]
