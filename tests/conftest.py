"""
Test bootstrap:
- Make tests/helpers importable as ``helpers``
- Shared fixtures for wallet configuration, signer providers and signers
"""
import pathlib
import sys

import pytest

TESTS_DIR = pathlib.Path(__file__).parent

if str(TESTS_DIR) not in sys.path:
    sys.path.insert(0, str(TESTS_DIR))

from chain_signer.config import MAINNET_CONFIG, SigningDefaults  # noqa: E402
from chain_signer.enums import DerivationPathStandard  # noqa: E402
from chain_signer.signers.ledger import LedgerTransactionSigner  # noqa: E402

from helpers import FIXED_NOW_MS, StubSignerProvider  # noqa: E402


@pytest.fixture
def wallet_config():
    return MAINNET_CONFIG


@pytest.fixture
def signing_defaults():
    return SigningDefaults()


@pytest.fixture
def stub_provider():
    """Signer provider with a deterministic secp256k1 key."""
    return StubSignerProvider()


@pytest.fixture
def make_signer(wallet_config):
    """Build a LedgerTransactionSigner around a provider, with a frozen clock."""
    def _make(provider, **kwargs):
        kwargs.setdefault("clock", lambda: FIXED_NOW_MS)
        return LedgerTransactionSigner(
            wallet_config,
            provider,
            0,
            DerivationPathStandard.BIP44,
            **kwargs,
        )
    return _make


@pytest.fixture
def ledger_signer(make_signer, stub_provider):
    return make_signer(stub_provider)
