"""
Signers for Cosmos SDK transactions.

Provides the signer provider boundary, the two sign-document schemes and
the hardware wallet transaction signer built on them.
"""

from .provider import SignerProvider
from .signer import GasLimit, TransactionSigner
from .schemes import (
    SCHEMES,
    LegacyAminoJsonScheme,
    NativeScheme,
    PreparedTransaction,
    SignDocScheme,
    SignRequest,
    scheme_for,
)
from .ledger import LedgerTransactionSigner

__all__ = [
    "SignerProvider",
    "GasLimit",
    "TransactionSigner",
    "SCHEMES",
    "LegacyAminoJsonScheme",
    "NativeScheme",
    "PreparedTransaction",
    "SignDocScheme",
    "SignRequest",
    "scheme_for",
    "LedgerTransactionSigner",
]
