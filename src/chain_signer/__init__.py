"""
chain-signer - Cosmos SDK transaction signing with hardware signers

Builds, signs and encodes transactions for the Crypto.org home chain and
for foreign Tendermint chains. Key material stays with an external signer
provider; this package only assembles the bytes it signs.
"""

from .enums import *
from .config import *
from .transactions import *
from .runtime.errors import *
from .capability import ChainCapability, classify_chain
from .tx import (
    DecodedTransaction,
    FeeDescriptor,
    Registry,
    build_fee,
    decode_signed_transaction,
    sanitize_memo,
)
from .signers import *

__version__ = "0.1.0"
