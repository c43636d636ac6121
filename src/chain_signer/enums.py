"""
Enumerations shared across the signing engine.
"""

from enum import Enum, IntEnum


class SignMode(IntEnum):
    """
    cosmos.tx.signing.v1beta1.SignMode

    Selects the canonicalization applied to transaction content before signing.
    """
    UNSPECIFIED = 0
    DIRECT = 1
    TEXTUAL = 2
    LEGACY_AMINO_JSON = 127


class SigningScheme(str, Enum):
    """Sign-doc construction path chosen once per signing call."""
    NATIVE = "native"
    LEGACY_AMINO_JSON = "legacy_amino_json"


class SupportedChainName(str, Enum):
    """Tendermint chains known to the wallet."""
    CRYPTO_ORG = "Crypto.org Chain"
    COSMOS_HUB = "Cosmos Hub"
    CRONOS_POS = "Cronos POS Chain"


class UserAssetType(str, Enum):
    """Asset families a wallet entry may belong to."""
    TENDERMINT = "TENDERMINT"
    IBC = "IBC"
    EVM = "EVM"
    CRC_20_TOKEN = "CRC_20_TOKEN"
    ERC_20_TOKEN = "ERC_20_TOKEN"
    CRC_721_TOKEN = "CRC_721_TOKEN"

    def is_evm_family(self) -> bool:
        return self in (
            UserAssetType.EVM,
            UserAssetType.CRC_20_TOKEN,
            UserAssetType.ERC_20_TOKEN,
            UserAssetType.CRC_721_TOKEN,
        )


class DerivationPathStandard(str, Enum):
    """Derivation standard forwarded to the hardware signer."""
    BIP44 = "bip-44"
    LEDGER_LIVE = "ledger-live"


class VoteOption(IntEnum):
    """cosmos.gov.v1beta1.VoteOption"""
    UNSPECIFIED = 0
    YES = 1
    ABSTAIN = 2
    NO = 3
    NO_WITH_VETO = 4


__all__ = [
    "SignMode",
    "SigningScheme",
    "SupportedChainName",
    "UserAssetType",
    "DerivationPathStandard",
    "VoteOption",
]
