"""
Wallet and network configuration consumed by the signing engine.

Models mirror the wallet's static configuration JSON (camelCase keys are
accepted through aliases). Network metadata is supplied by the caller; this
module never fetches anything.
"""

from __future__ import annotations
from dataclasses import dataclass, replace
from typing import Dict, Optional

from pydantic import BaseModel, Field

from .enums import UserAssetType

# Milliseconds added to the current time for an IBC transfer timeout
DEFAULT_IBC_TRANSFER_TIMEOUT = 3_600_000

DEFAULT_REVISION_NUMBER = 122
DEFAULT_LATEST_BLOCK_HEIGHT = 120_000_000
REVISION_HEIGHT_MARGIN = 250
MAX_MEMO_CHARACTERS = 256


@dataclass(frozen=True)
class SigningDefaults:
    """
    Per-chain fallback constants.

    The revision defaults describe one chain's historical state, so a
    deployment targeting another chain overrides them through
    ``WalletConfig.chain_defaults``.
    """

    revision_number: int = DEFAULT_REVISION_NUMBER
    latest_block_height: int = DEFAULT_LATEST_BLOCK_HEIGHT
    revision_height_margin: int = REVISION_HEIGHT_MARGIN
    ibc_timeout_ms: int = DEFAULT_IBC_TRANSFER_TIMEOUT
    max_memo_characters: int = MAX_MEMO_CHARACTERS

    def with_overrides(self, **changes) -> SigningDefaults:
        """Return a copy with the given fields replaced."""
        return replace(self, **changes)


class CoinConfig(BaseModel):
    """Denomination metadata of a chain's fee/staking coin."""
    base_denom: str = Field(alias="baseDenom")
    display_denom: str = Field(default="", alias="denom")
    decimals: int = 8

    model_config = {"populate_by_name": True, "frozen": True}


class TendermintNetwork(BaseModel):
    """A Tendermint-based chain an asset lives on."""
    chain_name: str = Field(alias="chainName")
    chain_id: str = Field(default="", alias="chainId")
    coin: CoinConfig

    model_config = {"populate_by_name": True, "frozen": True}


class AssetConfig(BaseModel):
    """Network section of a wallet asset."""
    chain_id: Optional[str] = Field(default=None, alias="chainId")
    tendermint_network: Optional[TendermintNetwork] = Field(default=None, alias="tendermintNetwork")

    model_config = {"populate_by_name": True, "frozen": True}


class UserAsset(BaseModel):
    """Asset the transaction moves or is denominated in."""
    symbol: str = ""
    name: str = ""
    asset_type: UserAssetType = Field(default=UserAssetType.TENDERMINT, alias="assetType")
    config: Optional[AssetConfig] = None

    model_config = {"populate_by_name": True, "frozen": True}


class Network(BaseModel):
    """The wallet's home network."""
    name: str
    chain_id: str = Field(alias="chainId")
    address_prefix: str = Field(default="cro", alias="addressPrefix")
    coin: CoinConfig

    model_config = {"populate_by_name": True, "frozen": True}


class WalletConfig(BaseModel):
    """Top-level wallet configuration."""
    name: str
    network: Network
    chain_defaults: Dict[str, SigningDefaults] = Field(default_factory=dict, alias="chainDefaults")

    model_config = {"populate_by_name": True, "frozen": True}

    def defaults_for(self, chain_id: str, fallback: SigningDefaults) -> SigningDefaults:
        """
        Resolve the signing defaults for a chain.

        Args:
            chain_id: Chain identifier
            fallback: Defaults used when the chain has no override

        Returns:
            SigningDefaults for the chain
        """
        return self.chain_defaults.get(chain_id, fallback)


MAINNET_CONFIG = WalletConfig(
    name="MAINNET",
    network=Network(
        name="MAINNET",
        chain_id="crypto-org-chain-mainnet-1",
        address_prefix="cro",
        coin=CoinConfig(base_denom="basecro", display_denom="cro"),
    ),
)

TESTNET_CROESEID_4_CONFIG = WalletConfig(
    name="TESTNET",
    network=Network(
        name="TESTNET",
        chain_id="testnet-croeseid-4",
        address_prefix="tcro",
        coin=CoinConfig(base_denom="basetcro", display_denom="tcro"),
    ),
)


__all__ = [
    "DEFAULT_IBC_TRANSFER_TIMEOUT",
    "DEFAULT_REVISION_NUMBER",
    "DEFAULT_LATEST_BLOCK_HEIGHT",
    "REVISION_HEIGHT_MARGIN",
    "MAX_MEMO_CHARACTERS",
    "SigningDefaults",
    "CoinConfig",
    "TendermintNetwork",
    "AssetConfig",
    "UserAsset",
    "Network",
    "WalletConfig",
    "MAINNET_CONFIG",
    "TESTNET_CROESEID_4_CONFIG",
]
