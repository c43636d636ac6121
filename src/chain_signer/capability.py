"""
Chain capability classification.

Decides, once per signing call, which sign-doc scheme the target chain and
signer combination supports. New chains are supported by classification
here rather than by branching inside the signing code.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Optional

from .config import SigningDefaults, UserAsset, WalletConfig
from .enums import SigningScheme, SupportedChainName
from .runtime.errors import UnsupportedSchemeError

logger = logging.getLogger(__name__)

HOME_CHAIN_NAME = SupportedChainName.CRYPTO_ORG.value


@dataclass(frozen=True)
class ChainCapability:
    """
    Immutable description of the chain a transaction is signed for.

    Attributes:
        scheme: Sign-doc scheme to build
        chain_name: Chain name passed to the signer provider
        chain_id: Chain id embedded in the sign document
        base_denom: Denomination of fees and transfer amounts
        defaults: Per-chain fallback constants
        use_timeout_height: Whether IBC transfers carry a timeout height
    """

    scheme: SigningScheme
    chain_name: str
    chain_id: str
    base_denom: str
    defaults: SigningDefaults
    use_timeout_height: bool

    @property
    def is_native(self) -> bool:
        return self.scheme == SigningScheme.NATIVE


def classify_chain(
    asset: Optional[UserAsset],
    config: WalletConfig,
    defaults: Optional[SigningDefaults] = None,
) -> ChainCapability:
    """
    Derive the chain capability for an asset.

    Args:
        asset: Asset the transaction is signed for; ``None`` means the home chain
        config: Wallet configuration holding the home network
        defaults: Engine-wide fallback constants

    Returns:
        ChainCapability for the call

    Raises:
        UnsupportedSchemeError: If the asset lives on a chain this engine cannot sign for
    """
    defaults = defaults or SigningDefaults()

    if asset is not None and asset.asset_type.is_evm_family():
        raise UnsupportedSchemeError(
            f"Asset type {asset.asset_type.value} is not signed with a Tendermint scheme",
            details={"symbol": asset.symbol, "assetType": asset.asset_type.value},
        )

    network = asset.config.tendermint_network if asset and asset.config else None

    if network is None or network.chain_name == HOME_CHAIN_NAME:
        chain_id = config.network.chain_id
        capability = ChainCapability(
            scheme=SigningScheme.NATIVE,
            chain_name=HOME_CHAIN_NAME,
            chain_id=chain_id,
            base_denom=config.network.coin.base_denom,
            defaults=config.defaults_for(chain_id, defaults),
            use_timeout_height=True,
        )
    else:
        if not network.chain_id:
            raise UnsupportedSchemeError(
                f"Network {network.chain_name} has no chain id",
                details={"chainName": network.chain_name},
            )
        capability = ChainCapability(
            scheme=SigningScheme.LEGACY_AMINO_JSON,
            chain_name=network.chain_name,
            chain_id=network.chain_id,
            base_denom=network.coin.base_denom,
            defaults=config.defaults_for(network.chain_id, defaults),
            use_timeout_height=False,
        )

    logger.debug(f"Classified {capability.chain_name} ({capability.chain_id}) as {capability.scheme.value}")
    return capability


__all__ = [
    "HOME_CHAIN_NAME",
    "ChainCapability",
    "classify_chain",
]
