"""
Test factories for creating transactions and assets consistently.

Addresses are fixed strings; nothing in the signing path checks bech32.
"""

from __future__ import annotations
import random
import string
from typing import List, Optional

from chain_signer.config import AssetConfig, CoinConfig, TendermintNetwork, UserAsset
from chain_signer.enums import SupportedChainName, UserAssetType
from chain_signer.transactions import (
    BridgeTransactionUnsigned,
    CoinAmount,
    DelegateTransactionUnsigned,
    RestakeStakingAllRewardsTransactionUnsigned,
    TransferTransactionUnsigned,
)

CRO_ADDRESS = "cro1u9q8mfpzhyv2s43js7l5qseapx5kt3g2rf7ppf"
CRO_RECIPIENT = "cro1pndm4ywdf4qtmupa0fqe75krmqed2znjyj6x8f"
CRO_VALIDATOR = "crocncl1pk9eajj4zmxwmr5zyhz4jr4l5xkm2pcnymx4rc"
ATOM_ADDRESS = "cosmos1u9q8mfpzhyv2s43js7l5qseapx5kt3g2s9h4pj"
ATOM_RECIPIENT = "cosmos1pndm4ywdf4qtmupa0fqe75krmqed2znjnhq4yg"

# 2023-11-14T22:13:20Z
FIXED_NOW_MS = 1_700_000_000_000


def mk_validators(count: int, prefix: str = "crocncl1val") -> List[str]:
    return [f"{prefix}{i:03d}" for i in range(count)]


def mk_native_asset() -> UserAsset:
    """CRO on the home chain."""
    return UserAsset(
        symbol="CRO",
        name="Cronos",
        asset_type=UserAssetType.TENDERMINT,
        config=AssetConfig(
            chain_id="crypto-org-chain-mainnet-1",
            tendermint_network=TendermintNetwork(
                chain_name=SupportedChainName.CRYPTO_ORG.value,
                chain_id="crypto-org-chain-mainnet-1",
                coin=CoinConfig(base_denom="basecro", display_denom="cro"),
            ),
        ),
    )


def mk_foreign_asset(
    chain_name: str = SupportedChainName.COSMOS_HUB.value,
    chain_id: str = "cosmoshub-4",
    base_denom: str = "uatom",
) -> UserAsset:
    """Asset on a foreign Tendermint chain."""
    return UserAsset(
        symbol="ATOM",
        name="Cosmos",
        asset_type=UserAssetType.TENDERMINT,
        config=AssetConfig(
            chain_id=chain_id,
            tendermint_network=TendermintNetwork(
                chain_name=chain_name,
                chain_id=chain_id,
                coin=CoinConfig(base_denom=base_denom, display_denom="atom", decimals=6),
            ),
        ),
    )


def mk_evm_asset() -> UserAsset:
    return UserAsset(symbol="CRO", name="Cronos EVM", asset_type=UserAssetType.EVM)


def mk_transfer(
    amount: str = "100",
    memo: str = "",
    asset: Optional[UserAsset] = None,
    account_number: int = 12,
    account_sequence: int = 3,
) -> TransferTransactionUnsigned:
    network = asset.config.tendermint_network if asset and asset.config else None
    foreign = network is not None and network.chain_name != SupportedChainName.CRYPTO_ORG.value
    return TransferTransactionUnsigned(
        from_address=ATOM_ADDRESS if foreign else CRO_ADDRESS,
        to_address=ATOM_RECIPIENT if foreign else CRO_RECIPIENT,
        amount=amount,
        memo=memo,
        account_number=account_number,
        account_sequence=account_sequence,
        asset=asset,
    )


def mk_delegate(amount: str = "5000", **kwargs) -> DelegateTransactionUnsigned:
    return DelegateTransactionUnsigned(
        delegator_address=CRO_ADDRESS,
        validator_address=CRO_VALIDATOR,
        amount=amount,
        **kwargs,
    )


def mk_restake_all(validators: List[str], amounts: List[str], **kwargs) -> RestakeStakingAllRewardsTransactionUnsigned:
    return RestakeStakingAllRewardsTransactionUnsigned(
        delegator_address=CRO_ADDRESS,
        validator_address_list=validators,
        amount_list=amounts,
        **kwargs,
    )


def mk_ibc_transfer(
    origin_asset: Optional[UserAsset] = None,
    latest_block_height: Optional[int] = None,
    amount: str = "1000",
) -> BridgeTransactionUnsigned:
    return BridgeTransactionUnsigned(
        from_address=CRO_ADDRESS,
        to_address=ATOM_RECIPIENT,
        amount=amount,
        origin_asset=origin_asset,
        port="transfer",
        channel="channel-187",
        latest_block_height=latest_block_height,
        account_number=12,
        account_sequence=3,
    )


def mk_coins(amounts: List[str], denom: str = "basecro") -> List[CoinAmount]:
    return [CoinAmount(amount=a, denom=denom) for a in amounts]


def random_memo(rng: random.Random, max_len: int = 64) -> str:
    """Random memo drawing from letters, digits, spaces and the sanitized characters."""
    alphabet = string.ascii_letters + string.digits + " &<>-_"
    return "".join(rng.choice(alphabet) for _ in range(rng.randint(0, max_len)))


def random_amount(rng: random.Random) -> str:
    return str(rng.randint(0, 10 ** rng.randint(1, 24)))
