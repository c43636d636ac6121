# Unsigned transaction definitions, one model per wallet intent.
# Amounts and proposal ids stay decimal strings end to end so no precision
# is lost between the wallet and the wire.

from __future__ import annotations
from pydantic import BaseModel, Field
from typing import Optional, List

from .config import UserAsset
from .enums import VoteOption


# =============================================================================
# Supporting Types
# =============================================================================

class CoinAmount(BaseModel):
    """An amount with an explicit denomination."""
    amount: str
    denom: str

    model_config = {"populate_by_name": True}


class TextProposalParams(BaseModel):
    """Content of a text governance proposal."""
    title: str
    description: str

    model_config = {"populate_by_name": True}


# =============================================================================
# Base
# =============================================================================

class TransactionUnsigned(BaseModel):
    """Fields shared by every unsigned transaction."""
    memo: str = ""
    account_number: int = Field(default=0, alias="accountNumber")
    account_sequence: int = Field(default=0, alias="accountSequence")
    asset: Optional[UserAsset] = None

    model_config = {"populate_by_name": True}

    @property
    def signing_asset(self) -> Optional[UserAsset]:
        """Asset whose chain the transaction is signed for."""
        return self.asset


# =============================================================================
# Bank / IBC
# =============================================================================

class TransferTransactionUnsigned(TransactionUnsigned):
    """Send tokens to another address on the same chain."""
    from_address: str = Field(alias="fromAddress")
    to_address: str = Field(alias="toAddress")
    amount: str


class BridgeTransactionUnsigned(TransactionUnsigned):
    """IBC transfer from the origin chain to a counterparty chain."""
    from_address: str = Field(alias="fromAddress")
    to_address: str = Field(alias="toAddress")
    amount: str
    origin_asset: Optional[UserAsset] = Field(default=None, alias="originAsset")
    port: Optional[str] = None
    channel: Optional[str] = None
    latest_block_height: Optional[int] = Field(default=None, alias="latestBlockHeight")

    @property
    def signing_asset(self) -> Optional[UserAsset]:
        return self.origin_asset or self.asset


# =============================================================================
# Staking / Distribution
# =============================================================================

class DelegateTransactionUnsigned(TransactionUnsigned):
    delegator_address: str = Field(alias="delegatorAddress")
    validator_address: str = Field(alias="validatorAddress")
    amount: str


class UndelegateTransactionUnsigned(TransactionUnsigned):
    delegator_address: str = Field(alias="delegatorAddress")
    validator_address: str = Field(alias="validatorAddress")
    amount: str


class RedelegateTransactionUnsigned(TransactionUnsigned):
    delegator_address: str = Field(alias="delegatorAddress")
    source_validator_address: str = Field(alias="sourceValidatorAddress")
    destination_validator_address: str = Field(alias="destinationValidatorAddress")
    amount: str


class RestakeStakingRewardTransactionUnsigned(TransactionUnsigned):
    """Withdraw the reward from one validator and delegate it back."""
    delegator_address: str = Field(alias="delegatorAddress")
    validator_address: str = Field(alias="validatorAddress")
    amount: str


class RestakeStakingAllRewardsTransactionUnsigned(TransactionUnsigned):
    """Withdraw and re-delegate rewards across several validators."""
    delegator_address: str = Field(alias="delegatorAddress")
    validator_address_list: List[str] = Field(alias="validatorAddressList")
    amount_list: List[str] = Field(alias="amountList")


class WithdrawStakingRewardUnsigned(TransactionUnsigned):
    delegator_address: str = Field(alias="delegatorAddress")
    validator_address: str = Field(alias="validatorAddress")


class WithdrawAllStakingRewardsUnsigned(TransactionUnsigned):
    delegator_address: str = Field(alias="delegatorAddress")
    validator_address_list: List[str] = Field(alias="validatorAddressList")


# =============================================================================
# Governance
# =============================================================================

class VoteTransactionUnsigned(TransactionUnsigned):
    voter: str
    option: VoteOption
    proposal_id: str = Field(alias="proposalID")


class MsgDepositTransactionUnsigned(TransactionUnsigned):
    depositor: str
    proposal_id: str = Field(alias="proposalId")
    amount: List[CoinAmount]


class TextProposalTransactionUnsigned(TransactionUnsigned):
    proposer: str
    initial_deposit: List[CoinAmount] = Field(alias="initialDeposit")
    params: TextProposalParams


# =============================================================================
# NFT
# =============================================================================

class NFTTransferUnsigned(TransactionUnsigned):
    token_id: str = Field(alias="tokenId")
    denom_id: str = Field(alias="denomId")
    sender: str
    recipient: str


class NFTMintUnsigned(TransactionUnsigned):
    token_id: str = Field(alias="tokenId")
    denom_id: str = Field(alias="denomId")
    name: str
    uri: str
    data: str
    sender: str
    recipient: str


class NFTDenomIssueUnsigned(TransactionUnsigned):
    denom_id: str = Field(alias="denomId")
    name: str
    schema_: str = Field(alias="schema")
    sender: str


__all__ = [
    "CoinAmount",
    "TextProposalParams",
    "TransactionUnsigned",
    "TransferTransactionUnsigned",
    "BridgeTransactionUnsigned",
    "DelegateTransactionUnsigned",
    "UndelegateTransactionUnsigned",
    "RedelegateTransactionUnsigned",
    "RestakeStakingRewardTransactionUnsigned",
    "RestakeStakingAllRewardsTransactionUnsigned",
    "WithdrawStakingRewardUnsigned",
    "WithdrawAllStakingRewardsUnsigned",
    "VoteTransactionUnsigned",
    "MsgDepositTransactionUnsigned",
    "TextProposalTransactionUnsigned",
    "NFTTransferUnsigned",
    "NFTMintUnsigned",
    "NFTDenomIssueUnsigned",
]
