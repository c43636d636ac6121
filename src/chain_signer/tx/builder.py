"""
Message builder.

Maps each unsigned transaction variant to the protocol messages it stands
for. Mappings only rename and repackage fields and tag amounts with the
chain's base denomination; amounts stay integer strings throughout.
"""

from __future__ import annotations
import logging
import re
import time
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Tuple, Type

from google.protobuf.message import Message

from ..capability import ChainCapability
from ..codec.proto import pack_any
from ..config import REVISION_HEIGHT_MARGIN
from ..runtime.errors import EncodingError, ValidationError
from ..transactions import (
    BridgeTransactionUnsigned,
    CoinAmount,
    DelegateTransactionUnsigned,
    MsgDepositTransactionUnsigned,
    NFTDenomIssueUnsigned,
    NFTMintUnsigned,
    NFTTransferUnsigned,
    RedelegateTransactionUnsigned,
    RestakeStakingAllRewardsTransactionUnsigned,
    RestakeStakingRewardTransactionUnsigned,
    TextProposalTransactionUnsigned,
    TransactionUnsigned,
    TransferTransactionUnsigned,
    UndelegateTransactionUnsigned,
    VoteTransactionUnsigned,
    WithdrawAllStakingRewardsUnsigned,
    WithdrawStakingRewardUnsigned,
)
from .messages import (
    Coin,
    Height,
    MsgBeginRedelegate,
    MsgDelegate,
    MsgDeposit,
    MsgIssueDenom,
    MsgMintNFT,
    MsgSend,
    MsgSubmitProposal,
    MsgTransfer,
    MsgTransferNFT,
    MsgUndelegate,
    MsgVote,
    MsgWithdrawDelegatorReward,
    TextProposal,
)
from .validation import parse_uint64

logger = logging.getLogger(__name__)

MILLIS_TO_NANOSECONDS = 1_000_000

_REVISION_SUFFIX_RE = re.compile(r"[0-9]+")

Messages = Tuple[Message, ...]


def current_time_ms() -> int:
    """Wall-clock time in milliseconds."""
    return time.time_ns() // MILLIS_TO_NANOSECONDS


@dataclass(frozen=True)
class MessageContext:
    """Inputs the mappings need besides the transaction itself."""

    capability: ChainCapability
    now_ms: int

    @property
    def denom(self) -> str:
        return self.capability.base_denom

    def coin(self, amount: str) -> Coin:
        return Coin(denom=self.denom, amount=amount)


# =============================================================================
# IBC timeout helpers
# =============================================================================

def parse_revision_number(chain_id: Optional[str], default: int) -> int:
    """
    Revision number from the trailing numeric suffix of a chain id.

    ``testnet-croeseid-4`` yields 4; ids without a numeric suffix yield ``default``.
    """
    if not chain_id:
        return default
    suffix = chain_id.split("-")[-1]
    if _REVISION_SUFFIX_RE.fullmatch(suffix):
        return int(suffix)
    return default


def compute_revision_height(
    latest_block_height: Optional[int],
    default_height: int,
    margin: int = REVISION_HEIGHT_MARGIN,
) -> int:
    """Latest known block height (or the default when unknown) plus a safety margin."""
    base = latest_block_height if latest_block_height else default_height
    return base + margin


def compute_timeout_timestamp(now_ms: int, window_ms: int) -> int:
    """Timeout ``window_ms`` after ``now_ms``, in nanoseconds."""
    return (now_ms + window_ms) * MILLIS_TO_NANOSECONDS


# =============================================================================
# Mappings
# =============================================================================

def _coins(amounts: List[CoinAmount]) -> List[Coin]:
    return [Coin(denom=c.denom, amount=c.amount) for c in amounts]


def _transfer(tx: TransferTransactionUnsigned, ctx: MessageContext) -> Messages:
    return (
        MsgSend(
            from_address=tx.from_address,
            to_address=tx.to_address,
            amount=[ctx.coin(tx.amount)],
        ),
    )


def _delegate(tx: DelegateTransactionUnsigned, ctx: MessageContext) -> Messages:
    return (
        MsgDelegate(
            delegator_address=tx.delegator_address,
            validator_address=tx.validator_address,
            amount=ctx.coin(tx.amount),
        ),
    )


def _undelegate(tx: UndelegateTransactionUnsigned, ctx: MessageContext) -> Messages:
    return (
        MsgUndelegate(
            delegator_address=tx.delegator_address,
            validator_address=tx.validator_address,
            amount=ctx.coin(tx.amount),
        ),
    )


def _redelegate(tx: RedelegateTransactionUnsigned, ctx: MessageContext) -> Messages:
    return (
        MsgBeginRedelegate(
            delegator_address=tx.delegator_address,
            validator_src_address=tx.source_validator_address,
            validator_dst_address=tx.destination_validator_address,
            amount=ctx.coin(tx.amount),
        ),
    )


def _withdraw_reward(tx: WithdrawStakingRewardUnsigned, ctx: MessageContext) -> Messages:
    return (
        MsgWithdrawDelegatorReward(
            delegator_address=tx.delegator_address,
            validator_address=tx.validator_address,
        ),
    )


def _withdraw_all_rewards(tx: WithdrawAllStakingRewardsUnsigned, ctx: MessageContext) -> Messages:
    return tuple(
        MsgWithdrawDelegatorReward(delegator_address=tx.delegator_address, validator_address=validator)
        for validator in tx.validator_address_list
    )


def _restake_reward(tx: RestakeStakingRewardTransactionUnsigned, ctx: MessageContext) -> Messages:
    return (
        MsgWithdrawDelegatorReward(
            delegator_address=tx.delegator_address,
            validator_address=tx.validator_address,
        ),
        MsgDelegate(
            delegator_address=tx.delegator_address,
            validator_address=tx.validator_address,
            amount=ctx.coin(tx.amount),
        ),
    )


def _restake_all_rewards(tx: RestakeStakingAllRewardsTransactionUnsigned, ctx: MessageContext) -> Messages:
    # Every withdraw precedes every delegate; execution on chain is sequential.
    withdraws = [
        MsgWithdrawDelegatorReward(delegator_address=tx.delegator_address, validator_address=validator)
        for validator in tx.validator_address_list
    ]
    delegates = [
        MsgDelegate(
            delegator_address=tx.delegator_address,
            validator_address=validator,
            amount=ctx.coin(amount),
        )
        for validator, amount in zip(tx.validator_address_list, tx.amount_list)
    ]
    return tuple(withdraws + delegates)


def _vote(tx: VoteTransactionUnsigned, ctx: MessageContext) -> Messages:
    return (
        MsgVote(
            proposal_id=parse_uint64(tx.proposal_id, "proposal_id"),
            voter=tx.voter,
            option=int(tx.option),
        ),
    )


def _deposit(tx: MsgDepositTransactionUnsigned, ctx: MessageContext) -> Messages:
    return (
        MsgDeposit(
            proposal_id=parse_uint64(tx.proposal_id, "proposal_id"),
            depositor=tx.depositor,
            amount=_coins(tx.amount),
        ),
    )


def _submit_text_proposal(tx: TextProposalTransactionUnsigned, ctx: MessageContext) -> Messages:
    return (
        MsgSubmitProposal(
            content=pack_any(TextProposal(title=tx.params.title, description=tx.params.description)),
            initial_deposit=_coins(tx.initial_deposit),
            proposer=tx.proposer,
        ),
    )


def _nft_transfer(tx: NFTTransferUnsigned, ctx: MessageContext) -> Messages:
    return (
        MsgTransferNFT(
            id=tx.token_id,
            denom_id=tx.denom_id,
            sender=tx.sender,
            recipient=tx.recipient,
        ),
    )


def _nft_mint(tx: NFTMintUnsigned, ctx: MessageContext) -> Messages:
    return (
        MsgMintNFT(
            id=tx.token_id,
            denom_id=tx.denom_id,
            name=tx.name,
            uri=tx.uri,
            data=tx.data,
            sender=tx.sender,
            recipient=tx.recipient,
        ),
    )


def _nft_issue_denom(tx: NFTDenomIssueUnsigned, ctx: MessageContext) -> Messages:
    return (
        MsgIssueDenom(
            id=tx.denom_id,
            name=tx.name,
            schema=tx.schema_,
            sender=tx.sender,
        ),
    )


def _ibc_transfer(tx: BridgeTransactionUnsigned, ctx: MessageContext) -> Messages:
    defaults = ctx.capability.defaults

    transfer = MsgTransfer(
        source_port=tx.port or "",
        source_channel=tx.channel or "",
        token=ctx.coin(tx.amount),
        sender=tx.from_address,
        receiver=tx.to_address,
        timeout_timestamp=compute_timeout_timestamp(ctx.now_ms, defaults.ibc_timeout_ms),
    )
    if ctx.capability.use_timeout_height:
        # The revision comes from the origin asset's chain id only; without
        # one the configured default applies.
        asset = tx.signing_asset
        origin_chain_id = asset.config.chain_id if asset and asset.config else None
        transfer.timeout_height.CopyFrom(Height(
            revision_number=parse_revision_number(origin_chain_id, defaults.revision_number),
            revision_height=compute_revision_height(
                tx.latest_block_height, defaults.latest_block_height, defaults.revision_height_margin
            ),
        ))
    return (transfer,)


MESSAGE_BUILDERS: Dict[Type[TransactionUnsigned], Callable[..., Messages]] = {
    TransferTransactionUnsigned: _transfer,
    DelegateTransactionUnsigned: _delegate,
    UndelegateTransactionUnsigned: _undelegate,
    RedelegateTransactionUnsigned: _redelegate,
    WithdrawStakingRewardUnsigned: _withdraw_reward,
    WithdrawAllStakingRewardsUnsigned: _withdraw_all_rewards,
    RestakeStakingRewardTransactionUnsigned: _restake_reward,
    RestakeStakingAllRewardsTransactionUnsigned: _restake_all_rewards,
    VoteTransactionUnsigned: _vote,
    MsgDepositTransactionUnsigned: _deposit,
    TextProposalTransactionUnsigned: _submit_text_proposal,
    NFTTransferUnsigned: _nft_transfer,
    NFTMintUnsigned: _nft_mint,
    NFTDenomIssueUnsigned: _nft_issue_denom,
    BridgeTransactionUnsigned: _ibc_transfer,
}


def build_messages(tx: TransactionUnsigned, context: MessageContext) -> Messages:
    """
    Build the protocol messages for an unsigned transaction.

    Args:
        tx: Unsigned transaction
        context: Chain capability and clock reading for this call

    Returns:
        Messages in execution order

    Raises:
        ValidationError: If the transaction kind has no mapping or a field is malformed
        EncodingError: If a value does not fit its protobuf field
    """
    for cls in type(tx).__mro__:
        builder = MESSAGE_BUILDERS.get(cls)
        if builder is not None:
            try:
                messages = builder(tx, context)
            except ValidationError:
                raise
            except (ValueError, TypeError) as e:
                raise EncodingError(f"Failed to build {type(tx).__name__} messages: {e}", cause=e)
            logger.debug(f"Built {len(messages)} message(s) for {type(tx).__name__}")
            return messages
    raise ValidationError(f"Unsupported transaction kind: {type(tx).__name__}")


__all__ = [
    "MILLIS_TO_NANOSECONDS",
    "current_time_ms",
    "MessageContext",
    "parse_revision_number",
    "compute_revision_height",
    "compute_timeout_timestamp",
    "MESSAGE_BUILDERS",
    "build_messages",
]
