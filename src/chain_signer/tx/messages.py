"""
Protocol messages carried in a transaction body.

Cosmos SDK and ibc-go messages are cosmpy's generated protobuf classes; the
chain-main NFT messages come from ``chain_signer.protos``. This module groups
them by the module that defines them and holds the amino rules used to render
them for ``SIGN_MODE_LEGACY_AMINO_JSON``.
"""

from __future__ import annotations
from typing import Any, Dict, Tuple, Type

from cosmpy.protos.cosmos.bank.v1beta1.tx_pb2 import MsgSend
from cosmpy.protos.cosmos.base.v1beta1.coin_pb2 import Coin
from cosmpy.protos.cosmos.distribution.v1beta1.tx_pb2 import MsgWithdrawDelegatorReward
from cosmpy.protos.cosmos.gov.v1beta1.gov_pb2 import TextProposal
from cosmpy.protos.cosmos.gov.v1beta1.tx_pb2 import MsgDeposit, MsgSubmitProposal, MsgVote
from cosmpy.protos.cosmos.staking.v1beta1.tx_pb2 import MsgBeginRedelegate, MsgDelegate, MsgUndelegate
from cosmpy.protos.ibc.applications.transfer.v1.tx_pb2 import MsgTransfer
from cosmpy.protos.ibc.core.client.v1.client_pb2 import Height
from google.protobuf.message import Message

from ..codec.amino import AminoCodec, AminoRule
from ..codec.proto import type_url
from ..protos.chainmain.nft.v1.tx_pb2 import MsgIssueDenom, MsgMintNFT, MsgTransferNFT


def _name(cls: Type[Message]) -> str:
    return cls.DESCRIPTOR.full_name


# Amino type names are registered by each module's legacy codec and do not
# always follow the proto name (MsgWithdrawDelegationReward).
AMINO_RULES: Dict[str, AminoRule] = {
    _name(MsgSend): AminoRule("cosmos-sdk/MsgSend"),
    _name(MsgDelegate): AminoRule("cosmos-sdk/MsgDelegate"),
    _name(MsgUndelegate): AminoRule("cosmos-sdk/MsgUndelegate"),
    _name(MsgBeginRedelegate): AminoRule("cosmos-sdk/MsgBeginRedelegate"),
    _name(MsgWithdrawDelegatorReward): AminoRule("cosmos-sdk/MsgWithdrawDelegationReward"),
    _name(MsgVote): AminoRule("cosmos-sdk/MsgVote"),
    _name(MsgDeposit): AminoRule("cosmos-sdk/MsgDeposit"),
    _name(MsgSubmitProposal): AminoRule("cosmos-sdk/MsgSubmitProposal"),
    _name(TextProposal): AminoRule("cosmos-sdk/TextProposal"),
    _name(MsgIssueDenom): AminoRule("chainmain/nft/MsgIssueDenom"),
    _name(MsgMintNFT): AminoRule("chainmain/nft/MsgMintNFT"),
    _name(MsgTransferNFT): AminoRule("chainmain/nft/MsgTransferNFT"),
    _name(MsgTransfer): AminoRule(
        "cosmos-sdk/MsgTransfer",
        omit_empty=frozenset({"timeout_timestamp", "memo"}),
        unset={"timeout_height": {}},
    ),
    _name(Height): AminoRule(omit_empty=frozenset({"revision_number", "revision_height"})),
}

# Payloads packed into an Any field of another message.
PACKED_CONTENT_TYPES: Dict[str, Type[Message]] = {
    type_url(TextProposal): TextProposal,
}

AMINO = AminoCodec(AMINO_RULES, PACKED_CONTENT_TYPES)


def to_amino(message: Message) -> Dict[str, Any]:
    """Render a message as its amino ``{"type", "value"}`` envelope."""
    return AMINO.to_amino(message)


def to_amino_value(message: Message) -> Dict[str, Any]:
    """Render the fields of a message as amino JSON."""
    return AMINO.to_amino_value(message)


# =============================================================================
# Message sets
# =============================================================================

COSMOS_SDK_MESSAGES: Tuple[Type[Message], ...] = (
    MsgSend,
    MsgDelegate,
    MsgUndelegate,
    MsgBeginRedelegate,
    MsgWithdrawDelegatorReward,
    MsgVote,
    MsgDeposit,
    MsgSubmitProposal,
)

NFT_MESSAGES: Tuple[Type[Message], ...] = (
    MsgIssueDenom,
    MsgMintNFT,
    MsgTransferNFT,
)

IBC_MESSAGES: Tuple[Type[Message], ...] = (
    MsgTransfer,
)

ALL_MESSAGES: Tuple[Type[Message], ...] = COSMOS_SDK_MESSAGES + NFT_MESSAGES + IBC_MESSAGES


__all__ = [
    "Coin",
    "Height",
    "TextProposal",
    "MsgSend",
    "MsgDelegate",
    "MsgUndelegate",
    "MsgBeginRedelegate",
    "MsgWithdrawDelegatorReward",
    "MsgVote",
    "MsgDeposit",
    "MsgSubmitProposal",
    "MsgIssueDenom",
    "MsgMintNFT",
    "MsgTransferNFT",
    "MsgTransfer",
    "AMINO_RULES",
    "PACKED_CONTENT_TYPES",
    "AMINO",
    "to_amino",
    "to_amino_value",
    "COSMOS_SDK_MESSAGES",
    "NFT_MESSAGES",
    "IBC_MESSAGES",
    "ALL_MESSAGES",
]
