"""
Transaction assembly for Cosmos SDK chains.

Message building, fee normalization, body and auth info encoding, sign
documents for both signing schemes, and the signed envelope.
"""

from .builder import (
    MESSAGE_BUILDERS,
    MessageContext,
    build_messages,
    compute_revision_height,
    compute_timeout_timestamp,
    current_time_ms,
    parse_revision_number,
)
from .envelope import (
    DecodedTransaction,
    bind_signature,
    bind_signatures,
    compute_tx_hash,
    decode_signed_transaction,
)
from .fees import FeeDescriptor, build_fee, sanitize_memo
from .messages import (
    ALL_MESSAGES,
    COSMOS_SDK_MESSAGES,
    IBC_MESSAGES,
    NFT_MESSAGES,
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
    to_amino,
)
from .proto_types import AuthInfo, Fee, SignDoc, SignerInfo, TxBody, TxRaw
from .raw_transaction import RawTransaction, SignableTransaction, SignedTransaction, SignerAccount
from .registry import Registry, full_registry
from .sign_doc import (
    AminoSignDoc,
    LegacyPubKey,
    encode_pubkey,
    encode_secp256k1_pubkey,
    make_auth_info_bytes,
    make_sign_doc,
    serialize_sign_doc,
    strip_public_key_prefix,
)
from .validation import validate_unsigned_transaction

__all__ = [
    # Builder
    "MESSAGE_BUILDERS",
    "MessageContext",
    "build_messages",
    "compute_revision_height",
    "compute_timeout_timestamp",
    "current_time_ms",
    "parse_revision_number",
    # Envelope
    "DecodedTransaction",
    "bind_signature",
    "bind_signatures",
    "compute_tx_hash",
    "decode_signed_transaction",
    # Fees
    "FeeDescriptor",
    "build_fee",
    "sanitize_memo",
    # Messages
    "ALL_MESSAGES",
    "COSMOS_SDK_MESSAGES",
    "IBC_MESSAGES",
    "NFT_MESSAGES",
    "Coin",
    "Height",
    "MsgBeginRedelegate",
    "MsgDelegate",
    "MsgDeposit",
    "MsgIssueDenom",
    "MsgMintNFT",
    "MsgSend",
    "MsgSubmitProposal",
    "MsgTransfer",
    "MsgTransferNFT",
    "MsgUndelegate",
    "MsgVote",
    "MsgWithdrawDelegatorReward",
    "TextProposal",
    "to_amino",
    # Envelope types
    "AuthInfo",
    "Fee",
    "SignDoc",
    "SignerInfo",
    "TxBody",
    "TxRaw",
    # Home chain builder
    "RawTransaction",
    "SignableTransaction",
    "SignedTransaction",
    "SignerAccount",
    # Registry
    "Registry",
    "full_registry",
    # Legacy amino
    "AminoSignDoc",
    "LegacyPubKey",
    "encode_pubkey",
    "encode_secp256k1_pubkey",
    "make_auth_info_bytes",
    "make_sign_doc",
    "serialize_sign_doc",
    "strip_public_key_prefix",
    # Validation
    "validate_unsigned_transaction",
]
