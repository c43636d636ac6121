"""
Home chain transaction builder.

Staged builder for transactions on the wallet's home chain:

    RawTransaction -> append_message -> add_signer -> to_signable()
    SignableTransaction -> to_sign_document(i) -> set_signature(i, sig) -> to_signed()
    SignedTransaction -> get_hex_encoded() / get_tx_hash()

Each stage freezes what the previous one assembled, so the bytes a signer
signs are exactly the bytes that end up in the envelope.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Dict, List, Optional

from google.protobuf.message import Message

from ..codec.proto import encode_message
from ..enums import SignMode
from ..runtime.errors import SignerError, SignerErrorKind, ValidationError
from .envelope import compute_tx_hash
from .fees import FeeDescriptor
from .messages import to_amino
from .proto_types import SignDoc, TxRaw
from .registry import Registry, full_registry
from .sign_doc import encode_pubkey, encode_secp256k1_pubkey, make_auth_info_bytes, make_sign_doc, serialize_sign_doc

logger = logging.getLogger(__name__)

SUPPORTED_SIGN_MODES = (SignMode.DIRECT, SignMode.LEGACY_AMINO_JSON)


@dataclass(frozen=True)
class SignerAccount:
    """
    Account signing a transaction.

    Attributes:
        public_key: 33-byte compressed secp256k1 key
        account_number: On-chain account number
        account_sequence: Account sequence the signature commits to
        sign_mode: How the sign document is built
    """

    public_key: bytes
    account_number: int
    account_sequence: int
    sign_mode: SignMode = SignMode.LEGACY_AMINO_JSON


class RawTransaction:
    """Mutable transaction shell: messages, memo, fee and signers."""

    def __init__(self, chain_id: str, fee: FeeDescriptor, memo: str = "",
                 registry: Optional[Registry] = None):
        """
        Initialize the transaction.

        Args:
            chain_id: Chain id the transaction is valid on
            fee: Fee and gas limit
            memo: Transaction memo
            registry: Registry used to pack messages; defaults to every known type
        """
        self.chain_id = chain_id
        self.fee = fee
        self.memo = memo
        self.registry = registry if registry is not None else full_registry()
        self.messages: List[Message] = []
        self.signers: List[SignerAccount] = []

    def append_message(self, message: Message) -> "RawTransaction":
        self.messages.append(message)
        return self

    def add_signer(self, public_key: bytes, account_number: int, account_sequence: int,
                   sign_mode: SignMode = SignMode.LEGACY_AMINO_JSON) -> "RawTransaction":
        """
        Add a signer.

        Raises:
            ValidationError: If the sign mode is not supported
            SignerError: If the public key is not a compressed secp256k1 key
        """
        if sign_mode not in SUPPORTED_SIGN_MODES:
            raise ValidationError(f"Unsupported sign mode: {sign_mode!r}")
        encode_secp256k1_pubkey(bytes(public_key))
        self.signers.append(SignerAccount(
            public_key=bytes(public_key),
            account_number=account_number,
            account_sequence=account_sequence,
            sign_mode=SignMode(sign_mode),
        ))
        return self

    def to_signable(self) -> "SignableTransaction":
        """
        Freeze the transaction for signing.

        Raises:
            ValidationError: If there are no messages or no signers
        """
        if not self.messages:
            raise ValidationError("Transaction has no messages")
        if not self.signers:
            raise ValidationError("Transaction has no signers")
        return SignableTransaction(self)


class SignableTransaction:
    """Transaction with fixed body and auth info, waiting for signatures."""

    def __init__(self, raw: RawTransaction):
        self.chain_id = raw.chain_id
        self.memo = raw.memo
        self.fee = raw.fee
        self.messages = tuple(raw.messages)
        self.signers = tuple(raw.signers)

        self.body_bytes = raw.registry.encode_tx_body(self.messages, self.memo)
        self.auth_info_bytes = make_auth_info_bytes(
            [(encode_pubkey(encode_secp256k1_pubkey(s.public_key)), s.account_sequence) for s in self.signers],
            self.fee.coins(),
            self.fee.gas_limit,
            self.signers[0].sign_mode,
        )
        self._signatures: Dict[int, bytes] = {}

    def _signer(self, index: int) -> SignerAccount:
        if index < 0 or index >= len(self.signers):
            raise ValidationError(f"Signer index {index} out of range")
        return self.signers[index]

    def to_sign_document(self, index: int) -> bytes:
        """
        Bytes the signer at ``index`` must sign.

        Amino JSON for ``LEGACY_AMINO_JSON`` signers, the protobuf ``SignDoc``
        for ``DIRECT`` signers.
        """
        signer = self._signer(index)
        if signer.sign_mode == SignMode.DIRECT:
            sign_doc = SignDoc(
                body_bytes=self.body_bytes,
                auth_info_bytes=self.auth_info_bytes,
                chain_id=self.chain_id,
                account_number=signer.account_number,
            )
            return encode_message(sign_doc)

        sign_doc = make_sign_doc(
            [to_amino(msg) for msg in self.messages],
            self.fee.to_amino(),
            self.chain_id,
            self.memo,
            signer.account_number,
            signer.account_sequence,
        )
        return serialize_sign_doc(sign_doc)

    def set_signature(self, index: int, signature: bytes) -> "SignableTransaction":
        self._signer(index)
        self._signatures[index] = bytes(signature)
        return self

    def to_signed(self) -> "SignedTransaction":
        """
        Assemble the signed transaction.

        Raises:
            SignerError: If any signer has not provided a signature
        """
        missing = [i for i in range(len(self.signers)) if i not in self._signatures]
        if missing:
            raise SignerError(
                f"Missing signature for signer(s) {missing}",
                kind=SignerErrorKind.INVALID_SIGNATURE,
                details={"missing": missing},
            )
        tx_raw = TxRaw(
            body_bytes=self.body_bytes,
            auth_info_bytes=self.auth_info_bytes,
            signatures=[self._signatures[i] for i in range(len(self.signers))],
        )
        signed = SignedTransaction(tx_raw)
        logger.debug(f"Signed transaction {signed.get_tx_hash()}")
        return signed


class SignedTransaction:
    """Signed ``TxRaw`` ready for broadcast."""

    def __init__(self, tx_raw: TxRaw):
        self.tx_raw = tx_raw

    def encode(self) -> bytes:
        return encode_message(self.tx_raw)

    def get_hex_encoded(self) -> str:
        """Lowercase hex of the encoded envelope."""
        return self.encode().hex()

    def get_tx_hash(self) -> str:
        """Uppercase hex SHA-256 hash, as the node reports it."""
        return compute_tx_hash(self.encode())


__all__ = [
    "SignerAccount",
    "RawTransaction",
    "SignableTransaction",
    "SignedTransaction",
]
