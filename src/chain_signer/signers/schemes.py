"""
Sign-document schemes.

A chain is signed for with exactly one scheme, picked once per call from
its ``ChainCapability``:

- ``NativeScheme``: the home chain, assembled through ``RawTransaction``.
- ``LegacyAminoJsonScheme``: foreign Tendermint chains, assembled from a
  protobuf body and auth info plus a legacy amino JSON sign document.

Both produce a ``PreparedTransaction`` holding the exact bytes to sign and
the means to bind the returned signature into the broadcast envelope.
"""

from __future__ import annotations
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import ClassVar, Dict, Sequence, Type

from google.protobuf.message import Message

from ..capability import ChainCapability
from ..codec.proto import type_url
from ..enums import DerivationPathStandard, SigningScheme, SignMode
from ..runtime.errors import EncodingError, ErrorCode
from ..tx.envelope import bind_signature
from ..tx.fees import FeeDescriptor
from ..tx.messages import to_amino
from ..tx.raw_transaction import RawTransaction, SignableTransaction
from ..tx.registry import Registry
from ..tx.sign_doc import (
    encode_pubkey,
    encode_secp256k1_pubkey,
    make_auth_info_bytes,
    make_sign_doc,
    serialize_sign_doc,
    strip_public_key_prefix,
)
from .provider import SignerProvider

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SignRequest:
    """Everything a scheme needs besides the public key."""

    messages: Sequence[Message]
    memo: str
    fee: FeeDescriptor
    account_number: int
    account_sequence: int


class PreparedTransaction(ABC):
    """Sign bytes plus the envelope they will be bound into."""

    def __init__(self, sign_bytes: bytes, public_key: bytes):
        self.sign_bytes = sign_bytes
        self.public_key = public_key

    @abstractmethod
    def bind(self, signature: bytes) -> str:
        """Attach the signature and return the hex-encoded signed transaction."""
        pass


class NativePreparedTransaction(PreparedTransaction):
    def __init__(self, signable: SignableTransaction, public_key: bytes, signer_index: int = 0):
        super().__init__(signable.to_sign_document(signer_index), public_key)
        self.signable = signable
        self.signer_index = signer_index

    def bind(self, signature: bytes) -> str:
        return self.signable.set_signature(self.signer_index, signature).to_signed().get_hex_encoded()


class LegacyPreparedTransaction(PreparedTransaction):
    def __init__(self, sign_bytes: bytes, public_key: bytes, body_bytes: bytes, auth_info_bytes: bytes):
        super().__init__(sign_bytes, public_key)
        self.body_bytes = body_bytes
        self.auth_info_bytes = auth_info_bytes

    def bind(self, signature: bytes) -> str:
        return bind_signature(self.body_bytes, self.auth_info_bytes, signature)


class SignDocScheme(ABC):
    """Base class for the two sign-document schemes."""

    SCHEME: ClassVar[SigningScheme]
    SIGN_MODE: ClassVar[SignMode] = SignMode.LEGACY_AMINO_JSON

    def __init__(self, capability: ChainCapability, registry: Registry):
        self.capability = capability
        self.registry = registry

    def check_messages(self, messages: Sequence[Message]) -> None:
        """
        Fail before any signer I/O if a message cannot be encoded for this chain.

        Raises:
            EncodingError: If a message type is not registered
        """
        for msg in messages:
            url = type_url(msg)
            if not self.registry.is_registered(url):
                raise EncodingError(
                    f"Message {url} is not supported on {self.capability.chain_name}",
                    code=ErrorCode.UNREGISTERED_TYPE,
                    details={"typeUrl": url, "chainId": self.capability.chain_id},
                )

    async def fetch_public_key(
        self,
        provider: SignerProvider,
        address_index: int,
        derivation_path_standard: DerivationPathStandard,
    ) -> bytes:
        """Ask the provider for the account key and return it as 33 compressed bytes."""
        raw = await provider.get_public_key(
            address_index,
            self.capability.chain_name,
            derivation_path_standard,
            False,
        )
        return strip_public_key_prefix(raw)

    @abstractmethod
    def prepare(self, public_key: bytes, request: SignRequest) -> PreparedTransaction:
        pass


class NativeScheme(SignDocScheme):
    """Home chain: ``RawTransaction`` with a single amino JSON signer."""

    SCHEME = SigningScheme.NATIVE

    def prepare(self, public_key: bytes, request: SignRequest) -> PreparedTransaction:
        raw_tx = RawTransaction(
            chain_id=self.capability.chain_id,
            fee=request.fee,
            memo=request.memo,
            registry=self.registry,
        )
        for msg in request.messages:
            raw_tx.append_message(msg)

        signable = raw_tx.add_signer(
            public_key=public_key,
            account_number=request.account_number,
            account_sequence=request.account_sequence,
            sign_mode=self.SIGN_MODE,
        ).to_signable()

        return NativePreparedTransaction(signable, public_key)


class LegacyAminoJsonScheme(SignDocScheme):
    """
    Foreign Tendermint chains.

    Body and auth info are protobuf, the signer signs the legacy amino JSON
    rendering of the same content, and the auth info declares
    ``SIGN_MODE_LEGACY_AMINO_JSON`` so the node re-derives those bytes.
    """

    SCHEME = SigningScheme.LEGACY_AMINO_JSON

    def prepare(self, public_key: bytes, request: SignRequest) -> PreparedTransaction:
        pubkey_any = encode_pubkey(encode_secp256k1_pubkey(public_key))

        auth_info_bytes = make_auth_info_bytes(
            [(pubkey_any, request.account_sequence)],
            request.fee.coins(),
            request.fee.gas_limit,
            self.SIGN_MODE,
        )
        body_bytes = self.registry.encode_tx_body(request.messages, request.memo)

        sign_doc = make_sign_doc(
            [to_amino(msg) for msg in request.messages],
            request.fee.to_amino(),
            self.capability.chain_id,
            request.memo,
            request.account_number,
            request.account_sequence,
        )
        return LegacyPreparedTransaction(
            sign_bytes=serialize_sign_doc(sign_doc),
            public_key=public_key,
            body_bytes=body_bytes,
            auth_info_bytes=auth_info_bytes,
        )


SCHEMES: Dict[SigningScheme, Type[SignDocScheme]] = {
    SigningScheme.NATIVE: NativeScheme,
    SigningScheme.LEGACY_AMINO_JSON: LegacyAminoJsonScheme,
}


def scheme_for(capability: ChainCapability, registries: Dict[SigningScheme, Registry]) -> SignDocScheme:
    """
    Instantiate the scheme a capability calls for.

    Args:
        capability: Classified chain
        registries: Message registry per scheme

    Returns:
        The scheme, bound to the capability and its registry
    """
    scheme = SCHEMES[capability.scheme](capability, registries[capability.scheme])
    logger.debug(f"Using {type(scheme).__name__} for {capability.chain_id}")
    return scheme


__all__ = [
    "SignRequest",
    "PreparedTransaction",
    "NativePreparedTransaction",
    "LegacyPreparedTransaction",
    "SignDocScheme",
    "NativeScheme",
    "LegacyAminoJsonScheme",
    "SCHEMES",
    "scheme_for",
]
