"""
Hardware wallet transaction signer.

Signs transactions for the home chain and for foreign Tendermint chains
with keys held by an external signer provider (typically a Ledger device).
Each call classifies the target chain once, validates and builds
everything locally, and only then talks to the provider: one public key
request and one sign request.
"""

from __future__ import annotations
import logging
from typing import Callable, Dict, Optional

from ..capability import classify_chain
from ..codec.proto import type_url
from ..config import SigningDefaults, WalletConfig
from ..crypto.secp256k1 import verify_signature
from ..enums import DerivationPathStandard, SigningScheme
from ..runtime.errors import SignerError, SignerErrorKind
from ..transactions import TransactionUnsigned
from ..tx.builder import MessageContext, build_messages, current_time_ms
from ..tx.fees import build_fee, sanitize_memo
from ..tx.messages import MsgTransfer
from ..tx.registry import Registry, full_registry
from ..tx.validation import validate_unsigned_transaction
from .provider import SignerProvider
from .schemes import PreparedTransaction, SignRequest, scheme_for
from .signer import GasLimit, TransactionSigner

logger = logging.getLogger(__name__)


class LedgerTransactionSigner(TransactionSigner):
    """
    Transaction signer backed by an external signer provider.

    Example:
        >>> signer = LedgerTransactionSigner(MAINNET_CONFIG, provider, 0, DerivationPathStandard.BIP44)
        >>> tx_hex = await signer.sign_transfer(transfer, "", "5000", 300000)
    """

    def __init__(
        self,
        config: WalletConfig,
        signer_provider: SignerProvider,
        address_index: int,
        derivation_path_standard: DerivationPathStandard,
        defaults: Optional[SigningDefaults] = None,
        verify_signatures: bool = False,
        clock: Optional[Callable[[], int]] = None,
    ):
        """
        Initialize the signer.

        Args:
            config: Wallet configuration; its network is the home chain
            signer_provider: Provider holding the keys
            address_index: BIP-44 address index of the signing account
            derivation_path_standard: Derivation path layout used by the provider
            defaults: Fallback constants for IBC timeouts and memo length
            verify_signatures: Check each returned signature before binding it
            clock: Millisecond wall clock, used for IBC timeouts
        """
        self.config = config
        self.signer_provider = signer_provider
        self.address_index = address_index
        self.derivation_path_standard = derivation_path_standard
        self.defaults = defaults or SigningDefaults()
        self.verify_signatures = verify_signatures
        self._clock = clock or current_time_ms

        # Foreign chains get the cosmos-sdk messages plus IBC transfer
        foreign_registry = Registry()
        foreign_registry.register(type_url(MsgTransfer), MsgTransfer)
        self._registries: Dict[SigningScheme, Registry] = {
            SigningScheme.NATIVE: full_registry(),
            SigningScheme.LEGACY_AMINO_JSON: foreign_registry,
        }

    async def sign_transaction(
        self,
        transaction: TransactionUnsigned,
        phrase: str,
        gas_fee: str,
        gas_limit: GasLimit,
    ) -> str:
        capability = classify_chain(transaction.signing_asset, self.config, self.defaults)

        validate_unsigned_transaction(transaction, capability.defaults)
        fee = build_fee(gas_fee, gas_limit, capability.base_denom)
        messages = build_messages(transaction, MessageContext(capability=capability, now_ms=self._clock()))

        scheme = scheme_for(capability, self._registries)
        scheme.check_messages(messages)

        public_key = await scheme.fetch_public_key(
            self.signer_provider,
            self.address_index,
            self.derivation_path_standard,
        )

        prepared = scheme.prepare(public_key, SignRequest(
            messages=messages,
            memo=sanitize_memo(transaction.memo),
            fee=fee,
            account_number=transaction.account_number,
            account_sequence=transaction.account_sequence,
        ))
        logger.debug(f"Prepared {len(messages)} message(s), sign doc {len(prepared.sign_bytes)} bytes")

        signature = await self.signer_provider.sign(prepared.sign_bytes)

        if self.verify_signatures:
            self._verify(prepared, signature)

        return prepared.bind(signature)

    def _verify(self, prepared: PreparedTransaction, signature: bytes) -> None:
        if not verify_signature(prepared.public_key, signature, prepared.sign_bytes):
            raise SignerError(
                "Signature does not match the sign document and public key",
                kind=SignerErrorKind.INVALID_SIGNATURE,
                details={"signatureLength": len(signature)},
            )


__all__ = [
    "LedgerTransactionSigner",
]
