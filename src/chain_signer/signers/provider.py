"""
External signer provider interface.

The provider is the only component that touches key material. It lives
outside this package (a hardware wallet bridge in production, an in-memory
key in tests) and is reached through two suspending calls.
"""

from __future__ import annotations
from abc import ABC, abstractmethod

from ..enums import DerivationPathStandard


class SignerProvider(ABC):
    """
    Asynchronous signer boundary.

    Implementations raise ``SignerError`` with the matching
    ``SignerErrorKind`` when the device is unavailable, the user rejects
    the request or the request times out. The engine never retries and
    never catches these.
    """

    @abstractmethod
    async def get_public_key(
        self,
        address_index: int,
        chain_name: str,
        derivation_path_standard: DerivationPathStandard,
        compressed: bool,
    ) -> bytes:
        """
        Fetch the public key for an account.

        Args:
            address_index: BIP-44 address index
            chain_name: Chain the key is derived for; selects the coin type
            derivation_path_standard: Derivation path layout
            compressed: Request the compressed key form

        Returns:
            The device's public key encoding: a one-byte length prefix
            followed by the 33-byte compressed key

        Raises:
            SignerError: If the device cannot provide the key
        """
        pass

    @abstractmethod
    async def sign(self, message: bytes) -> bytes:
        """
        Sign sign-document bytes.

        Args:
            message: Bytes to sign, exactly as serialized

        Returns:
            Signature bytes, bound into the envelope unchanged

        Raises:
            SignerError: If the device cannot or will not sign
        """
        pass


__all__ = [
    "SignerProvider",
]
