"""
Binary message registry.

Maps type urls to generated message classes so a transaction body can be
packed into ``Any`` values and unpacked again. The default registry knows
the cosmos-sdk bank, staking, distribution and gov messages; other modules
(IBC transfer, chain-main NFT) must be registered explicitly.
"""

from typing import Dict, Iterable, Optional, Sequence, Type

from google.protobuf.message import Message

from ..codec.proto import ProtoAny, decode_message, encode_message, pack_any, type_url
from ..runtime.errors import EncodingError, ErrorCode
from .messages import ALL_MESSAGES, COSMOS_SDK_MESSAGES
from .proto_types import TxBody


class Registry:
    """Type url to message class lookup used for body encoding."""

    def __init__(self, types: Optional[Iterable[Type[Message]]] = None):
        """
        Initialize the registry.

        Args:
            types: Message classes to register; defaults to the cosmos-sdk set
        """
        self._types: Dict[str, Type[Message]] = {}
        for cls in (COSMOS_SDK_MESSAGES if types is None else types):
            self.register(type_url(cls), cls)

    def register(self, type_url: str, cls: Type[Message]) -> None:
        """
        Register a message class under a type url.

        Args:
            type_url: Type url such as ``/cosmos.bank.v1beta1.MsgSend``
            cls: Generated message class for that type
        """
        self._types[type_url] = cls

    def lookup(self, type_url: str) -> Optional[Type[Message]]:
        """Return the class registered for a type url, if any."""
        return self._types.get(type_url)

    def is_registered(self, type_url: str) -> bool:
        return type_url in self._types

    def encode_any(self, msg: Message) -> ProtoAny:
        """
        Pack a message into an ``Any``.

        Raises:
            EncodingError: If the message's type url is not registered
        """
        url = type_url(msg)
        cls = self.lookup(url)
        if cls is None or not isinstance(msg, cls):
            raise EncodingError(
                f"Unregistered type url: {url}",
                code=ErrorCode.UNREGISTERED_TYPE,
                details={"typeUrl": url},
            )
        return pack_any(msg)

    def decode_any(self, packed: ProtoAny) -> Message:
        """
        Unpack an ``Any`` into its registered message class.

        Raises:
            EncodingError: If the type url is not registered or the payload is malformed
        """
        cls = self.lookup(packed.type_url)
        if cls is None:
            raise EncodingError(
                f"Unregistered type url: {packed.type_url}",
                code=ErrorCode.UNREGISTERED_TYPE,
                details={"typeUrl": packed.type_url},
            )
        return decode_message(cls, packed.value)

    def encode_tx_body(self, messages: Sequence[Message], memo: str) -> bytes:
        """
        Encode a ``TxBody`` from messages and memo.

        Args:
            messages: Messages in execution order
            memo: Transaction memo

        Returns:
            Protobuf-encoded body bytes
        """
        body = TxBody(messages=[self.encode_any(m) for m in messages], memo=memo)
        return encode_message(body)

    def __contains__(self, type_url: str) -> bool:
        return self.is_registered(type_url)

    def __len__(self) -> int:
        return len(self._types)


def full_registry() -> Registry:
    """Registry holding every message type this package signs."""
    return Registry(ALL_MESSAGES)


__all__ = [
    "Registry",
    "full_registry",
]
