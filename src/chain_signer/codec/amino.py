"""
Legacy amino JSON rendering of protobuf messages.

The renderer walks a message's descriptor and renders every field the way
the Cosmos SDK amino JSON codec does:

- 64-bit integers as decimal strings
- bytes as base64
- enums as their number
- ``google.protobuf.Any`` as a nested ``{"type", "value"}`` envelope

Per-type ``AminoRule`` rows carry the amino type name and the fields that
are left out (or given a fixed rendering) when unset.
"""

from __future__ import annotations
import base64
from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet, Mapping, Type

from google.protobuf.descriptor import FieldDescriptor
from google.protobuf.message import Message

from ..runtime.errors import EncodingError, ErrorCode
from .proto import ProtoAny, decode_message

_INT64_TYPES = frozenset({
    FieldDescriptor.TYPE_INT64,
    FieldDescriptor.TYPE_UINT64,
    FieldDescriptor.TYPE_SINT64,
    FieldDescriptor.TYPE_FIXED64,
    FieldDescriptor.TYPE_SFIXED64,
})

_ANY_FULL_NAME = ProtoAny.DESCRIPTOR.full_name


@dataclass(frozen=True)
class AminoRule:
    """
    Amino rendering rule for one message type.

    Attributes:
        amino_type: Name used in the ``{"type", "value"}`` envelope; empty for
            types only ever rendered nested inside another message
        omit_empty: Scalar fields dropped from the JSON when they hold the
            proto3 default
        unset: Fixed rendering for message fields that are not set; unset
            message fields not named here are dropped
    """
    amino_type: str = ""
    omit_empty: FrozenSet[str] = frozenset()
    unset: Mapping[str, Any] = field(default_factory=dict)


_DEFAULT_RULE = AminoRule()


class AminoCodec:
    """
    Renders messages to amino JSON using a table of ``AminoRule`` rows.

    Args:
        rules: Rules keyed by descriptor full name
        packed_types: Classes for ``Any`` payloads nested inside messages,
            keyed by type url
    """

    def __init__(self, rules: Mapping[str, AminoRule], packed_types: Mapping[str, Type[Message]]):
        self._rules = dict(rules)
        self._packed_types = dict(packed_types)

    def rule_for(self, message: Message) -> AminoRule:
        return self._rules.get(message.DESCRIPTOR.full_name, _DEFAULT_RULE)

    def amino_type(self, message: Message) -> str:
        return self.rule_for(message).amino_type

    def to_amino(self, message: Message) -> Dict[str, Any]:
        """
        Render as an amino ``{"type", "value"}`` envelope.

        Raises:
            EncodingError: If the message type has no amino name
        """
        rule = self.rule_for(message)
        if not rule.amino_type:
            raise EncodingError(f"{message.DESCRIPTOR.full_name} has no amino type",
                                code=ErrorCode.UNREGISTERED_TYPE)
        return {"type": rule.amino_type, "value": self.to_amino_value(message)}

    def to_amino_value(self, message: Message) -> Dict[str, Any]:
        """Render the fields of a message as an amino JSON object."""
        rule = self.rule_for(message)
        out: Dict[str, Any] = {}
        for fd in message.DESCRIPTOR.fields:
            value = getattr(message, fd.name)
            if fd.label == FieldDescriptor.LABEL_REPEATED:
                out[fd.name] = [self._render(fd, item) for item in value]
            elif fd.type == FieldDescriptor.TYPE_MESSAGE:
                if message.HasField(fd.name):
                    out[fd.name] = self._render(fd, value)
                elif fd.name in rule.unset:
                    out[fd.name] = rule.unset[fd.name]
            elif fd.name in rule.omit_empty and value == fd.default_value:
                continue
            else:
                out[fd.name] = self._render(fd, value)
        return out

    def unpack(self, packed: ProtoAny) -> Message:
        """
        Decode an ``Any`` payload nested inside a message.

        Raises:
            EncodingError: If the type url is unknown or the payload is malformed
        """
        cls = self._packed_types.get(packed.type_url)
        if cls is None:
            raise EncodingError(f"Unregistered nested type: {packed.type_url}",
                                code=ErrorCode.UNREGISTERED_TYPE)
        return decode_message(cls, packed.value)

    def _render(self, fd: FieldDescriptor, value: Any) -> Any:
        if fd.type == FieldDescriptor.TYPE_MESSAGE:
            if fd.message_type.full_name == _ANY_FULL_NAME:
                return self.to_amino(self.unpack(value))
            return self.to_amino_value(value)
        if fd.type == FieldDescriptor.TYPE_BYTES:
            return base64.b64encode(value).decode("ascii")
        if fd.type in _INT64_TYPES:
            return str(int(value))
        if fd.type == FieldDescriptor.TYPE_ENUM:
            return int(value)
        return value


__all__ = [
    "AminoRule",
    "AminoCodec",
]
