"""
Fee and memo normalization shared by both signing schemes.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, Tuple

from ..runtime.errors import ErrorCode, ValidationError
from .messages import Coin, to_amino_value
from .validation import is_base_amount, parse_uint64

# Characters that break rendering on downstream displays
MEMO_REPLACED_CHARACTERS = ("&", "<", ">")
MEMO_REPLACEMENT = "_"


def sanitize_memo(memo: str) -> str:
    """
    Replace every ``&``, ``<`` and ``>`` in a memo with ``_``.

    Idempotent: sanitizing a sanitized memo returns it unchanged.
    """
    for char in MEMO_REPLACED_CHARACTERS:
        memo = memo.replace(char, MEMO_REPLACEMENT)
    return memo


@dataclass(frozen=True)
class FeeDescriptor:
    """Fee paid in a single denomination plus the gas limit."""

    denom: str
    amount: str
    gas_limit: int

    def coins(self) -> Tuple[Coin, ...]:
        return (Coin(denom=self.denom, amount=self.amount),)

    def to_amino(self) -> Dict[str, Any]:
        """Fee as rendered in a legacy amino sign document; gas is a string."""
        return {
            "amount": [to_amino_value(coin) for coin in self.coins()],
            "gas": str(self.gas_limit),
        }


def build_fee(gas_fee: str, gas_limit: Any, denom: str) -> FeeDescriptor:
    """
    Assemble the fee descriptor.

    Args:
        gas_fee: Fee amount in base units, as a decimal string
        gas_limit: Gas limit, an integer or decimal string
        denom: Base denomination of the fee coin

    Returns:
        FeeDescriptor

    Raises:
        ValidationError: If the fee or gas limit is not a non-negative integer
    """
    if not is_base_amount(gas_fee):
        raise ValidationError(
            "Invalid gas fee",
            [f"gas fee must be a decimal integer string, got {gas_fee!r}"],
            code=ErrorCode.INVALID_GAS,
        )
    try:
        limit = parse_uint64(gas_limit, "gas_limit")
    except ValidationError as e:
        raise ValidationError("Invalid gas limit", e.issues, code=ErrorCode.INVALID_GAS)
    if not denom:
        raise ValidationError("Fee denomination is required", code=ErrorCode.INVALID_GAS)
    return FeeDescriptor(denom=denom, amount=gas_fee, gas_limit=limit)


__all__ = [
    "MEMO_REPLACED_CHARACTERS",
    "MEMO_REPLACEMENT",
    "sanitize_memo",
    "FeeDescriptor",
    "build_fee",
]
