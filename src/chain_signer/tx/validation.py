"""
Unsigned transaction validation.

Runs before any signer I/O so malformed input never reaches the device.
"""

from __future__ import annotations
import re
from typing import Any, List, Optional

from ..config import SigningDefaults
from ..runtime.errors import ErrorCode, ValidationError
from ..transactions import (
    CoinAmount,
    RestakeStakingAllRewardsTransactionUnsigned,
    TransactionUnsigned,
    WithdrawAllStakingRewardsUnsigned,
)

MAX_UINT64 = 0xFFFFFFFFFFFFFFFF

_BASE_AMOUNT_RE = re.compile(r"[0-9]+")


def is_base_amount(value: Any) -> bool:
    """True if ``value`` is a decimal integer string (base units, no sign, no fraction)."""
    return isinstance(value, str) and bool(_BASE_AMOUNT_RE.fullmatch(value))


def parse_uint64(value: Any, field_name: str) -> int:
    """
    Parse a decimal string or int into a uint64.

    Raises:
        ValidationError: If the value is not a non-negative integer that fits 64 bits
    """
    if isinstance(value, bool):
        raise ValidationError(f"{field_name} must be an integer", [f"{field_name}={value!r}"])
    if isinstance(value, int):
        parsed = value
    elif is_base_amount(value):
        parsed = int(value)
    else:
        raise ValidationError(f"{field_name} must be a non-negative integer", [f"{field_name}={value!r}"])
    if parsed < 0 or parsed > MAX_UINT64:
        raise ValidationError(f"{field_name} out of uint64 range", [f"{field_name}={value!r}"])
    return parsed


def validate_unsigned_transaction(tx: TransactionUnsigned, defaults: Optional[SigningDefaults] = None) -> None:
    """
    Validate an unsigned transaction.

    Args:
        tx: Transaction to validate
        defaults: Chain defaults providing the memo length limit

    Raises:
        ValidationError: With the full list of issues found
    """
    if tx is None:
        raise ValidationError("Transaction cannot be None")

    defaults = defaults or SigningDefaults()
    issues: List[str] = []
    code = ErrorCode.INVALID_TRANSACTION

    for field_name in ("account_number", "account_sequence"):
        value = getattr(tx, field_name)
        if not _fits_uint64(value):
            issues.append(f"{field_name} must be a uint64, got {value!r}")

    if len(tx.memo) > defaults.max_memo_characters:
        issues.append(f"memo exceeds {defaults.max_memo_characters} characters")
        code = ErrorCode.INVALID_MEMO

    amount_issues = _validate_amounts(tx)
    if amount_issues:
        code = ErrorCode.INVALID_AMOUNT
    issues.extend(amount_issues)

    if hasattr(tx, "proposal_id"):
        proposal_id = getattr(tx, "proposal_id")
        if not is_base_amount(proposal_id) or not _fits_uint64(int(proposal_id)):
            issues.append(f"proposal_id must be a uint64 decimal string, got {proposal_id!r}")
            code = ErrorCode.INVALID_PROPOSAL_ID

    if isinstance(tx, (RestakeStakingAllRewardsTransactionUnsigned, WithdrawAllStakingRewardsUnsigned)):
        if not tx.validator_address_list:
            issues.append("validator_address_list must not be empty")
    if isinstance(tx, RestakeStakingAllRewardsTransactionUnsigned):
        if len(tx.amount_list) != len(tx.validator_address_list):
            issues.append(
                f"amount_list has {len(tx.amount_list)} entries for "
                f"{len(tx.validator_address_list)} validators"
            )

    latest = getattr(tx, "latest_block_height", None)
    if latest is not None and not _fits_uint64(latest):
        issues.append(f"latest_block_height must be a uint64, got {latest!r}")

    if issues:
        raise ValidationError("Transaction validation failed", issues, code=code)


def _fits_uint64(value: int) -> bool:
    return 0 <= value <= MAX_UINT64


def _validate_amounts(tx: TransactionUnsigned) -> List[str]:
    issues: List[str] = []

    amount = getattr(tx, "amount", None)
    if isinstance(amount, str):
        if not is_base_amount(amount):
            issues.append(f"amount must be a decimal integer string, got {amount!r}")
    elif isinstance(amount, list):
        issues.extend(_validate_coin_list("amount", amount))

    for idx, value in enumerate(getattr(tx, "amount_list", None) or []):
        if not is_base_amount(value):
            issues.append(f"amount_list[{idx}] must be a decimal integer string, got {value!r}")

    initial_deposit = getattr(tx, "initial_deposit", None)
    if initial_deposit is not None:
        issues.extend(_validate_coin_list("initial_deposit", initial_deposit))

    return issues


def _validate_coin_list(field_name: str, coins: List[CoinAmount]) -> List[str]:
    issues: List[str] = []
    for idx, coin in enumerate(coins):
        if not is_base_amount(coin.amount):
            issues.append(f"{field_name}[{idx}].amount must be a decimal integer string, got {coin.amount!r}")
        if not coin.denom:
            issues.append(f"{field_name}[{idx}].denom is required")
    return issues


__all__ = [
    "MAX_UINT64",
    "is_base_amount",
    "parse_uint64",
    "validate_unsigned_transaction",
]
