"""
Chain Signer Error Model

This module provides the error taxonomy for the signing engine. Every error
aborts the signing call it was raised in; no partially signed result is ever
returned.
"""

from __future__ import annotations
from typing import Optional, Dict, Any, List
from enum import Enum, IntEnum


class ErrorCode(IntEnum):
    """Error codes grouped by origin."""

    # General errors (1-99)
    UNKNOWN = 1
    INTERNAL = 2

    # Validation errors (100-199)
    INVALID_TRANSACTION = 100
    INVALID_AMOUNT = 101
    INVALID_PROPOSAL_ID = 102
    INVALID_MEMO = 103
    INVALID_GAS = 104

    # Encoding errors (200-299)
    ENCODING_ERROR = 200
    UNREGISTERED_TYPE = 201
    UNMARSHAL_ERROR = 202

    # Signer errors (300-399)
    SIGNER_ERROR = 300
    DEVICE_UNAVAILABLE = 301
    USER_REJECTED = 302
    DEVICE_TIMEOUT = 303
    INVALID_PUBLIC_KEY = 304
    INVALID_SIGNATURE = 305

    # Scheme errors (400-499)
    UNSUPPORTED_SCHEME = 400


class ChainSignerError(Exception):
    """
    Base class for all signing engine errors.

    Carries a code, optional structured details and the underlying cause.
    """

    def __init__(self, message: str, code: ErrorCode = ErrorCode.UNKNOWN,
                 details: Optional[Dict[str, Any]] = None, cause: Optional[BaseException] = None):
        """
        Initialize a signing error.

        Args:
            message: Error message
            code: Error code
            details: Additional error details
            cause: Underlying exception that caused this error
        """
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}
        self.cause = cause

    def __str__(self) -> str:
        parts = [f"[{self.code.name}] {self.message}"]
        if self.details:
            parts.append(f"Details: {self.details}")
        if self.cause:
            parts.append(f"Caused by: {self.cause}")
        return " | ".join(parts)

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary representation."""
        result = {
            "code": self.code.value,
            "message": self.message,
        }
        if self.details:
            result["details"] = self.details
        if self.cause:
            result["cause"] = str(self.cause)
        return result


class ValidationError(ChainSignerError, ValueError):
    """Malformed amount, id, memo or gas input. Raised before any signer I/O."""

    def __init__(self, message: str, issues: Optional[List[str]] = None,
                 code: ErrorCode = ErrorCode.INVALID_TRANSACTION,
                 details: Optional[Dict[str, Any]] = None):
        super().__init__(message, code, details)
        self.issues = issues or []

    def __str__(self) -> str:
        base_message = f"[{self.code.name}] {self.message}"
        if self.issues:
            return f"{base_message}: {'; '.join(self.issues)}"
        return base_message


class EncodingError(ChainSignerError):
    """Protocol message or sign-doc construction failure."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.ENCODING_ERROR,
                 details: Optional[Dict[str, Any]] = None, cause: Optional[BaseException] = None):
        super().__init__(message, code, details, cause)


class SignerErrorKind(str, Enum):
    """Failure kinds reported by an external signer provider."""

    DEVICE_UNAVAILABLE = "DeviceUnavailable"
    USER_REJECTED = "UserRejected"
    DEVICE_TIMEOUT = "DeviceTimeout"
    INVALID_PUBLIC_KEY = "InvalidPublicKey"
    INVALID_SIGNATURE = "InvalidSignature"


_SIGNER_KIND_CODES = {
    SignerErrorKind.DEVICE_UNAVAILABLE: ErrorCode.DEVICE_UNAVAILABLE,
    SignerErrorKind.USER_REJECTED: ErrorCode.USER_REJECTED,
    SignerErrorKind.DEVICE_TIMEOUT: ErrorCode.DEVICE_TIMEOUT,
    SignerErrorKind.INVALID_PUBLIC_KEY: ErrorCode.INVALID_PUBLIC_KEY,
    SignerErrorKind.INVALID_SIGNATURE: ErrorCode.INVALID_SIGNATURE,
}


class SignerError(ChainSignerError):
    """Failure originating from the external signer provider."""

    def __init__(self, message: str, kind: SignerErrorKind = SignerErrorKind.DEVICE_UNAVAILABLE,
                 details: Optional[Dict[str, Any]] = None, cause: Optional[BaseException] = None):
        super().__init__(message, _SIGNER_KIND_CODES.get(kind, ErrorCode.SIGNER_ERROR), details, cause)
        self.kind = kind


class UnsupportedSchemeError(ChainSignerError):
    """The chain capability names a signing scheme this engine cannot build."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, ErrorCode.UNSUPPORTED_SCHEME, details)


class ErrorHandler:
    """Utility class for categorizing errors."""

    @staticmethod
    def is_retryable(error: Exception) -> bool:
        """
        Check whether the caller may restart the signing call.

        Device availability and timeouts are transient; validation, encoding
        and scheme errors are not. A restarted call may need a fresh sequence.
        """
        if isinstance(error, SignerError):
            return error.kind in (SignerErrorKind.DEVICE_UNAVAILABLE, SignerErrorKind.DEVICE_TIMEOUT)
        return False


__all__ = [
    "ErrorCode",
    "ChainSignerError",
    "ValidationError",
    "EncodingError",
    "SignerErrorKind",
    "SignerError",
    "UnsupportedSchemeError",
    "ErrorHandler",
]
