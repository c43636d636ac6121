"""
Runtime support for the signing engine.
"""

from .errors import (
    ErrorCode,
    ChainSignerError,
    ValidationError,
    EncodingError,
    SignerErrorKind,
    SignerError,
    UnsupportedSchemeError,
    ErrorHandler,
)

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
