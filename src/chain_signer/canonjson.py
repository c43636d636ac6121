"""
Canonical JSON for legacy amino sign documents.

Sorts object keys lexicographically and encodes with no extra whitespace so
the bytes a hardware signer displays and signs are reproducible bit-for-bit.
"""

import json
from typing import Any

_AMINO_ESCAPES = (
    ("&", "\\u0026"),
    ("<", "\\u003c"),
    (">", "\\u003e"),
)


def dumps_canonical(obj: Any) -> str:
    """
    Encode object as canonical JSON string.

    Deterministic key order, no extra whitespace, non-ASCII text kept as is.
    Recursively applies canonicalization to nested objects and arrays.

    Args:
        obj: Object to encode (dict, list, str, int, bool, None)

    Returns:
        Canonical JSON string with sorted keys and no extra whitespace
    """
    return json.dumps(_canonicalize(obj), separators=(',', ':'), ensure_ascii=False, sort_keys=True)


def escape_amino_characters(text: str) -> str:
    """
    Replace ``&``, ``<`` and ``>`` with their JSON unicode escapes.

    Matches the escaping the Go amino JSON encoder applies, which chain nodes
    use when re-deriving the sign bytes.
    """
    for char, escaped in _AMINO_ESCAPES:
        text = text.replace(char, escaped)
    return text


def dumps_amino_sign_bytes(obj: Any) -> bytes:
    """Canonical JSON with amino escaping, UTF-8 encoded."""
    return escape_amino_characters(dumps_canonical(obj)).encode("utf-8")


def _canonicalize(v: Any) -> Any:
    """
    Recursively canonicalize a value.

    - Maps: Sort keys lexicographically, recursively canonicalize values
    - Lists and tuples: Recursively canonicalize elements, preserve order
    - Primitives: Pass through unchanged

    Args:
        v: Value to canonicalize

    Returns:
        Canonicalized value ready for JSON encoding
    """
    if isinstance(v, dict):
        return {str(k): _canonicalize(v[k]) for k in sorted(v.keys(), key=str)}
    elif isinstance(v, (list, tuple)):
        return [_canonicalize(item) for item in v]
    else:
        return v
