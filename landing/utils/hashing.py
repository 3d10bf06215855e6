"""Deterministic hashing for normalized landing content.

This module provides:
- canonicalize_json: recursive key sort over a JSON value tree
- stable_stringify: compact, order-independent JSON encoding
- compute_content_sha: SHA256 fingerprint used for idempotent publishes
"""

import hashlib
import json
import math
from typing import Any, Optional


class FingerprintError(ValueError):
    """Raised when content cannot be fingerprinted.

    Fingerprinting absent content means a caller skipped the validity check;
    it is a programming error, not a content problem.
    """


def canonicalize_json(value: Any, path: str = "$") -> Any:
    """Return a copy of a JSON value tree with every object's keys sorted.

    Arrays keep their element order. Tuples are treated as arrays. Any value
    that is not a JSON type (object, array, string, number, bool, null) is
    rejected so two different inputs can never encode to the same text.

    Args:
        value: JSON value to canonicalize
        path: Location of value within the document (for error messages)

    Returns:
        Canonical tree (plain dicts, lists and scalars)

    Raises:
        FingerprintError: On non-string keys, non-finite floats or non-JSON types
    """
    if value is None or isinstance(value, (str, bool, int)):
        return value

    if isinstance(value, float):
        if not math.isfinite(value):
            raise FingerprintError(f"Non-finite number at {path}")
        return value

    if isinstance(value, (list, tuple)):
        return [canonicalize_json(item, f"{path}[{index}]") for index, item in enumerate(value)]

    if isinstance(value, dict):
        for key in value:
            if not isinstance(key, str):
                raise FingerprintError(f"Non-string key {key!r} at {path}")
        return {key: canonicalize_json(value[key], f"{path}.{key}") for key in sorted(value)}

    raise FingerprintError(f"Unsupported value of type {type(value).__name__} at {path}")


def stable_stringify(value: Any) -> str:
    """Encode a JSON value so equal trees always produce identical text.

    Example:
        >>> stable_stringify({"b": 1, "a": [2, {"d": 3, "c": 4}]})
        '{"a":[2,{"c":4,"d":3}],"b":1}'
    """
    return json.dumps(
        canonicalize_json(value),
        ensure_ascii=False,
        separators=(",", ":"),
        allow_nan=False,
    )


def compute_content_sha(normalized: Any) -> str:
    """Compute the fingerprint of normalized content.

    Accepts a NormalizedContent model (anything exposing to_json_dict()) or
    an already-dumped JSON tree.

    Args:
        normalized: Normalized landing content

    Returns:
        Lowercase hexadecimal SHA256 digest (64 characters)

    Raises:
        FingerprintError: If normalized is None or not JSON-encodable
    """
    if normalized is None:
        raise FingerprintError("Cannot compute a fingerprint for absent content")

    tree = normalized.to_json_dict() if hasattr(normalized, "to_json_dict") else normalized
    return hash_string(stable_stringify(tree))


def compare_sha(sha1: Optional[str], sha2: Optional[str]) -> bool:
    """Whether two fingerprints match. An absent fingerprint never matches."""
    if not sha1 or not sha2:
        return False
    return sha1 == sha2


def hash_string(value: str) -> str:
    """SHA256 of a UTF-8 string as lowercase hex."""
    return hashlib.sha256(value.encode("utf-8")).hexdigest()
