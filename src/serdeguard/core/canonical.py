# src/serdeguard/core/canonical.py
"""
Canonical JSON serialization for violation fingerprints.

Serialization follows RFC 8785/JCS (rfc8785 package): sorted keys, no
whitespace, one spelling per value. Two identities that are equal as JSON
therefore hash to the same fingerprint whatever their key order.

Only JSON-native values are accepted. rfc8785 rejects anything else
(NaN, integers beyond 2**53, arbitrary objects).
"""

import hashlib
from typing import Any

import rfc8785


def canonical_json(obj: Any) -> str:
    """Produce canonical JSON for hashing.

    Args:
        obj: JSON-native data structure (dict, list, str, int, bool, None)

    Returns:
        Canonical JSON string (no whitespace, sorted keys)

    Raises:
        rfc8785.CanonicalizationError: If obj holds a value JSON cannot represent exactly
    """
    result: bytes = rfc8785.dumps(obj)
    return result.decode("utf-8")


def stable_hash(obj: Any) -> str:
    """Compute stable hash of object.

    Args:
        obj: Data structure to hash

    Returns:
        SHA-256 hex digest of canonical JSON
    """
    canonical = canonical_json(obj)
    return hashlib.sha256(canonical.encode("utf-8")).hexdigest()
